"""PackingList aggregate: categories of items, packing progress and template support."""
from typing import List, Optional, Tuple

from packlist.domain.Category import Category
from packlist.domain.Item import Item, new_id, now_stamp


class PackingList:
    def __init__(self, name: str = "", description: str = "", categories: Optional[List[Category]] = None,
                 tags: Optional[List[str]] = None, is_template: bool = False,
                 template_id: Optional[str] = None, id: Optional[str] = None,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None,
                 completed_at: Optional[str] = None):
        self.id = id or new_id()
        self.name = name
        self.description = description
        self.categories = categories[:] if categories else []
        self.tags = tags[:] if tags else []
        self.is_template = is_template
        self.template_id = template_id
        self.created_at = created_at or now_stamp()
        self.updated_at = updated_at or self.created_at
        self.completed_at = completed_at

    # --- Categories -------------------------------------------------------
    def add_category(self, category: Category) -> Category:
        category.order = len(self.categories)
        self.categories.append(category)
        self.touch()
        return category

    def remove_category(self, category_id: str) -> Category:
        '''
        Removes a category together with its items and renumbers the rest.
        '''
        category = self.find_category(category_id)
        if category is None:
            raise KeyError(category_id)
        self.categories.remove(category)
        for index, cat in enumerate(self.categories):
            cat.order = index
        self.refresh_completion()
        self.touch()
        return category

    def find_category(self, category_id: str) -> Optional[Category]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    # --- Items ------------------------------------------------------------
    def all_items(self) -> List[Item]:
        '''
        Returns every item of the list, in category order.
        '''
        return [item for category in self.categories for item in category.items]

    def find_item(self, item_id: str) -> Tuple[Category, Item]:
        for category in self.categories:
            item = category.find_item(item_id)
            if item is not None:
                return category, item
        raise KeyError(item_id)

    def add_item(self, category_id: str, item: Item) -> Item:
        category = self.find_category(category_id)
        if category is None:
            raise KeyError(category_id)
        category.add_item(item)
        self.refresh_completion()
        self.touch()
        return item

    def remove_item(self, item_id: str) -> Item:
        category, _ = self.find_item(item_id)
        item = category.remove_item(item_id)
        self.refresh_completion()
        self.touch()
        return item

    def move_item(self, item_id: str, to_category_id: str) -> Item:
        target = self.find_category(to_category_id)
        if target is None:
            raise KeyError(to_category_id)
        source, _ = self.find_item(item_id)
        item = source.remove_item(item_id)
        target.add_item(item)
        self.touch()
        return item

    def toggle_item_packed(self, item_id: str) -> Item:
        _, item = self.find_item(item_id)
        item.toggle_packed()
        self.refresh_completion()
        self.touch()
        return item

    # --- Progress ---------------------------------------------------------
    def is_complete(self) -> bool:
        items = self.all_items()
        return bool(items) and all(item.packed for item in items)

    def refresh_completion(self):
        if self.is_complete():
            if not self.completed_at:
                self.completed_at = now_stamp()
        else:
            self.completed_at = None

    def touch(self):
        self.updated_at = now_stamp()

    # --- Copies -----------------------------------------------------------
    def copy(self, name: str, is_template: Optional[bool] = None, unpack: bool = False) -> "PackingList":
        '''
        Returns a deep copy with fresh ids for the list, its categories and items.
        unpack=True resets every packed flag (templates, lists created from templates).
        '''
        categories = []
        for category in self.categories:
            items = []
            for item in category.items:
                data = item.to_dict()
                data.update(id=None, created_at=None, updated_at=None)
                if unpack:
                    data["packed"] = False
                items.append(Item.from_dict(data))
            categories.append(Category(name=category.name, color=category.color, icon=category.icon,
                                       order=category.order, items=items, collapsed=category.collapsed))
        copied = PackingList(
            name=name,
            description=self.description,
            categories=categories,
            tags=self.tags,
            is_template=self.is_template if is_template is None else is_template,
        )
        copied.refresh_completion()
        return copied

    def __str__(self) -> str:
        cats = "\n".join(str(c) for c in self.categories)
        return f"Packing List '{self.name}':\n{cats}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        '''
        Builds a PackingList from its JSON dictionary. Ignores unknown keys.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        d["categories"] = [Category.from_dict(c) for c in d.get("categories", [])]
        allowed = {"id", "name", "description", "categories", "tags", "is_template",
                   "template_id", "created_at", "updated_at", "completed_at"}
        return PackingList(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "tags": self.tags,
            "is_template": self.is_template,
            "template_id": self.template_id,
            "categories": [c.to_dict() for c in self.categories],
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "completed_at": self.completed_at,
        }
