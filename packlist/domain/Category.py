"""Category domain entity: an ordered group of items inside a packing list."""
from typing import List, Optional

from packlist.domain.Item import Item, new_id, now_stamp


class Category:
    def __init__(self, name: str = "", color: str = "", icon: str = "", order: int = 0,
                 items: Optional[List[Item]] = None, collapsed: bool = False,
                 id: Optional[str] = None, created_at: Optional[str] = None,
                 updated_at: Optional[str] = None):
        self.id = id or new_id()
        self.name = name
        self.color = color
        self.icon = icon
        self.order = order
        self.items = items[:] if items else []
        self.collapsed = collapsed
        self.created_at = created_at or now_stamp()
        self.updated_at = updated_at or self.created_at
        for item in self.items:
            item.category_id = self.id

    def add_item(self, item: Item):
        item.category_id = self.id
        self.items.append(item)
        self.updated_at = now_stamp()
        return item

    def remove_item(self, item_id: str) -> Item:
        item = self.find_item(item_id)
        if item is None:
            raise KeyError(item_id)
        self.items.remove(item)
        self.updated_at = now_stamp()
        return item

    def find_item(self, item_id: str) -> Optional[Item]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def packed_count(self) -> int:
        return sum(1 for item in self.items if item.packed)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"{self.name} ({self.packed_count()}/{len(self.items)}):\n\t{items_str}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        d["items"] = [Item.from_dict(i) for i in d.get("items", [])]
        allowed = {"id", "name", "color", "icon", "order", "items", "collapsed", "created_at", "updated_at"}
        return Category(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "icon": self.icon,
            "order": self.order,
            "collapsed": self.collapsed,
            "items": [item.to_dict() for item in self.items],
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
