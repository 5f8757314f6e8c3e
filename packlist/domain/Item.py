"""Item domain entity: a single thing to pack (name, quantity, packed flag, priority, notes)."""
from datetime import datetime
from typing import Optional
from uuid import uuid4

from packlist.utilities.constants import DEFAULT_PRIORITY, PRIORITIES, TIMESTAMP_FORMAT


def new_id() -> str:
    return str(uuid4())


def now_stamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class Item:
    EDITABLE = ("name", "quantity", "packed", "priority", "notes", "description")

    def __init__(self, name: str = "", quantity: int = 1, packed: bool = False,
                 priority: str = DEFAULT_PRIORITY, notes: str = "", description: str = "",
                 category_id: str = "", id: Optional[str] = None,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        if priority not in PRIORITIES:
            raise ValueError(f"Unknown priority: {priority}")
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        self.id = id or new_id()
        self.name = name
        self.quantity = quantity
        self.packed = packed
        self.priority = priority
        self.notes = notes
        self.description = description
        self.category_id = category_id
        self.created_at = created_at or now_stamp()
        self.updated_at = updated_at or self.created_at

    def toggle_packed(self) -> bool:
        '''Flips the packed flag and returns the new value.'''
        self.packed = not self.packed
        self.touch()
        return self.packed

    def update(self, **fields):
        '''Applies the given editable fields; unknown keys raise ValueError.'''
        unknown = set(fields) - set(self.EDITABLE)
        if unknown:
            raise ValueError(f"Cannot update item fields: {', '.join(sorted(unknown))}")
        if "priority" in fields and fields["priority"] not in PRIORITIES:
            raise ValueError(f"Unknown priority: {fields['priority']}")
        if "quantity" in fields and fields["quantity"] < 0:
            raise ValueError(f"Quantity cannot be negative: {fields['quantity']}")
        for key, value in fields.items():
            setattr(self, key, value)
        self.touch()
        return self

    def touch(self):
        self.updated_at = now_stamp()

    def __str__(self) -> str:
        mark = "x" if self.packed else " "
        parts = [f"[{mark}] {self.name} x{self.quantity}", self.priority]
        if self.notes:
            parts.append(f"Notes: {self.notes}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Item object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "name", "quantity", "packed", "priority", "notes", "description",
                   "category_id", "created_at", "updated_at"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered.setdefault("name", "")
        if filtered.get("priority") not in PRIORITIES:
            filtered["priority"] = DEFAULT_PRIORITY
        return Item(**filtered)

    def to_dict(self):
        '''Converts the Item object to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "packed": self.packed,
            "priority": self.priority,
            "notes": self.notes,
            "description": self.description,
            "category_id": self.category_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
