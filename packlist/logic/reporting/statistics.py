"""Packing progress statistics for a single list."""
from __future__ import annotations
from typing import Dict, Any
from packlist.domain.PackingList import PackingList
from packlist.utilities.constants import PRIORITIES

__all__ = ["compute_list_statistics"]


def compute_list_statistics(packing_list: PackingList) -> Dict[str, Any]:
    """Aggregate item counts for a list.

    Returns:
        {
          'total_items': int,
          'packed_items': int,
          'completion_percentage': int (0-100, rounded; 0 when the list is empty),
          'items_by_priority': { priority: count } for every known priority,
          'items_by_category': { category_id: { name, total, packed } }
        }
    """
    total = 0
    packed = 0
    by_priority: Dict[str, int] = {p: 0 for p in PRIORITIES}
    by_category: Dict[str, Dict[str, Any]] = {}

    for category in packing_list.categories:
        cat_stats = {'name': category.name, 'total': 0, 'packed': 0}
        for item in category.items:
            total += 1
            cat_stats['total'] += 1
            by_priority[item.priority] = by_priority.get(item.priority, 0) + 1
            if item.packed:
                packed += 1
                cat_stats['packed'] += 1
        by_category[category.id] = cat_stats

    return {
        'total_items': total,
        'packed_items': packed,
        'completion_percentage': int(packed * 100 / total + 0.5) if total else 0,  # half rounds up
        'items_by_priority': by_priority,
        'items_by_category': by_category,
    }
