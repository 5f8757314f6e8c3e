"""Event helper utilities.

Quick import:
    from packlist.events.event_helpers import publish_duplicate_detected, publish_list_completed
"""
from __future__ import annotations
from typing import Iterable, Any
from .Event_Bus import publish, ITEMS_DUPLICATE_DETECTED, LIST_COMPLETED

__all__ = ['publish_duplicate_detected', 'publish_list_completed',
           'ITEMS_DUPLICATE_DETECTED', 'LIST_COMPLETED']


def publish_duplicate_detected(list_id: str, name: str, duplicates: Iterable[dict]):
    """Publish an items.duplicate_detected event for a rejected add."""
    publish(ITEMS_DUPLICATE_DETECTED, {
        'list_id': list_id,
        'name': name,
        'duplicates': list(duplicates),
    })


def publish_list_completed(packing_list: Any):
    """Publish a list.completed event once every item of the list is packed."""
    publish(LIST_COMPLETED, {
        'list_id': packing_list.id,
        'name': packing_list.name,
        'total_items': len(packing_list.all_items()),
    })
