"""Simple Event Bus / Observer implementation for packing list notifications.

Event names:
  items.duplicate_detected -> payload {"list_id": str, "name": str, "duplicates": [ {id, name, score, label}, ... ]}
  list.completed -> payload {"list_id": str, "name": str, "total_items": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
ITEMS_DUPLICATE_DETECTED = "items.duplicate_detected"
LIST_COMPLETED = "list.completed"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback in self._subscribers.get(event_name, []):
			self._subscribers[event_name].remove(callback)

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# subscriber errors never reach the publisher
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'publish', 'ITEMS_DUPLICATE_DETECTED', 'LIST_COMPLETED']
