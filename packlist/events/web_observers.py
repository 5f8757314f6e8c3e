"""Web-facing observers for packing list events.

Subscribes to the GLOBAL_EVENT_BUS for items.duplicate_detected and
list.completed and keeps an in-memory ring buffer of recent events that the
web layer exposes at /api/events.

  * Each event gets an auto-increment integer id (cursor); clients poll with
    since=<last_id_seen> to receive only newer events.
  * Guarded by a Lock, per process.
  * MAX_EVENTS caps memory.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, ITEMS_DUPLICATE_DETECTED, LIST_COMPLETED

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ'),
        }
        if isinstance(payload, dict):
            for k in ('list_id', 'name', 'total_items'):
                if k in payload:
                    evt[k] = payload[k]
            if 'duplicates' in payload:
                evt['duplicates'] = [d.get('name', '') for d in payload['duplicates']]
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    GLOBAL_EVENT_BUS.subscribe(ITEMS_DUPLICATE_DETECTED, _record)
    GLOBAL_EVENT_BUS.subscribe(LIST_COMPLETED, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive), or the whole buffer when since is None.

    next_cursor is the largest id seen so the client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
