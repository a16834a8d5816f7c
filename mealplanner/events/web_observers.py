"""Web-facing observers for pantry events.

Subscribes to the GLOBAL_EVENT_BUS for:
  - pantry.low_stock
  - pantry.near_expiry

and keeps an in-memory ring buffer of recent events that the API serves at
/api/pantry/alerts, so clients can poll for alerts.

  * Each event gets an auto-increment integer id (cursor); clients request
    only newer events with since=<last_id_seen>.
  * A Lock guards the buffer; the buffer is per process.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, PANTRY_LOW_STOCK, PANTRY_NEAR_EXPIRY, PantryEvent

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events
_started = False


def _record(event: PantryEvent):
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event.event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
            'item_id': event.item.id,
            'name': event.item.name,
            'quantity': event.item.quantity,
        }
        # stock_level, or days_left + threshold
        evt.update((k, v) for k, v in event._asdict().items() if k != 'item')
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]
    logger.debug("Recorded %s event %d", event.event_name, evt['id'])


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    GLOBAL_EVENT_BUS.subscribe(PANTRY_LOW_STOCK, _record)
    GLOBAL_EVENT_BUS.subscribe(PANTRY_NEAR_EXPIRY, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns every buffered event.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
