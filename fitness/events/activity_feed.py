"""Recent-activity feed fed by the event bus.

Subscribes to plan.recommended, plan.merged and session.logged and keeps a
bounded in-memory buffer of flattened entries the API serves from
/api/events. Each entry carries an increasing integer id so clients can poll
with since=<last id seen> and only receive newer entries.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone
import logging

from .Event_Bus import (
    GLOBAL_EVENT_BUS, PLAN_MERGED, PLAN_RECOMMENDED, SESSION_LOGGED
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 200
_started = False


def _summarize(event_name: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    if event_name == PLAN_RECOMMENDED:
        return {
            'goal': payload.get('goal'),
            'policy': payload.get('policy'),
            'activities': len(payload['plan']),
        }
    if event_name == PLAN_MERGED:
        return {
            'activities': len(payload['plan']),
            'first': payload.get('first'),
            'second': payload.get('second'),
        }
    if event_name == SESSION_LOGGED:
        return {
            'name': payload['profile'].name,
            'label': payload['activity'].label,
            'duration_minutes': payload['activity'].duration_minutes,
            'calories': round(payload['calories'], 2),
        }
    return {}


def _record(event_name: str, payload: Any):
    global _next_id
    details = _summarize(event_name, payload) if isinstance(payload, dict) else {}
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        evt.update(details)
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe the feed once."""
    global _started
    if _started:
        return
    for name in (PLAN_RECOMMENDED, PLAN_MERGED, SESSION_LOGGED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True
    logger.info("Activity feed subscribed to plan and session events")


def get_events(since: Optional[int] = None) -> Dict[str, Any]:
    """Entries newer than 'since' (exclusive), or the whole buffer when since is None."""
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events', 'MAX_EVENTS']
