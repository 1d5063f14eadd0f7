"""In-process event bus for plan and session notifications.

Event names used so far:
  plan.recommended -> payload {"goal": str, "policy": str, "plan": Plan}
  plan.merged      -> payload {"plan": Plan, "first": int, "second": int}
  session.logged   -> payload {"profile": Profile, "activity": Activity, "calories": float, "line": str}

Subscribers are callables taking (event_name, payload); fitness.events.activity_feed
is the one registered at application startup.
"""
from __future__ import annotations
from collections import defaultdict
from typing import Callable, Any, Dict, List, Tuple
import logging

logger = logging.getLogger(__name__)

PLAN_RECOMMENDED = "plan.recommended"
PLAN_MERGED = "plan.merged"
SESSION_LOGGED = "session.logged"

Subscriber = Callable[[str, Any], None]


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Subscriber) -> Subscriber:
        handlers = self._subscribers[event_name]
        if callback not in handlers:
            handlers.append(callback)
        return callback

    def unsubscribe(self, event_name: str, callback: Subscriber) -> bool:
        handlers = self._subscribers.get(event_name, [])
        if callback in handlers:
            handlers.remove(callback)
            return True
        return False

    def subscribers(self, event_name: str) -> Tuple[Subscriber, ...]:
        return tuple(self._subscribers.get(event_name, ()))

    def publish(self, event_name: str, payload: Any) -> int:
        """Deliver payload to every subscriber; returns how many handled it without error."""
        delivered = 0
        for handler in self.subscribers(event_name):
            try:
                handler(event_name, payload)
            except Exception:
                logger.exception("Subscriber %r failed on %s", handler, event_name)
            else:
                delivered += 1
        return delivered


GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> int:
    """Publish an event on the global bus."""
    return GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
    'EventBus', 'GLOBAL_EVENT_BUS', 'publish',
    'PLAN_RECOMMENDED', 'PLAN_MERGED', 'SESSION_LOGGED'
]
