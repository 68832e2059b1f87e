# EventBus for monitoring events
"""
In-process pub/sub for MonitoringEvent objects.

Used by:
    - navigation.mover.Navigator (route outcomes)
    - monitoring.logger.JsonFileLogger (JSONL sink)
    - the route CLI

There is no shared module-level bus: components that publish or listen
receive an EventBus instance explicitly.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, List

from .events import MonitoringEvent

log = logging.getLogger(__name__)

SubscriberFn = Callable[[MonitoringEvent], None]


class EventBus:
    """
    Thread-safe event bus.

    Each publish iterates over a snapshot of subscribers taken under the
    lock, so subscribers may call back into the bus.
    """

    def __init__(self) -> None:
        self._subscribers: List[SubscriberFn] = []
        self._lock = Lock()

    def subscribe(self, fn: SubscriberFn) -> None:
        """Register a subscriber to receive MonitoringEvent instances."""
        with self._lock:
            self._subscribers.append(fn)

    def unsubscribe(self, fn: SubscriberFn) -> None:
        """
        Remove a previously registered subscriber.

        Safe to call even if `fn` is not present.
        """
        with self._lock:
            if fn in self._subscribers:
                self._subscribers.remove(fn)

    def publish(self, event: MonitoringEvent) -> None:
        """
        Publish a MonitoringEvent to all subscribers.

        A subscriber that raises is logged and skipped; the remaining
        subscribers still receive the event.
        """
        with self._lock:
            subscribers = list(self._subscribers)

        for fn in subscribers:
            try:
                fn(event)
            except Exception:
                log.exception(
                    "Subscriber %r failed on %s event", fn, event.event_type.name
                )

    def clear(self) -> None:
        """Remove all subscribers. Mostly useful for tests."""
        with self._lock:
            self._subscribers.clear()
