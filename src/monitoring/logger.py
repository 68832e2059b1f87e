# JSON logger subscribing to EventBus
"""
Structured event logging.

Provides:
- JsonFileLogger: subscribes to an EventBus and writes MonitoringEvents as JSONL.
- log_event: convenience helper for publishing MonitoringEvents via the EventBus.

Usage:

    from pathlib import Path
    from monitoring.bus import EventBus
    from monitoring.logger import JsonFileLogger, log_event
    from monitoring.events import EventType

    bus = EventBus()
    sink = JsonFileLogger(Path("logs/navigation/events.log"), bus)

    log_event(
        bus=bus,
        module="example.module",
        event_type=EventType.LOG,
        message="Something happened",
        payload={"foo": "bar"},
    )
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from .bus import EventBus
from .events import EventType, MonitoringEvent

log = logging.getLogger(__name__)


class JsonFileLogger:
    """
    JSON-lines logger for MonitoringEvent instances.

    - Subscribes to an EventBus and writes one JSON object per line.
    - Writes UTF-8 and creates the parent directory if needed.
    """

    def __init__(self, path: Path, bus: EventBus) -> None:
        self._path = path
        self._bus = bus
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("a", encoding="utf-8")
        bus.subscribe(self._on_event)

    @property
    def path(self) -> Path:
        return self._path

    def _on_event(self, event: MonitoringEvent) -> None:
        line = json.dumps(event.to_dict(), ensure_ascii=False)
        try:
            self._file.write(line + "\n")
            self._file.flush()
        except (OSError, ValueError):
            # Disk full or handle already closed; keep the caller running.
            log.exception("Failed to write event to %s", self._path)

    def close(self) -> None:
        """Unsubscribe and close the file handle. Call at shutdown."""
        self._bus.unsubscribe(self._on_event)
        self._file.close()


def log_event(
    bus: EventBus,
    module: str,
    event_type: EventType,
    message: str,
    payload: Optional[Dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """
    Create and publish a MonitoringEvent.

        log_event(
            bus=self._bus,
            module="navigation.mover",
            event_type=EventType.ROUTE_FOUND,
            message="Route planned",
            payload={"start": [0, 0], "target": [4, 0], "cost": 4.0},
        )
    """
    event = MonitoringEvent(
        ts=time.time(),
        module=module,
        event_type=event_type,
        message=message,
        payload=payload or {},
        correlation_id=correlation_id,
    )
    bus.publish(event)
