# path: src/monitoring/events.py
"""
Event schemas for navigation monitoring.

This module defines:
- EventType enum
- MonitoringEvent (structured events published on an EventBus)

All events are JSON-serializable via `.to_dict()` and are intended
for use with monitoring.bus.EventBus and monitoring.logger.JsonFileLogger.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum, auto
from typing import Any, Dict, Optional


class EventType(Enum):
    """Typed monitoring events emitted by navigation components."""

    # A route was planned (possibly empty: already at the destination)
    ROUTE_FOUND = auto()

    # The search finished without reaching the target
    ROUTE_NOT_FOUND = auto()

    # A search was refused because its arguments were unusable
    INVALID_INPUT = auto()

    # Generic log messages
    LOG = auto()


@dataclass
class MonitoringEvent:
    """
    Runtime event emitted by a navigation component.

    All fields must be JSON-safe.
    """

    ts: float                   # UNIX timestamp (seconds)
    module: str                 # Source module string ("navigation.mover", ...)
    event_type: EventType
    message: str                # Short human-readable description
    payload: Dict[str, Any]     # Structured data (coords, cost, explored count)
    correlation_id: Optional[str] = None  # Groups events per agent / request

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dict for loggers."""
        data = asdict(self)
        data["event_type"] = self.event_type.name
        return data
