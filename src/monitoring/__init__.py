# src/monitoring/__init__.py
"""
Monitoring for navigation: structured events, an in-process bus and a
JSONL sink, plus the shared logging setup.
"""

from __future__ import annotations

from .bus import EventBus
from .events import EventType, MonitoringEvent
from .logger import JsonFileLogger, log_event
from .logging_config import configure_logging

__all__ = [
    "EventBus",
    "EventType",
    "MonitoringEvent",
    "JsonFileLogger",
    "log_event",
    "configure_logging",
]
