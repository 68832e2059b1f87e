# tests/test_monitoring_logger.py
"""
Tests for monitoring.logger.JsonFileLogger, log_event and the logging setup.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import JsonFileLogger, log_event
from monitoring.logging_config import configure_logging


def test_json_file_logger_writes_valid_json(tmp_path: Path) -> None:
    bus = EventBus()
    log_path = tmp_path / "events.log"

    sink = JsonFileLogger(log_path, bus)

    log_event(
        bus=bus,
        module="test.module",
        event_type=EventType.ROUTE_FOUND,
        message="Route planned",
        payload={"start": [0, 0], "target": [2, 2], "cost": 2.83},
        correlation_id="agent-1",
    )

    sink.close()

    lines = log_path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1

    data = json.loads(lines[0])

    assert data["module"] == "test.module"
    assert data["event_type"] == "ROUTE_FOUND"
    assert data["message"] == "Route planned"
    assert data["payload"]["target"] == [2, 2]
    assert data["correlation_id"] == "agent-1"
    assert isinstance(data["ts"], (int, float))


def test_logger_parent_dir_created(tmp_path: Path) -> None:
    log_path = tmp_path / "nested" / "logs" / "events.log"

    bus = EventBus()
    sink = JsonFileLogger(log_path, bus)

    log_event(bus=bus, module="test.module", event_type=EventType.LOG, message="hello")
    sink.close()

    assert log_path.exists()
    assert log_path.read_text(encoding="utf-8").strip()


def test_closed_logger_stops_receiving(tmp_path: Path) -> None:
    log_path = tmp_path / "events.log"
    bus = EventBus()
    sink = JsonFileLogger(log_path, bus)
    sink.close()

    log_event(bus=bus, module="test.module", event_type=EventType.LOG, message="late")

    assert log_path.read_text(encoding="utf-8") == ""


def test_configure_logging_keeps_existing_handlers() -> None:
    root = logging.getLogger()
    marker = logging.NullHandler()
    root.addHandler(marker)
    try:
        before = list(root.handlers)
        configure_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(marker)
