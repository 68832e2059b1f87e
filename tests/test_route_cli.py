# tests/test_route_cli.py
"""
Tests for the route CLI entry point.
"""

from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from cli.route_cli import EXIT_INVALID, EXIT_OK, main


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "nav.yaml"
    path.write_text(
        """
grid:
  nodes_x: 5
  nodes_z: 5
  plane:
    center: [0.0, 0.0, 0.0]
    size: [4.0, 4.0]
  vertical_offset: 0.0
logging:
  level: WARNING
""",
        encoding="utf-8",
    )
    return path


def test_cli_plans_between_grid_coordinates(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["--config", str(config_path), "--start", "0", "0", "--target", "4", "4"])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "5.657" in out
    assert "T" in out


def test_cli_plans_between_world_positions_and_logs_events(
    config_path: Path, tmp_path: Path
) -> None:
    events_log = tmp_path / "out" / "events.log"

    code = main(
        [
            "--config", str(config_path),
            "--from-world", "-2", "0", "-2",
            "--to-world", "2", "0", "-2",
            "--events-log", str(events_log),
        ]
    )

    assert code == EXIT_OK
    lines = events_log.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event_type"] == "ROUTE_FOUND"
    assert event["payload"]["target"] == [4, 0]
    assert event["payload"]["cost"] == pytest.approx(4.0)


def test_cli_plans_between_grid_coordinates_and_logs_events(
    config_path: Path, tmp_path: Path
) -> None:
    events_log = tmp_path / "grid-events.log"

    code = main(
        [
            "--config", str(config_path),
            "--start", "0", "0",
            "--target", "4", "4",
            "--events-log", str(events_log),
        ]
    )

    assert code == EXIT_OK
    lines = events_log.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event_type"] == "ROUTE_FOUND"
    assert event["payload"]["start"] == [0, 0]
    assert event["payload"]["target"] == [4, 4]
    assert event["payload"]["cost"] == pytest.approx(4 * math.sqrt(2))


def test_cli_rejects_out_of_bounds_node(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["--config", str(config_path), "--start", "0", "0", "--target", "9", "9"])

    assert code == EXIT_INVALID
    assert "out_of_bounds" in capsys.readouterr().out


def test_cli_reports_missing_config(tmp_path: Path) -> None:
    code = main(["--config", str(tmp_path / "missing.yaml"), "--start", "0", "0", "--target", "1", "1"])

    assert code == EXIT_INVALID


def test_cli_requires_endpoints(config_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(config_path)])

    assert exc_info.value.code == 2
