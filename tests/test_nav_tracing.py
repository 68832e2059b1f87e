# tests/test_nav_tracing.py
"""
Tests for SearchTracer wired into the A* engine.
"""

from __future__ import annotations

import logging

import pytest

from navigation.grid import NavGrid
from navigation.pathfinder import AStar
from navigation.tracing import SearchTracer


def test_tracer_records_each_search(caplog: pytest.LogCaptureFixture) -> None:
    grid = NavGrid(5, 1)
    tracer = SearchTracer()
    engine = AStar(tracer=tracer)

    with caplog.at_level(logging.INFO, logger="navigation.search"):
        engine.find_path(grid, grid.node_at(0, 0), grid.node_at(4, 0))
        engine.find_path(grid, grid.node_at(2, 0), grid.node_at(2, 0))

    records = tracer.get_records()
    assert len(records) == 2

    first = records[0]
    assert first.start == (0, 0)
    assert first.target == (4, 0)
    assert first.success is True
    assert first.reason is None
    assert first.route_length == 4
    assert first.cost == pytest.approx(4.0)
    assert first.explored > 0
    assert first.duration_s >= 0.0

    assert records[1].route_length == 0
    assert caplog.text.count("find_path start=") == 2


def test_tracer_buffer_is_bounded() -> None:
    grid = NavGrid(2, 2)
    tracer = SearchTracer(max_records=3)
    engine = AStar(tracer=tracer)

    for _ in range(5):
        engine.find_path(grid, grid.node_at(0, 0), grid.node_at(1, 1))

    assert len(tracer.get_records()) == 3


def test_tracer_uses_injected_logger(caplog: pytest.LogCaptureFixture) -> None:
    grid = NavGrid(2, 1)
    tracer = SearchTracer(logger=logging.getLogger("tests.tracer"))
    engine = AStar(tracer=tracer)

    with caplog.at_level(logging.INFO, logger="tests.tracer"):
        engine.find_path(grid, grid.node_at(0, 0), grid.node_at(1, 0))

    assert any(r.name == "tests.tracer" for r in caplog.records)
