# src/navigation/tracing.py
"""
Tracing for search queries.

Keeps a rolling buffer of per-search records and emits one structured
log line per search, so callers can see how much of the grid each query
explored and what it cost.

It does NOT:
- Change search results
- Make movement decisions
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from .node import Coord, Node
from .pathfinder import PathResult


@dataclass
class SearchTraceRecord:
    """Structured record of a single find_path call."""

    timestamp: float           # wall-clock time (time.time())
    duration_s: float          # search duration in seconds

    start: Coord
    target: Coord

    success: bool
    reason: Optional[str]

    route_length: int
    cost: float
    explored: int              # nodes written during the search


class SearchTracer:
    """
    In-memory search tracer with logging.

    Responsibilities:
    - Keep a rolling buffer of recent SearchTraceRecord entries.
    - Emit a single structured log line per search (info level).
    """

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        max_records: int = 10_000,
    ) -> None:
        self._logger = logger or logging.getLogger("navigation.search")
        self._records: Deque[SearchTraceRecord] = deque(maxlen=max_records)

    def record(
        self,
        *,
        start: Node,
        target: Node,
        result: PathResult,
        duration_s: float,
    ) -> None:
        """Record a completed search, successful or not."""
        try:
            record = SearchTraceRecord(
                timestamp=time.time(),
                duration_s=duration_s,
                start=start.coord,
                target=target.coord,
                success=result.success,
                reason=result.reason,
                route_length=len(result.path),
                cost=result.cost,
                explored=result.explored,
            )
        except Exception:
            # Tracing must never crash the caller.
            self._logger.exception("Failed to build SearchTraceRecord")
            return

        self._records.append(record)

        self._logger.info(
            "find_path start=%s target=%s success=%s reason=%s steps=%d "
            "cost=%.4f explored=%d duration=%.6fs",
            record.start,
            record.target,
            record.success,
            record.reason,
            record.route_length,
            record.cost,
            record.explored,
            record.duration_s,
        )

    def get_records(self) -> List[SearchTraceRecord]:
        """Return a snapshot of all currently buffered records."""
        return list(self._records)
