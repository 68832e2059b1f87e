# A* search over NavGrid
# src/navigation/pathfinder.py
"""
A* pathfinding over NavGrid.

- Euclidean distance for both edge cost and heuristic (admissible and
  consistent on this graph, so closed nodes are never reopened).
- 8-directional (Moore) neighbours, no obstacles.
- Search state is written directly onto the grid's nodes and restored
  afterwards from a record of the nodes the search touched, so repeated
  queries on one grid cost only the region they explore.

Tie-break: among open nodes with equal f, the one that entered the open
set first wins. Together with the fixed neighbour order of NavGrid this
decides which of several equal-cost routes is returned.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
from dataclasses import dataclass, field
from time import perf_counter
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

from .errors import InvalidInputError
from .grid import NavGrid
from .node import Coord, Node, euclidean

if TYPE_CHECKING:
    from .tracing import SearchTracer


log = logging.getLogger(__name__)


@dataclass
class PathResult:
    """
    Structured result for a pathfinding attempt.

    path:     route from (excluding) start to (including) target;
              empty when start == target or when no route exists
    success:  False only when no route exists
    cost:     accumulated cost of the route (0.0 without a route)
    explored: number of nodes the search wrote state onto
    reason:   "no_route" when success is False
    """

    path: List[Node] = field(default_factory=list)
    success: bool = True
    cost: float = 0.0
    explored: int = 0
    reason: str | None = None

    @property
    def coords(self) -> List[Coord]:
        return [node.coord for node in self.path]


class AStar:
    """
    Reusable A* search engine.

    Owns the record of nodes touched by the in-flight search. One engine
    runs one search at a time; the grid's search_lock additionally keeps
    engines from overlapping on the same grid.
    """

    def __init__(
        self,
        *,
        tracer: Optional["SearchTracer"] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._explored: List[Node] = []
        self._explored_set: Set[Node] = set()
        self._lock = threading.Lock()
        self._tracer = tracer
        self._log = logger or log

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_path(self, grid: NavGrid, start: Node, target: Node) -> PathResult:
        """
        Find the lowest-cost route from `start` to `target` on `grid`.

        Returns a PathResult; an unreachable target gives success=False.

        Raises:
            InvalidInputError if grid, start or target is missing, or if
            start/target are not nodes of `grid`.
        """
        self._validate(grid, start, target)

        with self._lock, grid.search_lock:
            t0 = perf_counter()
            try:
                result = self._search(grid, start, target)
            finally:
                self._reset_explored()
            duration = perf_counter() - t0

        self._log.debug(
            "AStar.find_path %s -> %s success=%s steps=%d explored=%d",
            start.coord,
            target.coord,
            result.success,
            len(result.path),
            result.explored,
        )

        if self._tracer is not None:
            self._tracer.record(
                start=start,
                target=target,
                result=result,
                duration_s=duration,
            )

        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _validate(self, grid: NavGrid, start: Node, target: Node) -> None:
        if grid is None:
            raise InvalidInputError(code="missing_grid")

        for role, node in (("start", start), ("target", target)):
            if node is None:
                self._log.warning("find_path called without %s node", role)
                raise InvalidInputError(code="missing_node", details={"role": role})
            if not grid.contains(node):
                self._log.warning(
                    "find_path %s node %r does not belong to %r", role, node, grid
                )
                raise InvalidInputError(
                    code="foreign_node",
                    details={"role": role, "coord": node.coord},
                )

    def _search(self, grid: NavGrid, start: Node, target: Node) -> PathResult:
        self._explored.clear()
        self._explored_set.clear()

        # Heap entries: (f, first-insertion sequence, node). A node keeps
        # its sequence number across improvements; superseded entries are
        # skipped when popped.
        open_heap: List[Tuple[float, int, Node]] = []
        open_seq: Dict[Node, int] = {}
        closed: Set[Node] = set()
        counter = itertools.count()

        start.g = 0.0
        start.h = euclidean(start, target)
        open_seq[start] = next(counter)
        heapq.heappush(open_heap, (start.f, open_seq[start], start))
        self._track(start)

        while open_heap:
            f, _, current = heapq.heappop(open_heap)

            if current not in open_seq or f > current.f:
                continue

            if current is target:
                return PathResult(
                    path=self._reconstruct_path(start, target),
                    success=True,
                    cost=target.g,
                    explored=len(self._explored),
                )

            del open_seq[current]
            closed.add(current)

            for neighbor in grid.neighbors(current):
                if neighbor in closed:
                    continue

                tentative_g = current.g + euclidean(current, neighbor)

                if tentative_g < neighbor.g:
                    neighbor.g = tentative_g
                    neighbor.h = euclidean(neighbor, target)
                    neighbor.parent = current
                    self._track(neighbor)

                    if neighbor not in open_seq:
                        open_seq[neighbor] = next(counter)
                    heapq.heappush(
                        open_heap, (neighbor.f, open_seq[neighbor], neighbor)
                    )

        return PathResult(
            path=[],
            success=False,
            explored=len(self._explored),
            reason="no_route",
        )

    def _track(self, node: Node) -> None:
        if node not in self._explored_set:
            self._explored_set.add(node)
            self._explored.append(node)

    @staticmethod
    def _reconstruct_path(start: Node, target: Node) -> List[Node]:
        """Walk parent links back from target; start itself is excluded."""
        path: List[Node] = []
        current = target
        while current is not start:
            path.append(current)
            current = current.parent
        path.reverse()
        return path

    def _reset_explored(self) -> None:
        """Restore every node this search wrote state onto."""
        for node in self._explored:
            node.reset()
        self._explored.clear()
        self._explored_set.clear()


def find_path(grid: NavGrid, start: Node, target: Node) -> PathResult:
    """Run a single A* search with a fresh engine."""
    return AStar().find_path(grid, start, target)
