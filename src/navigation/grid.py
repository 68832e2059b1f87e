# rectangular node grid used as search topology
# src/navigation/grid.py
"""
NavGrid: rectangular mapping from integer (x, y) to Node.

This module does not know where world positions come from. It only:
- Builds width x height nodes once, asking a pluggable position callback
  for each node's world-space payload.
- Exposes bounds, membership and Moore-neighbourhood queries.
- Owns the lock that serialises searches over its nodes.

Topology and node identity never change after construction. Only the
per-node search overlay (g, h, parent) is mutated, by the search engine,
while it holds `search_lock`.
"""

from __future__ import annotations

import threading
from typing import Callable, Iterator, List, Optional

from .node import Node, WorldPos

# Signature for a payload callback:
#   position_fn(x, y) -> (wx, wy, wz)
PositionFn = Callable[[int, int], WorldPos]

# Moore neighbourhood offsets in enumeration order: dx outer, dy inner.
# Equal-cost routes are chosen by insertion order, so this order is fixed.
_MOORE_OFFSETS = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


def _flat_position(x: int, y: int) -> WorldPos:
    """Default payload: grid coordinates laid flat on the x-z plane."""
    return (float(x), 0.0, float(y))


class NavGrid:
    """
    Navigation grid of fixed dimensions.

    Responsibilities:
    - Hold exactly one Node per cell, addressed as nodes[x][y].
    - Provide neighbour lists for pathfinding.
    - Provide the lock searches must hold while they annotate nodes.

    It does NOT:
    - Model obstacles or terrain cost (every cell is traversable).
    - Run searches itself.
    """

    def __init__(
        self,
        width: int,
        height: int,
        position_fn: Optional[PositionFn] = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be >= 1, got {width}x{height}")

        self._width = int(width)
        self._height = int(height)

        place = position_fn if position_fn is not None else _flat_position
        self._nodes: List[List[Node]] = [
            [Node(x, y, place(x, y)) for y in range(self._height)]
            for x in range(self._width)
        ]

        # Held by the search engine for the full duration of a search.
        self.search_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return self._width * self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def node_at(self, x: int, y: int) -> Optional[Node]:
        """Return the node at (x, y), or None outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return self._nodes[x][y]

    def contains(self, node: Optional[Node]) -> bool:
        """
        True if `node` is the very object stored in this grid.

        A node with matching coordinates from another grid does not count.
        """
        if node is None:
            return False
        return self.node_at(node.x, node.y) is node

    def iter_nodes(self) -> Iterator[Node]:
        """Yield every node in scan order: x outer, y inner."""
        for column in self._nodes:
            yield from column

    def neighbors(self, node: Node) -> List[Node]:
        """
        Return the Moore neighbourhood of `node` clipped to grid bounds.

        Order is dx in (-1, 0, 1) outer, dy in (-1, 0, 1) inner.
        """
        result: List[Node] = []
        for dx, dy in _MOORE_OFFSETS:
            nx = node.x + dx
            ny = node.y + dy
            if self.in_bounds(nx, ny):
                result.append(self._nodes[nx][ny])
        return result

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def reset_all(self) -> None:
        """
        Restore every node's search overlay.

        Searches clean up after themselves; this is for callers that
        annotated nodes by hand (tests, debugging).
        """
        for node in self.iter_nodes():
            node.reset()

    def __repr__(self) -> str:
        return f"NavGrid({self._width}x{self._height})"
