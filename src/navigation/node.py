# graph vertex + cost model for grid search
# src/navigation/node.py
"""
Node: a single grid vertex.

A Node has fixed integer grid coordinates, an opaque world-space payload
and a small overlay of per-search state (g, h, parent) that the A* engine
writes while a search is in flight and restores afterwards.

Nodes are created once when a NavGrid is built and live as long as the
grid does. Equality is identity: a grid stores exactly one Node per cell.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

# (x, y) integer grid coordinates
Coord = Tuple[int, int]

# (x, y, z) world-space position attached by the grid provider
WorldPos = Tuple[float, float, float]


class Node:
    """
    Graph vertex with coordinates, payload and search-scoped state.

    Search-scoped fields:
        g:      accumulated cost from the search start (inf when unvisited)
        h:      heuristic estimate to the current target (0 when unvisited)
        parent: predecessor on the best known path (None when unvisited)
    """

    __slots__ = ("_x", "_y", "world_pos", "g", "h", "parent")

    def __init__(self, x: int, y: int, world_pos: WorldPos = (0.0, 0.0, 0.0)) -> None:
        self._x = int(x)
        self._y = int(y)
        self.world_pos: WorldPos = world_pos

        self.g: float = math.inf
        self.h: float = 0.0
        self.parent: Optional[Node] = None

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def coord(self) -> Coord:
        return (self._x, self._y)

    @property
    def f(self) -> float:
        """Priority used by the open set; always derived from g and h."""
        return self.g + self.h

    @property
    def is_pristine(self) -> bool:
        """True when the node carries no search state."""
        return self.g == math.inf and self.h == 0.0 and self.parent is None

    def reset(self) -> None:
        """Restore the search overlay to its unvisited defaults."""
        self.g = math.inf
        self.h = 0.0
        self.parent = None

    def __repr__(self) -> str:
        return f"Node({self._x}, {self._y})"


def euclidean(a: Node, b: Node) -> float:
    """
    Straight-line distance between two nodes' grid coordinates.

    Used for both edge cost and heuristic: cardinal steps cost 1.0,
    diagonal steps cost sqrt(2).
    """
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)
