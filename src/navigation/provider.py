# grid construction over a plane + nearest-node lookup
# src/navigation/provider.py
"""
GridProvider: builds a NavGrid laid over a rectangular plane and answers
nearest-node queries.

Layout:
    Nodes are spread evenly across the plane's bounds, corner to corner.
    Grid x follows world x, grid y follows world z, and every node sits
    `vertical_offset` above the plane.

The search engine never uses closest_node; it exists so callers can turn
world destinations into grid nodes before asking for a route.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .grid import NavGrid
from .node import Node, WorldPos


@dataclass
class PlaneLayout:
    """
    Node layout over a plane.

    Parameters:
        nodes_x, nodes_z:
            Node counts along world x and world z.
        center:
            World position of the plane's center.
        size:
            (width, depth) of the plane in world units.
        vertical_offset:
            Height of every node above the plane.
    """

    nodes_x: int = 10
    nodes_z: int = 10
    center: WorldPos = (0.0, 0.0, 0.0)
    size: Tuple[float, float] = (10.0, 10.0)
    vertical_offset: float = 0.01

    @property
    def spacing(self) -> Tuple[float, float]:
        """
        Distance between neighbouring nodes along x and z.

        A single node on an axis gets the full plane extent as spacing.
        """
        width, depth = self.size
        sx = width / (self.nodes_x - 1) if self.nodes_x > 1 else width
        sz = depth / (self.nodes_z - 1) if self.nodes_z > 1 else depth
        return sx, sz

    @property
    def bottom_left(self) -> WorldPos:
        cx, cy, cz = self.center
        width, depth = self.size
        return (cx - width / 2, cy, cz - depth / 2)

    def position_for(self, x: int, z: int) -> WorldPos:
        """World position of grid cell (x, z)."""
        bx, by, bz = self.bottom_left
        sx, sz = self.spacing
        return (bx + x * sx, by + self.vertical_offset, bz + z * sz)


def closest_node(grid: NavGrid, world_pos: WorldPos) -> Node:
    """
    Return the node whose world position is nearest to `world_pos`.

    Full scan in grid scan order; on ties the first minimum found wins.
    """
    closest: Optional[Node] = None
    min_dist = math.inf

    for node in grid.iter_nodes():
        dist = math.dist(world_pos, node.world_pos)
        if dist < min_dist:
            min_dist = dist
            closest = node

    # A NavGrid always has at least one node, so a non-finite query
    # position is the only way to get here without a match.
    if closest is None:
        raise ValueError(f"No node is comparable to world position {world_pos!r}")
    return closest


class GridProvider:
    """
    Owner of a NavGrid plus the nearest-node query surface.

    Consumers:
        - search engines read `grid`
        - movement glue calls `closest_node` to turn world positions
          into start/target nodes
    """

    def __init__(self, grid: NavGrid, layout: Optional[PlaneLayout] = None) -> None:
        self._grid = grid
        self._layout = layout

    @classmethod
    def from_layout(cls, layout: PlaneLayout) -> "GridProvider":
        grid = NavGrid(layout.nodes_x, layout.nodes_z, layout.position_for)
        return cls(grid, layout)

    @property
    def grid(self) -> NavGrid:
        return self._grid

    @property
    def layout(self) -> Optional[PlaneLayout]:
        return self._layout

    def closest_node(self, world_pos: WorldPos) -> Node:
        return closest_node(self._grid, world_pos)
