# src/navigation/__init__.py
"""
Grid navigation for agents moving over a 2D plane.

Provides:
- Node / NavGrid: search topology with per-node search state
- AStar / find_path: A* search returning a PathResult
- GridProvider / PlaneLayout / closest_node: grid construction and
  nearest-node lookup
- Navigator / route_to_waypoints: world positions -> routes -> waypoints
- SearchTracer: per-search trace records
"""

from __future__ import annotations

from .errors import InvalidInputError, NavError
from .grid import NavGrid, PositionFn
from .mover import Navigator, route_to_waypoints
from .node import Coord, Node, WorldPos, euclidean
from .pathfinder import AStar, PathResult, find_path
from .provider import GridProvider, PlaneLayout, closest_node
from .tracing import SearchTraceRecord, SearchTracer

__all__ = [
    "Node",
    "Coord",
    "WorldPos",
    "euclidean",
    "NavGrid",
    "PositionFn",
    "AStar",
    "PathResult",
    "find_path",
    "GridProvider",
    "PlaneLayout",
    "closest_node",
    "Navigator",
    "route_to_waypoints",
    "SearchTracer",
    "SearchTraceRecord",
    "NavError",
    "InvalidInputError",
]
