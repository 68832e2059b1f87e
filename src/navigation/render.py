# rich-based rendering of grids and routes
# src/navigation/render.py
"""
Terminal rendering for routes.

- render_grid: character map of the grid with the route drawn on it
- route_table: per-step table (coordinate, world position, running cost)

Both return rich renderables; printing is left to the caller's Console.
"""

from __future__ import annotations

from typing import Optional, Set

from rich.table import Table
from rich.text import Text

from .grid import NavGrid
from .node import Coord, Node, euclidean
from .pathfinder import PathResult

# Cell glyphs and their styles
_FREE = (".", "dim")
_ROUTE = ("*", "bold cyan")
_START = ("S", "bold green")
_TARGET = ("T", "bold red")


def render_grid(
    grid: NavGrid,
    result: PathResult,
    start: Optional[Node] = None,
) -> Text:
    """
    Draw the grid one character per cell, highest y row first.

    Legend: '.' free, '*' route, 'S' start, 'T' target.
    """
    route: Set[Coord] = set(result.coords)
    target: Optional[Coord] = result.path[-1].coord if result.path else None
    start_coord: Optional[Coord] = start.coord if start is not None else None

    text = Text()
    for y in range(grid.height - 1, -1, -1):
        for x in range(grid.width):
            coord = (x, y)
            if coord == start_coord:
                glyph, style = _START
            elif coord == target:
                glyph, style = _TARGET
            elif coord in route:
                glyph, style = _ROUTE
            else:
                glyph, style = _FREE
            text.append(glyph, style=style)
        if y > 0:
            text.append("\n")
    return text


def route_table(result: PathResult, start: Optional[Node] = None) -> Table:
    """
    Tabulate a route step by step.

    The running cost column needs `start` for the first step; without it
    costs are accumulated from the first route node.
    """
    table = Table(title="Route", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("node")
    table.add_column("world position")
    table.add_column("cost", justify="right")

    total = 0.0
    previous = start
    for index, node in enumerate(result.path, start=1):
        if previous is not None:
            total += euclidean(previous, node)
        previous = node
        wx, wy, wz = node.world_pos
        table.add_row(
            str(index),
            f"({node.x}, {node.y})",
            f"({wx:.2f}, {wy:.2f}, {wz:.2f})",
            f"{total:.3f}",
        )
    return table
