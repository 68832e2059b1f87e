# src/cli/route_cli.py
"""
Plan a single route over the configured grid and print it.

Examples:

    gridnav-route --start 0 0 --target 9 9
    gridnav-route --from-world -4.8 0 -5 --to-world 3.2 0 1.1 --log-level DEBUG

Exit codes: 0 route found, 1 no route, 2 invalid input or config.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console, Group
from rich.panel import Panel

from env.loader import DEFAULT_CONFIG_PATH, layout_from_config, load_nav_config
from monitoring.bus import EventBus
from monitoring.logger import JsonFileLogger
from monitoring.logging_config import configure_logging
from navigation.errors import InvalidInputError
from navigation.mover import Navigator
from navigation.node import Node
from navigation.pathfinder import AStar, PathResult
from navigation.provider import GridProvider
from navigation.render import render_grid, route_table
from navigation.tracing import SearchTracer

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_ROUTE = 1
EXIT_INVALID = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plan an A* route over the navigation grid.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to nav.yaml (default: config/nav.yaml)",
    )

    nodes = parser.add_argument_group("grid coordinates")
    nodes.add_argument("--start", nargs=2, type=int, metavar=("X", "Y"))
    nodes.add_argument("--target", nargs=2, type=int, metavar=("X", "Y"))

    world = parser.add_argument_group("world positions (nearest node is used)")
    world.add_argument("--from-world", nargs=3, type=float, metavar=("X", "Y", "Z"))
    world.add_argument("--to-world", nargs=3, type=float, metavar=("X", "Y", "Z"))

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level override (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--events-log",
        type=Path,
        default=None,
        help="Write route events as JSONL to this file",
    )
    return parser


def _node_or_error(provider: GridProvider, xy: List[int], role: str) -> Node:
    node = provider.grid.node_at(xy[0], xy[1])
    if node is None:
        raise InvalidInputError(
            code="out_of_bounds",
            details={"role": role, "coord": tuple(xy), "grid": repr(provider.grid)},
        )
    return node


def _print_result(
    console: Console,
    provider: GridProvider,
    start: Node,
    result: PathResult,
) -> None:
    if not result.success:
        console.print(
            Panel(
                f"No route from {start.coord} (explored {result.explored} nodes)",
                title="find_path",
                style="red",
            )
        )
        return

    summary = (
        f"{len(result.path)} steps, cost {result.cost:.3f}, "
        f"explored {result.explored} nodes"
    )
    console.print(
        Panel(
            Group(render_grid(provider.grid, result, start), route_table(result, start)),
            title=f"Route {start.coord} -> {result.path[-1].coord if result.path else start.coord}",
            subtitle=summary,
        )
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    console = Console()

    try:
        cfg = load_nav_config(args.config)
    except (FileNotFoundError, KeyError, ValueError) as exc:
        console.print(f"[red]Config error:[/red] {exc}")
        return EXIT_INVALID

    configure_logging(args.log_level or cfg.logging.level)

    provider = GridProvider.from_layout(layout_from_config(cfg.layout))
    engine = AStar(tracer=SearchTracer())

    bus = EventBus()
    events_path = args.events_log or (
        Path(cfg.monitoring.events_log) if cfg.monitoring.events_log else None
    )
    sink = JsonFileLogger(events_path, bus) if events_path is not None else None

    navigator = Navigator(
        provider,
        engine=engine,
        bus=bus,
        keep_agent_height=cfg.navigation.keep_agent_height,
    )

    try:
        if args.from_world is not None or args.to_world is not None:
            if args.from_world is None or args.to_world is None:
                parser.error("--from-world and --to-world must be given together")
            agent_pos = tuple(args.from_world)
            start = provider.closest_node(agent_pos)
            result = navigator.plan(agent_pos, tuple(args.to_world))
        else:
            if args.start is None or args.target is None:
                parser.error("either --start/--target or --from-world/--to-world is required")
            start = _node_or_error(provider, args.start, "start")
            target = _node_or_error(provider, args.target, "target")
            result = navigator.plan_nodes(start, target)
    except InvalidInputError as exc:
        console.print(f"[red]Invalid input:[/red] {exc}")
        return EXIT_INVALID
    finally:
        if sink is not None:
            sink.close()

    _print_result(console, provider, start, result)
    return EXIT_OK if result.success else EXIT_NO_ROUTE


if __name__ == "__main__":
    raise SystemExit(main())
