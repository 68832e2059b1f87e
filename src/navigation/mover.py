# turn world destinations into routes and waypoints
# src/navigation/mover.py
"""
Mover: glue between world positions and the search engine.

Owns only:
- world position -> nearest node -> A* route
- route -> list of world-space waypoints for a movement component

It does NOT step agents frame by frame or resolve collisions between
agents; that belongs to whatever consumes the waypoints.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event

from .errors import InvalidInputError
from .node import Node, WorldPos
from .pathfinder import AStar, PathResult
from .provider import GridProvider

log = logging.getLogger(__name__)


def route_to_waypoints(
    result: PathResult,
    *,
    height: Optional[float] = None,
) -> List[WorldPos]:
    """
    Convert a PathResult into world-space waypoints.

    If `height` is given it replaces each waypoint's vertical component,
    so an agent keeps its own height while following the route.
    """
    if not result.success or not result.path:
        return []

    waypoints: List[WorldPos] = []
    for node in result.path:
        wx, wy, wz = node.world_pos
        if height is not None:
            wy = height
        waypoints.append((float(wx), float(wy), float(wz)))
    return waypoints


class Navigator:
    """
    Plan routes between world positions over a provider's grid.

    One Navigator may serve many agents; searches on the shared grid
    are serialised by the engine.
    """

    def __init__(
        self,
        provider: GridProvider,
        *,
        engine: Optional[AStar] = None,
        bus: Optional[EventBus] = None,
        keep_agent_height: bool = True,
    ) -> None:
        self._provider = provider
        self._engine = engine if engine is not None else AStar()
        self._bus = bus
        self._keep_agent_height = keep_agent_height

    @property
    def provider(self) -> GridProvider:
        return self._provider

    def plan(
        self,
        agent_pos: WorldPos,
        destination: WorldPos,
        *,
        correlation_id: Optional[str] = None,
    ) -> PathResult:
        """
        Plan a route from the node nearest `agent_pos` to the node
        nearest `destination`.
        """
        start = self._provider.closest_node(agent_pos)
        target = self._provider.closest_node(destination)
        return self.plan_nodes(start, target, correlation_id=correlation_id)

    def plan_nodes(
        self,
        start: Node,
        target: Node,
        *,
        correlation_id: Optional[str] = None,
    ) -> PathResult:
        """Plan a route between two nodes of the provider's grid."""
        payload = {"start": list(start.coord), "target": list(target.coord)}

        try:
            result = self._engine.find_path(self._provider.grid, start, target)
        except InvalidInputError as exc:
            self._publish(
                EventType.INVALID_INPUT,
                "Route request rejected",
                {**payload, "code": exc.code},
                correlation_id,
            )
            raise

        if result.success:
            self._publish(
                EventType.ROUTE_FOUND,
                "Route planned",
                {
                    **payload,
                    "steps": len(result.path),
                    "cost": result.cost,
                    "explored": result.explored,
                },
                correlation_id,
            )
        else:
            log.info("There is no path to %s", target.world_pos)
            self._publish(
                EventType.ROUTE_NOT_FOUND,
                "No route to destination",
                {**payload, "reason": result.reason, "explored": result.explored},
                correlation_id,
            )

        return result

    def waypoints_to(
        self,
        agent_pos: WorldPos,
        destination: WorldPos,
        *,
        correlation_id: Optional[str] = None,
    ) -> List[WorldPos]:
        """
        Plan and return waypoints.

        With keep_agent_height the waypoints sit at the agent's current
        height; otherwise they keep the node payload heights.
        """
        result = self.plan(agent_pos, destination, correlation_id=correlation_id)
        height = agent_pos[1] if self._keep_agent_height else None
        return route_to_waypoints(result, height=height)

    def _publish(
        self,
        event_type: EventType,
        message: str,
        payload: dict,
        correlation_id: Optional[str],
    ) -> None:
        if self._bus is None:
            return
        log_event(
            bus=self._bus,
            module="navigation.mover",
            event_type=event_type,
            message=message,
            payload=payload,
            correlation_id=correlation_id,
        )
