# NavConfig and section dataclasses
# src/env/schema.py

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class LayoutConfig:
    """How grid nodes are spread over the walkable plane."""
    nodes_x: int
    nodes_z: int
    center: Tuple[float, float, float]
    size: Tuple[float, float]          # (width, depth) in world units
    vertical_offset: float = 0.01


@dataclass
class NavigationConfig:
    """Knobs for the movement glue consuming routes."""
    keep_agent_height: bool = True     # waypoints use the agent's own height


@dataclass
class MonitoringConfig:
    """Where structured route events go, if anywhere."""
    events_log: Optional[str] = None   # JSONL path; None disables the file sink


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class NavConfig:
    """Resolved configuration for one navigation setup."""
    layout: LayoutConfig
    navigation: NavigationConfig = field(default_factory=NavigationConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
