from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

import yaml

from navigation.provider import PlaneLayout

from .schema import (
    LayoutConfig,
    LoggingConfig,
    MonitoringConfig,
    NavConfig,
    NavigationConfig,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "nav.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML config file and require a mapping at the top."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _float_tuple(raw: Any, length: int, name: str) -> Tuple[float, ...]:
    if not isinstance(raw, Sequence) or isinstance(raw, str) or len(raw) != length:
        raise ValueError(f"'{name}' must be a list of {length} numbers, got {raw!r}")
    try:
        return tuple(float(v) for v in raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{name}' must contain only numbers, got {raw!r}") from exc


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    raw = cfg.get(name) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Section '{name}' must be a mapping, got {type(raw)}")
    return raw


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_nav_config(path: Optional[Path] = None) -> NavConfig:
    """Main entry point: returns a validated NavConfig."""
    cfg = _load_yaml(Path(path) if path is not None else DEFAULT_CONFIG_PATH)

    if "grid" not in cfg:
        raise KeyError("Config must define a 'grid' section.")
    grid_raw = _section(cfg, "grid")
    plane_raw = grid_raw.get("plane") or {}

    layout = LayoutConfig(
        nodes_x=int(grid_raw.get("nodes_x", 10)),
        nodes_z=int(grid_raw.get("nodes_z", 10)),
        center=_float_tuple(plane_raw.get("center", [0.0, 0.0, 0.0]), 3, "grid.plane.center"),
        size=_float_tuple(plane_raw.get("size", [10.0, 10.0]), 2, "grid.plane.size"),
        vertical_offset=float(grid_raw.get("vertical_offset", 0.01)),
    )

    nav_raw = _section(cfg, "navigation")
    navigation = NavigationConfig(
        keep_agent_height=bool(nav_raw.get("keep_agent_height", True)),
    )

    mon_raw = _section(cfg, "monitoring")
    monitoring = MonitoringConfig(events_log=mon_raw.get("events_log"))

    log_raw = _section(cfg, "logging")
    logging_cfg = LoggingConfig(level=str(log_raw.get("level", "INFO")).upper())

    _validate_config(layout, logging_cfg)

    return NavConfig(
        layout=layout,
        navigation=navigation,
        monitoring=monitoring,
        logging=logging_cfg,
    )


def layout_from_config(cfg: LayoutConfig) -> PlaneLayout:
    """Build the PlaneLayout a GridProvider is constructed from."""
    return PlaneLayout(
        nodes_x=cfg.nodes_x,
        nodes_z=cfg.nodes_z,
        center=cfg.center,
        size=cfg.size,
        vertical_offset=cfg.vertical_offset,
    )


def _validate_config(
    layout: LayoutConfig,
    logging_cfg: LoggingConfig,
) -> None:
    """Minimal sanity checks before anything is built from the config."""
    if layout.nodes_x < 1 or layout.nodes_z < 1:
        raise ValueError(
            f"Grid needs at least one node per axis, got {layout.nodes_x}x{layout.nodes_z}"
        )
    if any(extent < 0 for extent in layout.size):
        raise ValueError(f"Plane size must be non-negative, got {layout.size}")
    if logging_cfg.level not in _LOG_LEVELS:
        raise ValueError(f"Invalid logging level: {logging_cfg.level}")
