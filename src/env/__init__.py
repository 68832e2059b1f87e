# src/env/__init__.py
"""
Configuration loading: config/nav.yaml -> NavConfig.
"""

from __future__ import annotations

from .loader import DEFAULT_CONFIG_PATH, layout_from_config, load_nav_config
from .schema import (
    LayoutConfig,
    LoggingConfig,
    MonitoringConfig,
    NavConfig,
    NavigationConfig,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "load_nav_config",
    "layout_from_config",
    "NavConfig",
    "LayoutConfig",
    "NavigationConfig",
    "MonitoringConfig",
    "LoggingConfig",
]
