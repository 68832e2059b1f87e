# tests/test_env_loader.py
"""
Tests for env.loader: nav.yaml -> NavConfig.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from env.loader import DEFAULT_CONFIG_PATH, layout_from_config, load_nav_config
from navigation.provider import PlaneLayout


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "nav.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_full_config(tmp_path: Path) -> None:
    path = write_config(
        tmp_path,
        """
grid:
  nodes_x: 4
  nodes_z: 6
  plane:
    center: [1.0, 0.0, -1.0]
    size: [8, 12]
  vertical_offset: 0.5
navigation:
  keep_agent_height: false
monitoring:
  events_log: logs/events.log
logging:
  level: debug
""",
    )

    cfg = load_nav_config(path)

    assert cfg.layout.nodes_x == 4
    assert cfg.layout.nodes_z == 6
    assert cfg.layout.center == (1.0, 0.0, -1.0)
    assert cfg.layout.size == (8.0, 12.0)
    assert cfg.layout.vertical_offset == 0.5
    assert cfg.navigation.keep_agent_height is False
    assert cfg.monitoring.events_log == "logs/events.log"
    assert cfg.logging.level == "DEBUG"


def test_optional_sections_default(tmp_path: Path) -> None:
    path = write_config(tmp_path, "grid:\n  nodes_x: 3\n  nodes_z: 2\n")

    cfg = load_nav_config(path)

    assert cfg.layout.size == (10.0, 10.0)
    assert cfg.navigation.keep_agent_height is True
    assert cfg.monitoring.events_log is None
    assert cfg.logging.level == "INFO"


def test_layout_from_config_builds_plane_layout(tmp_path: Path) -> None:
    path = write_config(
        tmp_path,
        "grid:\n  nodes_x: 3\n  nodes_z: 3\n  plane:\n    size: [10, 10]\n",
    )

    layout = layout_from_config(load_nav_config(path).layout)

    assert isinstance(layout, PlaneLayout)
    assert layout.spacing == (5.0, 5.0)


def test_shipped_default_config_loads() -> None:
    assert DEFAULT_CONFIG_PATH.exists()

    cfg = load_nav_config()

    assert cfg.layout.nodes_x >= 1
    assert cfg.layout.nodes_z >= 1


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_nav_config(tmp_path / "nope.yaml")


def test_missing_grid_section_raises(tmp_path: Path) -> None:
    path = write_config(tmp_path, "logging:\n  level: INFO\n")

    with pytest.raises(KeyError):
        load_nav_config(path)


def test_non_mapping_top_level_raises(tmp_path: Path) -> None:
    path = write_config(tmp_path, "- just\n- a list\n")

    with pytest.raises(ValueError):
        load_nav_config(path)


@pytest.mark.parametrize(
    "body",
    [
        "grid:\n  nodes_x: 0\n  nodes_z: 3\n",
        "grid:\n  nodes_x: 3\n  nodes_z: 3\n  plane:\n    size: [-1, 4]\n",
        "grid:\n  nodes_x: 3\n  nodes_z: 3\n  plane:\n    center: [0, 0]\n",
        "grid:\n  nodes_x: 3\n  nodes_z: 3\nlogging:\n  level: LOUD\n",
    ],
)
def test_invalid_values_raise(tmp_path: Path, body: str) -> None:
    path = write_config(tmp_path, body)

    with pytest.raises(ValueError):
        load_nav_config(path)
