# src/monitoring/logging_config.py
"""
Central logging configuration.

Call configure_logging() once from an entrypoint. cli.route_cli.main does
it right after loading nav.yaml:

    configure_logging(args.log_level or cfg.logging.level)

After that, navigation logs (search traces, no-route notices) are
visible on stdout.
"""

from __future__ import annotations

import logging
import sys


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: logging level as an int (logging.DEBUG) or name ("DEBUG")
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
