# src/navigation/errors.py
"""
Domain errors for the navigation package.

An unreachable target is NOT an error: the search engine returns a
PathResult with success=False. These exceptions cover caller mistakes
that would otherwise produce a silently wrong route.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class NavError(RuntimeError):
    """
    Base domain error for navigation.

    `code` is a short machine-readable tag; `details` carries context
    that is safe to log.
    """

    code: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, details={self.details!r})"


@dataclass
class InvalidInputError(NavError):
    """
    Raised when a search is asked for with unusable arguments.

    Codes:
        - "missing_grid": grid is None
        - "missing_node": start or target is None
        - "foreign_node": start or target is not a node of the grid
        - "out_of_bounds": a requested coordinate lies outside the grid
    """
