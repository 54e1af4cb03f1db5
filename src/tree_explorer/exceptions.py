"""Typed exception hierarchy for tree-explorer.

Hierarchy
---------
TreeExplorerError (base)
├── HierarchyValidationError  – malformed input tree (also a ValueError)
└── NavigationError           – a command could not be applied to the current window
    └── UnknownViewNodeError  – the view node is not part of the current window

Path lookups never raise: ``paths.resolve`` returns ``None`` for an index
that does not exist, and callers degrade to the deepest valid prefix.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "HierarchyValidationError",
    "NavigationError",
    "TreeExplorerError",
    "UnknownViewNodeError",
]


class TreeExplorerError(Exception):
    """Base exception for tree-explorer."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class HierarchyValidationError(TreeExplorerError, ValueError):
    """The input hierarchy is malformed and cannot be loaded.

    Attributes:
        path: Child-index path (from the input root) of the offending node,
            or ``None`` when the input as a whole is unusable (e.g. bad JSON).
    """

    def __init__(
        self,
        message: str,
        path: tuple[int, ...] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        if path is not None:
            message = f"{message} (at node path {list(path)})"
        super().__init__(message, context)
        self.path = path


class NavigationError(TreeExplorerError):
    """A navigation command could not be applied."""

    pass


class UnknownViewNodeError(NavigationError):
    """The referenced view node does not belong to the current window."""

    pass
