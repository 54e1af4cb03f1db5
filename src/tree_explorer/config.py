"""ExplorerConfig: immutable configuration for a tree explorer session.

The visible window depth is fixed for a session; changing it means building
a new window exactly as a focus change does (see ``TreeExplorer.resize``).
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_MAX_DEPTH", "ExplorerConfig"]

DEFAULT_MAX_DEPTH = 2


@dataclass(frozen=True, slots=True)
class ExplorerConfig:
    """Immutable configuration for the navigation engine.

    Attributes:
        max_depth: Number of tiers shown below the focus node (the focus
            itself is depth 0).  Must be >= 0.  Defaults to 2.
        window_cache_size: Maximum number of windows memoized per explorer,
            keyed by ``(focus_path, max_depth)``.  ``0`` disables the cache.
            This is an infrastructure parameter; cached and freshly built
            windows are always equal.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    window_cache_size: int = 64

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            msg = f"max_depth must be an int, got {type(self.max_depth).__name__}"
            raise ValueError(msg)
        if self.max_depth < 0:
            msg = f"max_depth must be >= 0, got {self.max_depth}"
            raise ValueError(msg)
        if self.window_cache_size < 0:
            msg = f"window_cache_size must be >= 0, got {self.window_cache_size}"
            raise ValueError(msg)
