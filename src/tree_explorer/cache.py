"""WindowCache: LRU memoization of window builds.

Windows are pure functions of ``(focus_path, max_depth)`` for a given tree,
so they can be served from memory when the user navigates back and forth.
Each ``WindowCache`` instance owns its own ``LRUCache``; there is no shared
class-level state, and eviction of the least-recently-used window is silent.

The cache is bound to one tree.  After swapping trees call ``clear()``:
paths computed against the old tree mean nothing for the new one.

Example::

    from tree_explorer.cache import WindowCache

    cache = WindowCache(tree, max_size=64)
    window = cache.get((0, 2), max_depth=2)        # built
    window_again = cache.get((0, 2), max_depth=2)  # served from memory
"""

from __future__ import annotations

from cachetools import LRUCache
from loguru import logger

from tree_explorer.paths import resolve
from tree_explorer.tree.nodes import Path, TreeNode, ViewNode
from tree_explorer.window import build_window

__all__ = ["WindowCache"]


class WindowCache:
    """LRU-backed window builder bound to one full tree.

    Args:
        tree: Root of the full hierarchy.
        max_size: Maximum number of windows held in memory.  ``0`` disables
            memoization entirely (every call builds a fresh window).
    """

    def __init__(self, tree: TreeNode, max_size: int = 64) -> None:
        self._tree = tree
        self._max_size = max_size
        self._cache: LRUCache[tuple[Path, int], ViewNode] | None = (
            LRUCache(maxsize=max_size) if max_size > 0 else None
        )
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def tree(self) -> TreeNode:
        return self._tree

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def curr_size(self) -> int:
        """The current number of windows stored."""
        return int(self._cache.currsize) if self._cache is not None else 0

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, focus_path: Path, max_depth: int) -> ViewNode:
        """Return the window rooted at ``focus_path``.

        Raises:
            LookupError: If ``focus_path`` does not resolve in the tree.
                Callers normalize focus paths before asking for a window.
        """
        key = (tuple(focus_path), max_depth)
        if self._cache is not None and key in self._cache:
            self.hits += 1
            logger.debug("Window cache hit for focus={} depth={}", list(key[0]), max_depth)
            return self._cache[key]

        focus = resolve(self._tree, key[0])
        if focus is None:
            msg = f"focus path {list(key[0])} does not resolve in the current tree"
            raise LookupError(msg)

        self.misses += 1
        logger.debug("Window cache miss for focus={} depth={}", list(key[0]), max_depth)
        window = build_window(focus, max_depth)
        if self._cache is not None:
            self._cache[key] = window
        return window

    def clear(self, tree: TreeNode | None = None) -> None:
        """Drop every cached window, optionally rebinding to a new tree."""
        if tree is not None:
            self._tree = tree
        if self._cache is not None:
            self._cache.clear()
        self.hits = 0
        self.misses = 0
