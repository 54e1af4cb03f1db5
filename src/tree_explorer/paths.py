"""Path addressing: child-index paths as the universal coordinate system.

A path is a tuple of non-negative ints; ``path[i]`` is the child index to
descend into at depth ``i``.  The empty path denotes the node it is resolved
against.  Absolute paths are resolved from the true root, relative paths
from the current focus, and ``absolute == concat(focus, relative)``.

None of these functions inspect anything but ``children``, and none raise
for an index that does not exist: ``resolve`` returns None instead.
"""

from __future__ import annotations

from collections.abc import Iterable

from tree_explorer.tree.nodes import Path, TreeNode

__all__ = [
    "as_path",
    "clip",
    "concat",
    "deepest_valid_prefix",
    "is_prefix",
    "relative_to",
    "resolve",
]


def as_path(indices: Iterable[int]) -> Path:
    """Normalize any sequence of indices to a Path tuple.

    Raises:
        ValueError: If an entry is not a non-negative int.
    """
    path = tuple(indices)
    for idx in path:
        if isinstance(idx, bool) or not isinstance(idx, int) or idx < 0:
            msg = f"path entries must be non-negative ints, got {idx!r}"
            raise ValueError(msg)
    return path


def resolve(root: TreeNode, path: Path) -> TreeNode | None:
    """Descend from ``root`` along ``path``.

    Returns:
        The node at ``path``, or None when any index is out of range
        (negative indices included) or a leaf is reached before the path ends.
    """
    node = root
    for idx in path:
        if idx < 0 or idx >= len(node.children):
            return None
        node = node.children[idx]
    return node


def concat(prefix: Path, suffix: Path) -> Path:
    """Join two paths.  No bounds checking."""
    return tuple(prefix) + tuple(suffix)


def clip(path: Path, max_length: int) -> Path:
    """Return the first ``min(len(path), max_length)`` entries of ``path``."""
    return tuple(path[: max(max_length, 0)])


def is_prefix(prefix: Path, path: Path) -> bool:
    """True when ``prefix`` is a (not necessarily proper) prefix of ``path``."""
    return len(prefix) <= len(path) and tuple(path[: len(prefix)]) == tuple(prefix)


def relative_to(path: Path, base: Path) -> Path | None:
    """Return ``path`` relative to ``base``, or None when ``base`` is not a prefix."""
    if not is_prefix(base, path):
        return None
    return tuple(path[len(base) :])


def deepest_valid_prefix(root: TreeNode, path: Path) -> Path:
    """Longest prefix of ``path`` that resolves against ``root``."""
    node = root
    for depth, idx in enumerate(path):
        if idx < 0 or idx >= len(node.children):
            return tuple(path[:depth])
        node = node.children[idx]
    return tuple(path)
