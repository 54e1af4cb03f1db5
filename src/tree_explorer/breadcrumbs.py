"""Breadcrumb Builder: the named ancestor chain of an absolute path."""

from __future__ import annotations

from dataclasses import dataclass

from tree_explorer.tree.nodes import Path, TreeNode

__all__ = ["Breadcrumb", "build_breadcrumbs"]


@dataclass(frozen=True, slots=True)
class Breadcrumb:
    """One ancestor on the way from the true root to a node.

    Attributes:
        name:          Name of the full-tree node.
        absolute_path: Path from the true root to that node.
    """

    name: str
    absolute_path: Path


def build_breadcrumbs(root: TreeNode, absolute_path: Path) -> tuple[Breadcrumb, ...]:
    """Return the chain from the true root toward ``absolute_path``.

    The first crumb is always the root (empty path).  If an index does not
    resolve, the chain stops at the last ancestor that did; a stale path
    degrades to its deepest valid prefix instead of failing.
    """
    crumbs = [Breadcrumb(name=root.name, absolute_path=())]
    node = root
    for depth, idx in enumerate(absolute_path):
        if idx < 0 or idx >= len(node.children):
            break
        node = node.children[idx]
        crumbs.append(Breadcrumb(name=node.name, absolute_path=tuple(absolute_path[: depth + 1])))
    return tuple(crumbs)
