"""TreeNode and ViewNode dataclasses for the windowed-tree representation.

TreeNode is the full, unabridged hierarchy produced by TreeBuilder.  It is
frozen: a loaded tree is never mutated, and child order is the basis of every
path used by the engine.

ViewNode is the display-only projection produced by ``build_window``.  It
carries the relative path back to its full-tree counterpart and never any
domain metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tree_explorer.tree.metadata import DomainMetadata

__all__ = ["Path", "TreeNode", "ViewNode"]

# Child-index sequence; path[i] is the child to descend into at depth i.
Path = tuple[int, ...]


@dataclass(frozen=True, slots=True)
class TreeNode:
    """A node in the full hierarchy.

    Attributes:
        name:     Display name.  Not unique across the tree.
        children: Ordered children.  Empty for leaves; an input without a
                  ``children`` key and one with ``children: []`` both load
                  as an empty tuple.
        value:    Optional weight exactly as loaded; None means absent.  Only
                  int/float values take part in aggregation.
        domain:   Validated domain metadata (requirements, blocks, ...).
    """

    name: str
    children: tuple[TreeNode, ...] = ()
    value: Any = None
    domain: DomainMetadata = field(default_factory=DomainMetadata)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def child_count(self) -> int:
        return len(self.children)


@dataclass(frozen=True, slots=True)
class ViewNode:
    """A node of a depth-limited window.

    Attributes:
        name:            Copied from the full-tree node.
        path_from_focus: Relative path from the window root (the focus).
        value:           Copied from the full-tree node when present.
        has_hidden:      True when real descendants exist beyond the window.
        children:        Visible children; empty for leaves and pruned nodes.
    """

    name: str
    path_from_focus: Path = ()
    value: Any = None
    has_hidden: bool = False
    children: tuple[ViewNode, ...] = ()

    @property
    def depth(self) -> int:
        """Depth within the window (the window root is 0)."""
        return len(self.path_from_focus)

    @property
    def is_leaf(self) -> bool:
        return not self.children
