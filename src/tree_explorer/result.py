"""Result dataclasses returned by the explorer and layout routines.

- ExplorerSnapshot: focus, selection and window after a command.
- NodeDetails: detail-panel data for one full-tree node.
- NodePosition / LayoutResult: output of a TreeLayout.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tree_explorer.breadcrumbs import Breadcrumb
from tree_explorer.tree.metadata import NodeMetadata, Requirement, SystemBlock
from tree_explorer.tree.nodes import Path, ViewNode
from tree_explorer.window import iter_view_nodes, view_links

__all__ = ["ExplorerSnapshot", "LayoutResult", "NodeDetails", "NodePosition"]


@dataclass(frozen=True, slots=True)
class ExplorerSnapshot:
    """State of an explorer after a command.

    Attributes:
        focus:     Absolute path of the window root.
        selection: Absolute path of the selected node, or None.
        selected:  The visible node for ``selection``, or None.
        window:    Root of the current depth-limited window.
    """

    focus: Path
    selection: Path | None
    selected: ViewNode | None
    window: ViewNode

    @property
    def nodes(self) -> tuple[ViewNode, ...]:
        """Window nodes in enumeration (breadth-first) order."""
        return tuple(iter_view_nodes(self.window))

    @property
    def links(self) -> list[tuple[ViewNode, ViewNode]]:
        """Parent/child pairs of the window."""
        return view_links(self.window)


@dataclass(frozen=True, slots=True)
class NodeDetails:
    """Everything the detail panel shows for one node of the FULL tree.

    Aggregates are computed over the complete subtree at ``absolute_path``,
    not over the visible window.

    Attributes:
        name:                  Node name.
        absolute_path:         Path from the true root.
        id:                    Domain identifier, if any.
        value:                 The node's own value as loaded (None if absent).
        visible_depth:         Depth within the current window, or None when
                               the node is not visible.
        child_count:           Number of children in the full tree.
        total_value:           Sum of numeric values over the full subtree.
        leaf_count:            Number of leaves in the full subtree.
        subtree_size:          Number of nodes in the full subtree, itself included.
        breadcrumbs:           Named ancestor chain from the true root.
        requirements:          Linked requirements.
        related_system_blocks: Related system blocks.
        metadata:              Owner/version/last-updated record, if any.
        extra:                 Every other domain field, passed through.
    """

    name: str
    absolute_path: Path
    id: str | None
    value: Any
    visible_depth: int | None
    child_count: int
    total_value: int | float
    leaf_count: int
    subtree_size: int
    breadcrumbs: tuple[Breadcrumb, ...]
    requirements: tuple[Requirement, ...]
    related_system_blocks: tuple[SystemBlock, ...]
    metadata: NodeMetadata | None
    extra: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class NodePosition:
    """Polar and Cartesian coordinates of one window node.

    ``angle`` is in radians within [0, 2π); ``x``/``y`` put angle 0 at the
    top, matching ``x = cos(angle - π/2)·radius``, ``y = sin(angle - π/2)·radius``.
    """

    angle: float
    radius: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Positions keyed by ``path_from_focus`` plus the links to draw."""

    positions: dict[Path, NodePosition]
    links: tuple[tuple[Path, Path], ...]
