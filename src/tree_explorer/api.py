"""Public API functions for tree-explorer.

Stateless helpers for callers that do not need a full ``TreeExplorer``
session: load a hierarchy, cut a window out of it, summarise a subtree or
name the ancestors of a path.  Nothing here is cached and no call mutates
its inputs.
"""

from __future__ import annotations

from collections.abc import Iterable

from tree_explorer.aggregate import count_leaves, sum_weights
from tree_explorer.breadcrumbs import Breadcrumb, build_breadcrumbs
from tree_explorer.config import DEFAULT_MAX_DEPTH, ExplorerConfig
from tree_explorer.explorer import TreeExplorer
from tree_explorer.paths import as_path, resolve
from tree_explorer.tree.builder import HierarchyInput, TreeBuilder
from tree_explorer.tree.nodes import TreeNode, ViewNode
from tree_explorer.window import build_window

__all__ = ["breadcrumbs", "explore", "load_tree", "node_stats", "window_at"]


def load_tree(data: HierarchyInput) -> TreeNode:
    """Validate ``data`` and return it as an immutable TreeNode tree.

    Raises:
        HierarchyValidationError: If ``data`` is not a valid hierarchy.
    """
    return TreeBuilder().build(data)


def window_at(
    tree: TreeNode,
    focus: Iterable[int] = (),
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ViewNode:
    """Return the depth-limited window rooted at the absolute path ``focus``.

    Raises:
        LookupError: If ``focus`` does not resolve in ``tree``.
        ValueError:  If ``max_depth`` is negative.
    """
    path = as_path(focus)
    node = resolve(tree, path)
    if node is None:
        msg = f"focus path {list(path)} does not resolve in the tree"
        raise LookupError(msg)
    return build_window(node, max_depth)


def node_stats(tree: TreeNode, path: Iterable[int] = ()) -> tuple[int | float, int]:
    """Full-subtree aggregates for the node at ``path``.

    Returns:
        ``(total_value, leaf_count)``; both are 0 when ``path`` does not
        resolve.
    """
    node = resolve(tree, as_path(path))
    return sum_weights(node), count_leaves(node)


def breadcrumbs(tree: TreeNode, path: Iterable[int]) -> tuple[Breadcrumb, ...]:
    """Named ancestor chain from the root of ``tree`` toward ``path``."""
    return build_breadcrumbs(tree, as_path(path))


def explore(
    data: HierarchyInput | None = None,
    config: ExplorerConfig | None = None,
) -> TreeExplorer:
    """Start an explorer session; ``data`` defaults to the bundled flare dataset."""
    return TreeExplorer(data, config=config)
