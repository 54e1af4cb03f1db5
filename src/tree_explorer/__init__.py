"""Tree explorer - depth-windowed navigation of large hierarchies."""

from __future__ import annotations

from loguru import logger

from tree_explorer.api import breadcrumbs, explore, load_tree, node_stats, window_at
from tree_explorer.breadcrumbs import Breadcrumb
from tree_explorer.config import ExplorerConfig
from tree_explorer.exceptions import (
    HierarchyValidationError,
    NavigationError,
    TreeExplorerError,
    UnknownViewNodeError,
)
from tree_explorer.explorer import TreeExplorer
from tree_explorer.navigation import (
    FocusAt,
    NavigationState,
    Navigator,
    ReRoot,
    Reset,
    SelectViewNode,
)
from tree_explorer.result import ExplorerSnapshot, LayoutResult, NodeDetails, NodePosition
from tree_explorer.tree import TreeBuilder, TreeNode, ViewNode

# Library code stays silent until the application opts in with
# ``logger.enable("tree_explorer")``.
logger.disable("tree_explorer")

__version__: str = "0.1.0"
__all__: list[str] = [
    "Breadcrumb",
    "ExplorerConfig",
    "ExplorerSnapshot",
    "FocusAt",
    "HierarchyValidationError",
    "LayoutResult",
    "NavigationError",
    "NavigationState",
    "Navigator",
    "NodeDetails",
    "NodePosition",
    "ReRoot",
    "Reset",
    "SelectViewNode",
    "TreeBuilder",
    "TreeExplorer",
    "TreeExplorerError",
    "TreeNode",
    "UnknownViewNodeError",
    "ViewNode",
    "breadcrumbs",
    "explore",
    "load_tree",
    "node_stats",
    "window_at",
]
