"""Tree subpackage: the full hierarchy model and its loader.

Re-exports the public API for the tree module:
- TreeNode: frozen dataclass for a node of the full hierarchy
- ViewNode: frozen dataclass for a node of a depth-limited window
- DomainMetadata and its records: structured per-node domain fields
- TreeBuilder: converts a mapping or JSON text into a validated TreeNode tree
"""

from tree_explorer.tree.builder import HierarchyInput, TreeBuilder
from tree_explorer.tree.metadata import (
    DomainMetadata,
    NodeMetadata,
    Requirement,
    SystemBlock,
    Verification,
)
from tree_explorer.tree.nodes import Path, TreeNode, ViewNode

__all__ = [
    "DomainMetadata",
    "HierarchyInput",
    "NodeMetadata",
    "Path",
    "Requirement",
    "SystemBlock",
    "TreeBuilder",
    "TreeNode",
    "Verification",
    "ViewNode",
]
