"""Full-tree aggregates for nodes that are only partially visible.

Every reduction runs over the complete subtree of the *full* tree, never over
a window, using an explicit stack so that adversarially deep inputs cannot
exhaust the interpreter's recursion limit.  Passing None returns 0, the
identity of each reduction.
"""

from __future__ import annotations

from tree_explorer.tree.nodes import TreeNode

__all__ = ["count_leaves", "is_numeric", "subtree_size", "sum_weights"]


def is_numeric(value: object) -> bool:
    """True for int/float weights.  bool is excluded even though it subclasses int."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def sum_weights(node: TreeNode | None) -> int | float:
    """Sum every numeric ``value`` in the subtree rooted at ``node``.

    Interior values count too; nodes without a numeric value contribute 0.
    """
    if node is None:
        return 0
    total: int | float = 0
    stack = [node]
    while stack:
        cur = stack.pop()
        if is_numeric(cur.value):
            total += cur.value
        stack.extend(cur.children)
    return total


def count_leaves(node: TreeNode | None) -> int:
    """Number of childless nodes in the subtree; a lone leaf counts as 1."""
    if node is None:
        return 0
    count = 0
    stack = [node]
    while stack:
        cur = stack.pop()
        if cur.children:
            stack.extend(cur.children)
        else:
            count += 1
    return count


def subtree_size(node: TreeNode | None) -> int:
    """Total number of nodes in the subtree, root included."""
    if node is None:
        return 0
    count = 0
    stack = [node]
    while stack:
        cur = stack.pop()
        count += 1
        stack.extend(cur.children)
    return count
