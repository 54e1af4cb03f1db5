"""Depth Window Builder: depth-limited ViewNode projections of a full subtree.

``build_window(focus, max_depth)`` copies ``focus`` down to ``max_depth``
tiers.  Every copy is stamped with its path relative to ``focus`` so that a
visible node can always be mapped back to the full tree with
``concat(focus_path, view.path_from_focus)``.

``has_hidden`` rules, for a node at depth ``d``:

- no children                 -> leaf, never hidden
- ``d >= max_depth``          -> children pruned, ``has_hidden = True``
- ``d < max_depth``           -> children copied; ``has_hidden`` only when a
  child has children of its own *and* that child sits on the deepest visible
  tier (``d + 1 >= max_depth``)

The copy is iterative (post-order over an explicit stack) and pure: equal
``(focus, max_depth)`` inputs always produce equal windows.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from tree_explorer.tree.nodes import Path, TreeNode, ViewNode

__all__ = ["build_window", "find_view_node", "iter_view_nodes", "view_links"]


@dataclass(slots=True)
class _WindowFrame:
    node: TreeNode
    path: Path
    built: list[ViewNode] = field(default_factory=list)


def _has_hidden(node: TreeNode, depth: int, max_depth: int) -> bool:
    if not node.children:
        return False
    if depth >= max_depth:
        return True
    return depth + 1 >= max_depth and any(child.children for child in node.children)


def build_window(focus: TreeNode, max_depth: int) -> ViewNode:
    """Build the depth-limited view of ``focus``.

    Args:
        focus:     Full-tree node to use as the window root.
        max_depth: Number of visible tiers below ``focus`` (>= 0).

    Returns:
        The root ViewNode of the window.

    Raises:
        ValueError: If ``max_depth`` is negative.
    """
    if max_depth < 0:
        msg = f"max_depth must be >= 0, got {max_depth}"
        raise ValueError(msg)

    stack = [_WindowFrame(node=focus, path=())]
    while True:
        frame = stack[-1]
        node = frame.node
        depth = len(frame.path)

        if depth < max_depth and len(frame.built) < len(node.children):
            idx = len(frame.built)
            stack.append(_WindowFrame(node=node.children[idx], path=(*frame.path, idx)))
            continue

        view = ViewNode(
            name=node.name,
            path_from_focus=frame.path,
            value=node.value,
            has_hidden=_has_hidden(node, depth, max_depth),
            children=tuple(frame.built),
        )
        stack.pop()
        if not stack:
            return view
        stack[-1].built.append(view)


def iter_view_nodes(window: ViewNode) -> Iterator[ViewNode]:
    """Yield every node of ``window`` breadth-first, root first.

    This is the window's canonical enumeration order: ties during
    selection re-anchoring resolve to the node yielded first.
    """
    queue: deque[ViewNode] = deque([window])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(node.children)


def view_links(window: ViewNode) -> list[tuple[ViewNode, ViewNode]]:
    """Parent/child pairs of ``window`` in enumeration order."""
    return [(node, child) for node in iter_view_nodes(window) for child in node.children]


def find_view_node(window: ViewNode, relative_path: Path) -> ViewNode | None:
    """Return the visible node stamped with ``relative_path``, or None."""
    node = window
    for idx in relative_path:
        if idx < 0 or idx >= len(node.children):
            return None
        node = node.children[idx]
    return node
