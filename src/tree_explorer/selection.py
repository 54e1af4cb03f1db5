"""Selection re-anchoring across focus changes.

The logical selection is an absolute path into the full tree.  After the
window is rebuilt around a new focus, ``reanchor`` finds the visible node
that best represents that path:

1. ``target_rel = clip(target[len(focus):], max_depth)``
2. empty ``target_rel``  -> the window root (the target *is* the focus)
3. a node stamped with exactly ``target_rel`` -> that node
4. otherwise the deepest visible ancestor: the node whose path is the
   longest proper prefix of ``target_rel``; ties go to the node met first in
   ``iter_view_nodes`` order, and the window root is the final fallback.

Re-anchoring never fails; it always returns a node of the window.
"""

from __future__ import annotations

from loguru import logger

from tree_explorer.paths import clip, relative_to
from tree_explorer.tree.nodes import Path, ViewNode
from tree_explorer.window import find_view_node, iter_view_nodes

__all__ = ["project_selection", "reanchor"]


def reanchor(window: ViewNode, focus: Path, target: Path, max_depth: int) -> ViewNode:
    """Choose the visible node standing in for ``target``.

    Args:
        window:    Freshly built window rooted at ``focus``.
        focus:     Absolute path of the window root.
        target:    Absolute path of the selection to preserve; expected to lie
                   at or below ``focus``.
        max_depth: Depth bound the window was built with.

    Returns:
        The exact target when visible, else its deepest visible ancestor.
    """
    target_rel = clip(tuple(target[len(focus) :]), max_depth)
    if not target_rel:
        return window

    best = window
    best_len = 0
    for node in iter_view_nodes(window):
        path = node.path_from_focus
        if path == target_rel:
            return node
        if best_len < len(path) < len(target_rel) and target_rel[: len(path)] == path:
            best = node
            best_len = len(path)

    logger.debug(
        "Selection {} not visible under focus {}; anchored to ancestor {}",
        list(target),
        list(focus),
        list(best.path_from_focus),
    )
    return best


def project_selection(window: ViewNode, focus: Path, selection: Path | None) -> ViewNode | None:
    """Return the visible node for an absolute ``selection``, or None.

    None means nothing is selected, the selection lies outside the focused
    subtree, or it is deeper than the window shows.
    """
    if selection is None:
        return None
    rel = relative_to(selection, focus)
    if rel is None:
        return None
    return find_view_node(window, rel)
