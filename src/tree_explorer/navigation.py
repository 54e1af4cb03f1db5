"""Focus/Navigation state machine.

Navigation state is an explicit immutable value: the focus (absolute path of
the window root, initially the true root) and the selection (absolute path
or None).  Every user action is a command object, and every transition is a
pure ``(state, command) -> state`` function:

- ``SelectViewNode(view)``  selection = focus + view.path_from_focus
- ``ReRoot(view)``          focus = focus + view.path_from_focus; the current
                            selection is preserved when it lies at or below the
                            new focus (otherwise the new focus itself becomes
                            the target) and is then re-anchored to the new
                            window
- ``FocusAt(path)``         breadcrumb click: focus = path, selection cleared
- ``Reset()``               focus = true root, selection cleared

Commands that reference a view node are checked against the window of the
state they are applied to; a node from another window raises
UnknownViewNodeError instead of silently addressing the wrong full-tree node.

Invariant: after any transition the selection is None or lies inside the
current window.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from tree_explorer.cache import WindowCache
from tree_explorer.config import DEFAULT_MAX_DEPTH
from tree_explorer.exceptions import UnknownViewNodeError
from tree_explorer.paths import as_path, concat, deepest_valid_prefix, is_prefix
from tree_explorer.selection import reanchor
from tree_explorer.tree.nodes import Path, TreeNode, ViewNode
from tree_explorer.window import find_view_node

__all__ = [
    "Command",
    "FocusAt",
    "NavigationState",
    "Navigator",
    "ReRoot",
    "Reset",
    "SelectViewNode",
    "transition",
]


@dataclass(frozen=True, slots=True)
class NavigationState:
    """Immutable focus/selection pair.

    Attributes:
        focus:     Absolute path of the current window root.
        selection: Absolute path of the selected node, or None.
    """

    focus: Path = ()
    selection: Path | None = None


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SelectViewNode:
    view_node: ViewNode


@dataclass(frozen=True, slots=True)
class ReRoot:
    view_node: ViewNode


@dataclass(frozen=True, slots=True)
class FocusAt:
    absolute_path: Path


@dataclass(frozen=True, slots=True)
class Reset:
    pass


Command = SelectViewNode | ReRoot | FocusAt | Reset


class Navigator:
    """Applies navigation commands against one tree and window depth.

    The navigator holds no navigation state of its own; it only carries the
    read-only inputs every transition needs (the full tree, the depth bound
    and a window cache).  Two calls with equal arguments return equal states.
    """

    def __init__(
        self,
        tree: TreeNode,
        max_depth: int = DEFAULT_MAX_DEPTH,
        windows: WindowCache | None = None,
    ) -> None:
        self._tree = tree
        self._max_depth = max_depth
        self._windows = windows if windows is not None else WindowCache(tree, max_size=0)

    @property
    def tree(self) -> TreeNode:
        return self._tree

    @property
    def max_depth(self) -> int:
        return self._max_depth

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def window(self, state: NavigationState) -> ViewNode:
        """The window for ``state``'s focus."""
        return self._windows.get(state.focus, self._max_depth)

    def apply(self, state: NavigationState, command: Command) -> NavigationState:
        """Return the state that results from applying ``command`` to ``state``."""
        if isinstance(command, SelectViewNode):
            self._require_visible(state, command.view_node)
            selection = concat(state.focus, command.view_node.path_from_focus)
            logger.debug("Select {}", list(selection))
            return NavigationState(focus=state.focus, selection=selection)

        if isinstance(command, ReRoot):
            self._require_visible(state, command.view_node)
            new_focus = concat(state.focus, command.view_node.path_from_focus)
            logger.debug("Re-root at {}", list(new_focus))
            return self.settle(NavigationState(focus=new_focus, selection=state.selection), new_focus)

        if isinstance(command, FocusAt):
            requested = as_path(command.absolute_path)
            focus = deepest_valid_prefix(self._tree, requested)
            if focus != requested:
                logger.warning(
                    "Focus path {} does not resolve; using deepest valid prefix {}",
                    list(requested),
                    list(focus),
                )
            logger.debug("Focus at {}", list(focus))
            return NavigationState(focus=focus, selection=None)

        if isinstance(command, Reset):
            logger.debug("Reset to root")
            return NavigationState()

        msg = f"Unsupported navigation command: {type(command).__name__}"
        raise TypeError(msg)

    def settle(self, state: NavigationState, fallback: Path | None = None) -> NavigationState:
        """Re-anchor ``state.selection`` to the window around ``state.focus``.

        A selection outside the focused subtree is replaced by ``fallback``
        (when it lies under the focus) or the focus itself.  With no
        selection and no fallback the state is returned unchanged.
        """
        target = state.selection
        if target is None and fallback is None:
            return state
        if target is None or not is_prefix(state.focus, target):
            target = fallback if fallback is not None and is_prefix(state.focus, fallback) else state.focus

        chosen = reanchor(self.window(state), state.focus, target, self._max_depth)
        return NavigationState(
            focus=state.focus,
            selection=concat(state.focus, chosen.path_from_focus),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_visible(self, state: NavigationState, view_node: ViewNode) -> None:
        found = find_view_node(self.window(state), view_node.path_from_focus)
        if found is None or found.name != view_node.name:
            msg = (
                f"View node {view_node.name!r} at {list(view_node.path_from_focus)} "
                "is not part of the current window"
            )
            raise UnknownViewNodeError(
                msg,
                context={"focus": list(state.focus), "path": list(view_node.path_from_focus)},
            )


def transition(
    tree: TreeNode,
    state: NavigationState,
    command: Command,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> NavigationState:
    """Uncached, functional form of ``Navigator(tree, max_depth).apply``."""
    return Navigator(tree, max_depth).apply(state, command)
