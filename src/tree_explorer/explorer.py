"""TreeExplorer: orchestrator that wires TreeBuilder + Navigator + WindowCache + layout.

This is the single object a presentation layer talks to.  It owns the one
mutable cell of a session, the current ``NavigationState``, and replaces it
wholesale on every command: each command computes the next immutable state
from the previous one and swaps it in with a single assignment, so the last
command wins and no command is ever half-applied.

Architecture:
- The full tree is loaded and validated once by ``TreeBuilder`` and never
  mutated.  ``replace_tree`` swaps in a new tree and discards every derived
  value (focus, selection, cached windows).
- Windows come from a per-instance ``WindowCache`` keyed by
  ``(focus_path, max_depth)``.
- Transitions are delegated to a stateless ``Navigator``.
- ``details`` maps the selection back to the FULL tree for aggregates,
  breadcrumbs and domain metadata.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from loguru import logger

from tree_explorer.aggregate import count_leaves, subtree_size, sum_weights
from tree_explorer.breadcrumbs import build_breadcrumbs
from tree_explorer.cache import WindowCache
from tree_explorer.config import ExplorerConfig
from tree_explorer.datasets import load_flare
from tree_explorer.layout import RadialLayout
from tree_explorer.navigation import (
    Command,
    FocusAt,
    NavigationState,
    Navigator,
    ReRoot,
    Reset,
    SelectViewNode,
)
from tree_explorer.paths import as_path, resolve
from tree_explorer.result import ExplorerSnapshot, LayoutResult, NodeDetails
from tree_explorer.selection import project_selection
from tree_explorer.tree.builder import HierarchyInput, TreeBuilder
from tree_explorer.tree.nodes import Path, TreeNode, ViewNode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tree_explorer.protocols import TreeLayout

__all__ = ["TreeExplorer"]


class TreeExplorer:
    """Interactive, depth-windowed exploration of one hierarchy.

    Example::

        from tree_explorer import TreeExplorer

        explorer = TreeExplorer()                  # flare sample dataset
        snap = explorer.snapshot()
        analytics = snap.window.children[0]
        snap = explorer.select_view_node(analytics.children[0])   # analytics/cluster
        explorer.details().total_value             # 15207
        snap = explorer.re_root_at(analytics)      # selection survives
    """

    def __init__(
        self,
        data: HierarchyInput | None = None,
        config: ExplorerConfig | None = None,
        layout: TreeLayout | None = None,
    ) -> None:
        """Load the hierarchy and start at the true root with nothing selected.

        Args:
            data:   Hierarchy mapping, JSON text or TreeNode.  Defaults to the
                bundled flare dataset when None.
            config: Session configuration.  Defaults to ``ExplorerConfig()``.
            layout: A TreeLayout-conformant object.  Defaults to
                ``RadialLayout()``.

        Raises:
            HierarchyValidationError: If ``data`` is not a valid hierarchy.
        """
        self._config: ExplorerConfig = config if config is not None else ExplorerConfig()
        self._builder = TreeBuilder()
        self._tree: TreeNode = self._builder.build(data) if data is not None else load_flare()
        self._windows = WindowCache(self._tree, max_size=self._config.window_cache_size)
        self._navigator = Navigator(self._tree, self._config.max_depth, self._windows)
        self._layout: TreeLayout = layout if layout is not None else RadialLayout()
        self._state = NavigationState()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def tree(self) -> TreeNode:
        return self._tree

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def focus(self) -> Path:
        return self._state.focus

    @property
    def selection(self) -> Path | None:
        return self._state.selection

    @property
    def window_cache(self) -> WindowCache:
        return self._windows

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def dispatch(self, command: Command) -> ExplorerSnapshot:
        """Apply ``command`` to the current state and return the new snapshot."""
        self._state = self._navigator.apply(self._state, command)
        return self.snapshot()

    def select_view_node(self, view_node: ViewNode) -> ExplorerSnapshot:
        """Select a visible node (single click)."""
        return self.dispatch(SelectViewNode(view_node))

    def re_root_at(self, view_node: ViewNode) -> ExplorerSnapshot:
        """Make a visible node the new focus, keeping the selection (double click)."""
        return self.dispatch(ReRoot(view_node))

    def focus_at_absolute_path(self, path: Iterable[int]) -> ExplorerSnapshot:
        """Focus an ancestor by absolute path and clear the selection (breadcrumb click)."""
        return self.dispatch(FocusAt(as_path(path)))

    def reset(self) -> ExplorerSnapshot:
        """Return to the true root with nothing selected."""
        return self.dispatch(Reset())

    def resize(self, max_depth: int) -> ExplorerSnapshot:
        """Change the window depth and re-anchor the selection to the new window.

        Raises:
            ValueError: If ``max_depth`` is negative.
        """
        config = replace(self._config, max_depth=max_depth)
        navigator = Navigator(self._tree, config.max_depth, self._windows)
        state = navigator.settle(self._state)
        logger.debug("Window depth {} -> {}", self._config.max_depth, config.max_depth)
        self._config, self._navigator, self._state = config, navigator, state
        return self.snapshot()

    def replace_tree(self, data: HierarchyInput) -> ExplorerSnapshot:
        """Swap in a new hierarchy and discard all derived state.

        Paths computed against the old tree carry no meaning for the new one,
        so focus and selection are reset and every cached window is dropped.
        The new tree is validated before anything is replaced.
        """
        tree = self._builder.build(data)
        self._windows.clear(tree)
        self._tree = tree
        self._navigator = Navigator(tree, self._config.max_depth, self._windows)
        self._state = NavigationState()
        logger.info("Hierarchy replaced; navigation state reset to root")
        return self.snapshot()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def window(self) -> ViewNode:
        """Root of the current window."""
        return self._navigator.window(self._state)

    def snapshot(self) -> ExplorerSnapshot:
        """Current focus, selection and window without changing anything."""
        state = self._state
        window = self._navigator.window(state)
        return ExplorerSnapshot(
            focus=state.focus,
            selection=state.selection,
            selected=project_selection(window, state.focus, state.selection),
            window=window,
        )

    def details(self, absolute_path: Iterable[int] | None = None) -> NodeDetails | None:
        """Detail-panel data for ``absolute_path`` (default: the current selection).

        Returns:
            NodeDetails computed against the FULL tree, or None when nothing is
            selected or the path does not resolve.
        """
        state = self._state
        path = as_path(absolute_path) if absolute_path is not None else state.selection
        if path is None:
            return None
        node = resolve(self._tree, path)
        if node is None:
            return None

        visible = project_selection(self._navigator.window(state), state.focus, path)
        domain = node.domain
        return NodeDetails(
            name=node.name,
            absolute_path=path,
            id=domain.id,
            value=node.value,
            visible_depth=visible.depth if visible is not None else None,
            child_count=node.child_count,
            total_value=sum_weights(node),
            leaf_count=count_leaves(node),
            subtree_size=subtree_size(node),
            breadcrumbs=build_breadcrumbs(self._tree, path),
            requirements=domain.requirements,
            related_system_blocks=domain.related_system_blocks,
            metadata=domain.metadata,
            extra=domain.extra,
        )

    def layout(self) -> LayoutResult:
        """Run the configured layout on the current window."""
        return self._layout.layout(self.window())
