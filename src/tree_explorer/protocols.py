"""TreeLayout Protocol: the extension point for layout algorithms.

The engine never computes coordinates for its own use.  A layout receives a
window (ViewNode tree) and returns positions keyed by each node's
``path_from_focus``.  Any class with a conformant ``layout`` method passes
``isinstance`` checks; no inheritance is required.

Example::

    from tree_explorer.protocols import TreeLayout
    from tree_explorer.result import LayoutResult

    class FlatLayout:
        def layout(self, window):
            return LayoutResult(positions={}, links=())

    assert isinstance(FlatLayout(), TreeLayout)  # True: structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tree_explorer.result import LayoutResult
    from tree_explorer.tree.nodes import ViewNode


@runtime_checkable
class TreeLayout(Protocol):
    """Structural protocol for layout routines.

    The ``layout`` method must:
    - Accept the root ViewNode of a window.
    - Return a LayoutResult with one position per window node, keyed by
      ``path_from_focus``, and the parent/child links as path pairs.
    - Leave the window untouched (ViewNodes are frozen).
    """

    def layout(self, window: ViewNode) -> LayoutResult: ...
