"""Layout subpackage for tree-explorer.

Ships one reference layout, ``RadialLayout``, which needs only numpy.  Any
object with a conformant ``layout(window)`` method can replace it; all
layouts satisfy the ``TreeLayout`` Protocol structurally.
"""

from tree_explorer.layout.radial import RadialLayout

__all__ = ["RadialLayout"]
