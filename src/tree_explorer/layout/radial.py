"""RadialLayout: a cluster-style polar layout for windows.

A small reference layout that hands a presentation layer ready-made
coordinates:

- leaves are spread evenly over [0, 2π) in depth-first order (siblings
  optionally sorted by name),
- every parent sits at the mean angle of its children,
- radius grows linearly with depth, the deepest tier touching ``radius``.

Sorting only affects drawing order; ``path_from_focus`` keys are untouched.
This layout satisfies the TreeLayout Protocol structurally.
"""

from __future__ import annotations

import numpy as np

from tree_explorer.result import LayoutResult, NodePosition
from tree_explorer.tree.nodes import Path, ViewNode
from tree_explorer.window import view_links

__all__ = ["RadialLayout"]


class RadialLayout:
    """Polar layout with leaves evenly distributed around the circle.

    Example::

        from tree_explorer.layout import RadialLayout

        result = RadialLayout(radius=300.0).layout(window)
        pos = result.positions[(0, 2)]
        print(pos.angle, pos.radius, pos.x, pos.y)
    """

    def __init__(self, radius: float = 1.0, sort_by_name: bool = True) -> None:
        if radius <= 0:
            msg = f"radius must be > 0, got {radius}"
            raise ValueError(msg)
        self.radius = float(radius)
        self.sort_by_name = sort_by_name

    def _ordered(self, children: tuple[ViewNode, ...]) -> list[ViewNode]:
        if self.sort_by_name:
            return sorted(children, key=lambda child: child.name)
        return list(children)

    def layout(self, window: ViewNode) -> LayoutResult:
        """Compute a position for every node of ``window``."""
        # Pre-order walk in drawing order.
        order: list[ViewNode] = []
        stack = [window]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(reversed(self._ordered(node.children)))

        leaves = [node for node in order if not node.children]
        leaf_angles = 2.0 * np.pi * (np.arange(len(leaves), dtype=np.float64) + 0.5) / len(leaves)
        angle_by_path: dict[Path, float] = {
            leaf.path_from_focus: float(angle)
            for leaf, angle in zip(leaves, leaf_angles, strict=True)
        }
        # Reverse pre-order visits children before their parent.
        for node in reversed(order):
            if node.children:
                child_angles = [angle_by_path[child.path_from_focus] for child in node.children]
                angle_by_path[node.path_from_focus] = float(np.mean(child_angles))

        paths = [node.path_from_focus for node in order]
        angles = np.array([angle_by_path[p] for p in paths], dtype=np.float64)
        depths = np.array([node.depth for node in order], dtype=np.float64)
        deepest = depths.max()
        radii = depths / deepest * self.radius if deepest > 0 else np.zeros_like(depths)
        xs = np.cos(angles - np.pi / 2) * radii
        ys = np.sin(angles - np.pi / 2) * radii

        positions = {
            path: NodePosition(angle=float(a), radius=float(r), x=float(x), y=float(y))
            for path, a, r, x, y in zip(paths, angles, radii, xs, ys, strict=True)
        }
        links = tuple(
            (parent.path_from_focus, child.path_from_focus) for parent, child in view_links(window)
        )
        return LayoutResult(positions=positions, links=links)
