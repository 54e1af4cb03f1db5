"""TreeBuilder: converts a hierarchy object (or its JSON text) into a TreeNode tree.

Accepted input:
- a mapping with a ``name`` and optional ``children`` / ``value`` / domain keys,
- the same structure encoded as JSON (``str`` or ``bytes``),
- an already-built TreeNode (returned unchanged).

Validation is fail-fast: the first malformed node raises
HierarchyValidationError naming its child-index path, and nothing is
returned.  The conversion is iterative (post-order over an explicit stack),
so arbitrarily deep inputs do not hit the interpreter's recursion limit.

Example::

    builder = TreeBuilder()
    tree = builder.build('{"name": "root", "children": [{"name": "a", "value": 3}]}')
    # tree: TreeNode("root") -> TreeNode("a", value=3)
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from tree_explorer.exceptions import HierarchyValidationError
from tree_explorer.tree.metadata import parse_domain_metadata
from tree_explorer.tree.nodes import Path, TreeNode

__all__ = ["HierarchyInput", "TreeBuilder"]

HierarchyInput = Mapping[str, Any] | str | bytes | bytearray | TreeNode


@dataclass(slots=True)
class _Frame:
    """One pending node on the build stack."""

    raw: Mapping[str, Any]
    raw_children: Sequence[Any]
    index: int  # position within the parent's children; -1 for the root
    built: list[TreeNode] = field(default_factory=list)


@dataclass
class TreeBuilder:
    """Converts hierarchy input into an immutable TreeNode tree.

    A node is malformed when it is not an object, has no string ``name``, or
    has a ``children`` entry that is neither absent/null nor a sequence, or
    contains one of its own ancestors.  Domain fields are validated by
    ``parse_domain_metadata``.
    """

    def build(self, data: HierarchyInput) -> TreeNode:
        """Convert hierarchy input to a TreeNode tree.

        Args:
            data: Mapping, JSON text, or TreeNode.

        Returns:
            The root TreeNode of the loaded hierarchy.

        Raises:
            HierarchyValidationError: If the input is not a valid hierarchy.
        """
        if isinstance(data, TreeNode):
            return data

        if isinstance(data, (str, bytes, bytearray)):
            data = self._decode(data)

        if not isinstance(data, Mapping):
            msg = (
                "Hierarchy must be an object or JSON text encoding an object, "
                f"got {type(data).__name__}"
            )
            raise HierarchyValidationError(msg)

        root, count = self._build_tree(data)
        logger.debug("Loaded hierarchy {!r} with {} nodes", root.name, count)
        return root

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _decode(text: str | bytes | bytearray) -> Any:
        try:
            return json.loads(text)
        except ValueError as exc:
            msg = f"Hierarchy text is not valid JSON: {exc}"
            raise HierarchyValidationError(msg) from exc
        except RecursionError as exc:
            msg = "Hierarchy text is nested too deeply to decode"
            raise HierarchyValidationError(msg) from exc

    @staticmethod
    def _current_path(stack: list[_Frame], extra: int | None = None) -> Path:
        # Paths are only materialised for error messages.
        indices = [frame.index for frame in stack[1:]]
        if extra is not None:
            indices.append(extra)
        return tuple(indices)

    def _open_frame(self, raw: Mapping[str, Any], index: int, stack: list[_Frame]) -> _Frame:
        """Validate the structural keys of ``raw`` and return its build frame."""
        if "name" not in raw:
            msg = "Hierarchy node is missing required 'name'"
            raise HierarchyValidationError(msg, path=self._current_path(stack, index if stack else None))
        if not isinstance(raw["name"], str):
            msg = f"'name' must be a string, got {type(raw['name']).__name__}"
            raise HierarchyValidationError(msg, path=self._current_path(stack, index if stack else None))

        children = raw.get("children")
        if children is None:
            children = ()
        elif not isinstance(children, Sequence) or isinstance(children, (str, bytes, bytearray)):
            msg = f"'children' must be a sequence when provided, got {type(children).__name__}"
            raise HierarchyValidationError(msg, path=self._current_path(stack, index if stack else None))

        return _Frame(raw=raw, raw_children=children, index=index)

    def _build_tree(self, raw_root: Mapping[str, Any]) -> tuple[TreeNode, int]:
        """Post-order conversion of ``raw_root``; returns (root, node_count)."""
        stack: list[_Frame] = []
        stack.append(self._open_frame(raw_root, -1, stack))
        # ids of the mappings currently on the stack; shared non-ancestor subtrees are fine.
        open_ids = {id(raw_root)}
        count = 0

        while True:
            frame = stack[-1]
            next_idx = len(frame.built)

            if next_idx < len(frame.raw_children):
                child = frame.raw_children[next_idx]
                if not isinstance(child, Mapping):
                    msg = f"Child must be an object, got {type(child).__name__}"
                    raise HierarchyValidationError(msg, path=self._current_path(stack, next_idx))
                if id(child) in open_ids:
                    msg = f"Hierarchy contains a cycle: node {child.get('name')!r} is its own ancestor"
                    raise HierarchyValidationError(msg, path=self._current_path(stack, next_idx))
                stack.append(self._open_frame(child, next_idx, stack))
                open_ids.add(id(child))
                continue

            # All children built: materialise this node.
            try:
                domain = parse_domain_metadata(frame.raw)
            except HierarchyValidationError as exc:
                raise HierarchyValidationError(str(exc), path=self._current_path(stack)) from exc
            node = TreeNode(
                name=frame.raw["name"],
                children=tuple(frame.built),
                value=frame.raw.get("value"),
                domain=domain,
            )
            count += 1
            open_ids.discard(id(frame.raw))
            stack.pop()
            if not stack:
                return node, count
            stack[-1].built.append(node)
