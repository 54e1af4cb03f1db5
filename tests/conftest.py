"""Shared fixtures: the bundled flare hierarchy and a small hand-built tree.

Small tree (absolute paths in brackets)::

    root []
    ├── a [0]
    │   ├── a1 [0, 0]            value 1
    │   └── a2 [0, 1]
    │       └── a2x [0, 1, 0]
    │           └── a2x1 [0, 1, 0, 0]  value 5
    ├── b [1]                    value 7
    └── c [2]
        └── c1 [2, 0]            value 2.5
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from tree_explorer.datasets import load_flare
from tree_explorer.tree.builder import TreeBuilder
from tree_explorer.tree.nodes import TreeNode

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_small_data() -> dict[str, Any]:
    return {
        "name": "root",
        "children": [
            {
                "name": "a",
                "children": [
                    {"name": "a1", "value": 1},
                    {
                        "name": "a2",
                        "children": [
                            {"name": "a2x", "children": [{"name": "a2x1", "value": 5}]},
                        ],
                    },
                ],
            },
            {"name": "b", "value": 7},
            {"name": "c", "children": [{"name": "c1", "value": 2.5}]},
        ],
    }


def make_chain(depth: int) -> dict[str, Any]:
    """A single path of ``depth`` edges; only the bottom leaf carries value 1."""
    node: dict[str, Any] = {"name": f"n{depth}", "value": 1}
    for i in range(depth - 1, -1, -1):
        node = {"name": f"n{i}", "children": [node]}
    return node


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def flare() -> TreeNode:
    """The bundled flare hierarchy, loaded once per session (it is immutable)."""
    return load_flare()


@pytest.fixture
def small_data() -> dict[str, Any]:
    return make_small_data()


@pytest.fixture
def chain() -> Callable[[int], dict[str, Any]]:
    """Factory for single-path hierarchies, see ``make_chain``."""
    return make_chain


@pytest.fixture
def small_tree() -> TreeNode:
    return TreeBuilder().build(make_small_data())
