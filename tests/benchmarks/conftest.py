"""Deterministic hierarchy generators for performance benchmarks.

All generators produce fixed, reproducible hierarchies.  No random values.
Three tiers: a wide tree (fan-out 10, 4 levels, ~11k nodes), a deep chain
(5,000 levels), and the bundled flare dataset.
"""

from __future__ import annotations

from typing import Any

import pytest

from tree_explorer.datasets import flare_data


def generate_wide_tree(fan_out: int, levels: int) -> dict[str, Any]:
    """Complete tree with ``fan_out`` children per node; leaves weigh 1."""
    root: dict[str, Any] = {"name": "root", "children": []}
    frontier = [root]
    for level in range(levels):
        next_frontier = []
        for node in frontier:
            for i in range(fan_out):
                child: dict[str, Any] = {"name": f"{node['name']}.{i}"}
                if level == levels - 1:
                    child["value"] = 1
                else:
                    child["children"] = []
                    next_frontier.append(child)
                node["children"].append(child)
        frontier = next_frontier
    return root


def generate_chain(depth: int) -> dict[str, Any]:
    """Single path of ``depth`` edges."""
    node: dict[str, Any] = {"name": f"n{depth}", "value": 1}
    for i in range(depth - 1, -1, -1):
        node = {"name": f"n{i}", "children": [node]}
    return node


# --- Fixtures for each tier ---


@pytest.fixture
def wide_data() -> dict[str, Any]:
    """10-way tree, 4 levels below the root (11,111 nodes)."""
    return generate_wide_tree(10, 4)


@pytest.fixture
def deep_data() -> dict[str, Any]:
    """5,000-level chain."""
    return generate_chain(5_000)


@pytest.fixture
def flare_raw_data() -> dict[str, Any]:
    """The bundled flare hierarchy as nested dicts."""
    return flare_data()
