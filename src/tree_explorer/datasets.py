"""Bundled sample hierarchies.

``flare`` is Mike Bostock's classic flare class hierarchy (252 nodes, 220
weighted leaves), the default dataset of radial tree explorers.
"""

from __future__ import annotations

import json
from functools import cache
from importlib import resources
from typing import Any

from tree_explorer.tree.builder import TreeBuilder
from tree_explorer.tree.nodes import TreeNode

__all__ = ["flare_data", "load_flare"]


@cache
def _flare_text() -> str:
    return resources.files("tree_explorer").joinpath("data/flare.json").read_text(encoding="utf-8")


def flare_data() -> dict[str, Any]:
    """Return a fresh copy of the raw flare hierarchy as nested dicts."""
    return json.loads(_flare_text())


def load_flare() -> TreeNode:
    """Return the flare hierarchy as a validated TreeNode tree."""
    return TreeBuilder().build(_flare_text())
