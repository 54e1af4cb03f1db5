"""Packaging correctness verification for tree-explorer.

Tests validate that:
- The base install imports without optional extras
- py.typed marker and the bundled dataset are present in the wheel
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import shutil
import subprocess
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the top-level package imports and works with the base install."""

    def test_import_tree_explorer(self):  # type: ignore[no-untyped-def]
        import tree_explorer

        assert hasattr(tree_explorer, "TreeExplorer")
        assert hasattr(tree_explorer, "load_tree")
        assert hasattr(tree_explorer, "window_at")

    def test_default_dataset_loads(self):  # type: ignore[no-untyped-def]
        from tree_explorer import explore

        assert explore().tree.name == "flare"

    def test_layout_import(self):  # type: ignore[no-untyped-def]
        from tree_explorer.layout import RadialLayout

        assert RadialLayout().radius == 1.0


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        if shutil.which("poetry") is None:
            pytest.skip("poetry is not installed")
        dist_dir = PROJECT_ROOT / "dist"
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            assert any(n.endswith("py.typed") for n in names), f"py.typed not found: {names}"

    def test_dataset_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            assert "tree_explorer/data/flare.json" in zf.namelist()

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        expected_modules = [
            "tree_explorer/__init__.py",
            "tree_explorer/aggregate.py",
            "tree_explorer/api.py",
            "tree_explorer/breadcrumbs.py",
            "tree_explorer/cache.py",
            "tree_explorer/config.py",
            "tree_explorer/datasets.py",
            "tree_explorer/exceptions.py",
            "tree_explorer/explorer.py",
            "tree_explorer/navigation.py",
            "tree_explorer/paths.py",
            "tree_explorer/protocols.py",
            "tree_explorer/result.py",
            "tree_explorer/selection.py",
            "tree_explorer/window.py",
            "tree_explorer/layout/__init__.py",
            "tree_explorer/layout/radial.py",
            "tree_explorer/tree/__init__.py",
            "tree_explorer/tree/builder.py",
            "tree_explorer/tree/metadata.py",
            "tree_explorer/tree/nodes.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert module in names, f"Module {module} not found in wheel"

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if n.endswith("METADATA")]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "tree-explorer" in metadata.lower() or "tree_explorer" in metadata.lower()
            assert "0.1.0" in metadata


class TestPackageMetadata:
    """Verify the package version and public exports."""

    def test_version(self):  # type: ignore[no-untyped-def]
        import tree_explorer

        assert tree_explorer.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        import tree_explorer

        expected = {
            "Breadcrumb",
            "ExplorerConfig",
            "ExplorerSnapshot",
            "FocusAt",
            "HierarchyValidationError",
            "LayoutResult",
            "NavigationError",
            "NavigationState",
            "Navigator",
            "NodeDetails",
            "NodePosition",
            "ReRoot",
            "Reset",
            "SelectViewNode",
            "TreeBuilder",
            "TreeExplorer",
            "TreeExplorerError",
            "TreeNode",
            "UnknownViewNodeError",
            "ViewNode",
            "breadcrumbs",
            "explore",
            "load_tree",
            "node_stats",
            "window_at",
        }
        actual = set(tree_explorer.__all__)
        assert expected == actual, f"Missing: {expected - actual}, Extra: {actual - expected}"

    def test_logging_disabled_by_default(self):  # type: ignore[no-untyped-def]
        from loguru import logger

        import tree_explorer

        records: list[str] = []
        sink_id = logger.add(records.append, level="DEBUG")
        try:
            tree_explorer.load_tree({"name": "quiet"})
        finally:
            logger.remove(sink_id)
        assert records == []
