"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tree_fs.materializer import Materializer

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def tree_root(tmp_path: Path) -> Path:
    """A root path that does not exist yet."""
    return tmp_path / "tree"


@pytest.fixture
def materializer() -> Materializer:
    """A materializer backed by the real filesystem."""
    return Materializer.create()


@pytest.fixture
def tree_yaml() -> Path:
    """Path to the sample YAML tree document."""
    return FIXTURES_DIR / "tree.yaml"


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.read_bytes.return_value = b""
    return fs

