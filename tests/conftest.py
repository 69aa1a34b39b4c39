"""Shared test fixtures."""

import tempfile
from pathlib import Path

import pytest

from dir_exploder.models import ExplodeConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def source_tree(temp_dir):
    """Create a source folder with four files and the path of a missing destination."""
    source = temp_dir / "src"
    destination = temp_dir / "dst"

    source.mkdir()
    for x in range(1, 5):
        (source / str(x)).write_text("Paaag")

    return source, destination


@pytest.fixture
def nested_source(temp_dir):
    """Create a source folder holding files and a nested sub-directory."""
    source = temp_dir / "src"
    destination = temp_dir / "dst"

    source.mkdir()
    (source / "top.txt").write_text("top level")
    (source / "album").mkdir()
    (source / "album" / "track1.txt").write_text("track one")
    (source / "album" / "inner").mkdir()
    (source / "album" / "inner" / "notes.txt").write_text("deep")

    return source, destination


@pytest.fixture
def notifications():
    """Collect notification lines instead of printing them."""
    return []


@pytest.fixture
def make_config():
    """Build an ExplodeConfig with test-friendly defaults."""
    def _make(source, destination, **kwargs):
        kwargs.setdefault("verbose", True)
        return ExplodeConfig(source=source, destination=destination, **kwargs)
    return _make


@pytest.fixture
def snapshot():
    """Map every path under a root to its bytes (None for directories)."""
    def _snapshot(root: Path) -> dict:
        if not root.exists():
            return {}
        result = {}
        for path in sorted(root.rglob("*")):
            rel = path.relative_to(root).as_posix()
            result[rel] = None if path.is_dir() else path.read_bytes()
        return result
    return _snapshot
