import os
from pathlib import Path

import pytest

RESOURCES = Path(__file__).resolve().parent / "resources" / "text"
SIMPLE = RESOURCES / "simple"


@pytest.fixture(scope="session")
def root() -> Path:
    """The committed fixture tree of 14 text files mixed with other files."""
    assert (SIMPLE / "hello.txt").is_file(), f"fixture tree missing: {SIMPLE}"
    return SIMPLE


@pytest.fixture
def symlink(tmp_path):
    """Create a symlink under tmp_path, skipping where the platform refuses."""

    def _make(name: str, target: Path, target_is_directory: bool = False) -> Path:
        link = tmp_path / name
        try:
            os.symlink(target, link, target_is_directory=target_is_directory)
        except (OSError, NotImplementedError) as e:
            pytest.skip(f"symlinks unavailable: {e}")
        return link

    return _make
