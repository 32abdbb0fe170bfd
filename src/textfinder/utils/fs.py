from __future__ import annotations

import os
from pathlib import Path


def is_regular_file(path: Path) -> bool:
    """
    True if *path* exists and is a regular file once symlinks are followed.
    Missing paths, broken links and unreadable parents all count as False.
    """
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


def dir_key(path: Path) -> tuple[int, int]:
    st = os.stat(path)
    return st.st_dev, st.st_ino


def list_dir(path: Path) -> list[os.DirEntry]:
    """
    Read every entry of *path*, sorted by name. The scandir handle is closed
    before returning, so callers never hold it open across a yield.
    """
    with os.scandir(path) as it:
        return sorted(it, key=lambda e: e.name)
