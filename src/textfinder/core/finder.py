from __future__ import annotations

import errno
import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Union

from textfinder.utils.fs import dir_key, is_regular_file, list_dir

logger = logging.getLogger(__name__)

TEXT_EXTS = {".txt", ".text"}

PathLike = Union[str, os.PathLike]
Predicate = Callable[[Path], bool]


class FileSystemLoopError(OSError):
    """A followed symlink leads back to a directory already being walked."""

    def __init__(self, path: Path):
        super().__init__(errno.ELOOP, "Symbolic link loop", str(path))


def is_text(path: Path) -> bool:
    """
    True for regular files whose final extension is .txt or .text, in any case.

    Path.suffix is empty for a bare ".txt", so a dotfile with no base name is
    not a text file, and "a.txt.html" only exposes ".html".
    """
    return is_regular_file(path) and path.suffix.lower() in TEXT_EXTS


def find(start: PathLike, keep: Predicate = is_text) -> Iterator[Path]:
    """
    Yield every path under *start* for which *keep* returns True.

    A regular file given as *start* is returned on its own and *keep* is not
    consulted. For a directory the walk is pre-order, visits entries in name
    order, tests *start* and every directory as well as files, and follows
    symbolic links to both files and directories.

    The start directory is listed before this returns, so a missing or
    unreadable root raises here. Errors on deeper entries propagate from the
    iterator when reached.
    """
    start = Path(start)
    if is_regular_file(start):
        return iter([start])

    logger.debug("Walking %s", start)
    entries = list_dir(start)
    return _walk(start, entries, keep, frozenset({dir_key(start)}))


def _walk(
    directory: Path,
    entries: list[os.DirEntry],
    keep: Predicate,
    ancestors: frozenset[tuple[int, int]],
) -> Iterator[Path]:
    if keep(directory):
        yield directory

    for entry in entries:
        path = directory / entry.name
        # is_dir() follows symlinks, so linked directories are descended into
        if entry.is_dir():
            key = dir_key(path)
            if key in ancestors:
                raise FileSystemLoopError(path)
            yield from _walk(path, list_dir(path), keep, ancestors | {key})
        elif keep(path):
            yield path


def list_text_files(start: PathLike) -> list[Path]:
    return list(find(start))
