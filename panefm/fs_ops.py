"""Filesystem operations used by the create-item and rename modals.

These functions raise ``OSError`` on failure; callers log and recover.
"""

from __future__ import annotations

import os
from pathlib import Path

DIRECTORY_MODE = 0o755


def rename_if_duplicate(path: Path) -> Path:
    """Return ``path`` or the first free ``name (N).ext`` sibling.

    ``/a/b.txt`` becomes ``/a/b (1).txt``, then ``/a/b (2).txt`` and so on
    while each candidate exists.
    """
    if not path.exists():
        return path
    stem = path.stem
    suffix = path.suffix
    index = 1
    while True:
        candidate = path.with_name(f"{stem} ({index}){suffix}")
        if not candidate.exists():
            return candidate
        index += 1


def create_file(path: Path) -> None:
    """Create an empty file, creating missing parent directories first."""
    path.parent.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
    with open(path, "x", encoding="utf-8"):
        pass


def create_directory(path: Path) -> None:
    path.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)


def rename_path(old_path: Path, new_path: Path) -> None:
    os.replace(old_path, new_path)


def path_exists(path: Path) -> bool:
    return os.path.lexists(path)
