"""Directory listing for panels.

Reads one directory level, filters it by the panel's search query, and orders
it by the panel's committed sort options. Directories always precede files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .model import Element, SortOptionsData

log = logging.getLogger(__name__)


def _scan_element(entry: os.DirEntry) -> Element:
    try:
        is_dir = entry.is_dir()
        stat = entry.stat()
        size = 0 if is_dir else stat.st_size
        modified = stat.st_mtime
    except OSError:
        # Broken symlinks still get listed.
        is_dir = False
        size = 0
        modified = 0.0
    return Element(
        name=entry.name,
        location=Path(entry.path),
        is_dir=is_dir,
        size=size,
        modified=modified,
    )


def _sort_key(sort_key: str):
    if sort_key == "Size":
        return lambda element: (element.size, element.name.lower())
    if sort_key == "Date Modified":
        return lambda element: (element.modified, element.name.lower())
    return lambda element: element.name.lower()


def sort_elements(elements: list[Element], sort_data: SortOptionsData) -> list[Element]:
    """Order directories first, each group by the selected key."""
    key = _sort_key(sort_data.selected_key)
    dirs = sorted((element for element in elements if element.is_dir), key=key, reverse=sort_data.reversed)
    files = sorted((element for element in elements if not element.is_dir), key=key, reverse=sort_data.reversed)
    return dirs + files


def filter_elements(elements: list[Element], query: str) -> list[Element]:
    """Keep entries whose name contains ``query`` (case-insensitive)."""
    if not query:
        return elements
    folded = query.casefold()
    return [element for element in elements if folded in element.name.casefold()]


def read_directory(
    location: Path,
    sort_data: SortOptionsData,
    *,
    show_hidden: bool = False,
    query: str = "",
) -> list[Element]:
    """Return the sorted, filtered listing of ``location``.

    Unreadable directories are logged and listed as empty.
    """
    try:
        with os.scandir(location) as entries:
            elements = [
                _scan_element(entry)
                for entry in entries
                if show_hidden or not entry.name.startswith(".")
            ]
    except OSError as exc:
        log.error("Error while reading directory %s: %s", location, exc)
        return []
    return sort_elements(filter_elements(elements, query), sort_data)
