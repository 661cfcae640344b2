"""Pinned-directory store.

Pinned directories live in a JSON array of ``{"location", "name"}`` objects
that is rewritten in full on every change. Reads never fail (bad data means
no pins); failed writes are logged.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ..model import PinnedDirectory

log = logging.getLogger(__name__)


def toggle_pinned(dirs: list[PinnedDirectory], location: str) -> list[PinnedDirectory]:
    """Return ``dirs`` with ``location`` unpinned if present, else appended."""
    kept = [pinned for pinned in dirs if pinned.location != location]
    if len(kept) != len(dirs):
        return kept
    return [*dirs, PinnedDirectory(location=location, name=os.path.basename(location.rstrip(os.sep)) or location)]


class PinnedDirectoryStore:
    """JSON-file backed list of pinned directories."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[PinnedDirectory]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            log.error("Error while reading pinned directories %s: %s", self.path, exc)
            return []
        if not isinstance(raw, list):
            return []

        dirs: list[PinnedDirectory] = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            location = item.get("location")
            name = item.get("name")
            if not isinstance(location, str) or not location:
                continue
            if not isinstance(name, str) or not name:
                name = os.path.basename(location.rstrip(os.sep)) or location
            dirs.append(PinnedDirectory(location=location, name=name))
        return dirs

    def save(self, dirs: list[PinnedDirectory]) -> bool:
        """Write the full list; return ``False`` (after logging) on failure."""
        payload = [{"location": pinned.location, "name": pinned.name} for pinned in dirs]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            log.error("Error while saving pinned directories %s: %s", self.path, exc)
            return False
        return True

    def toggle(self, location: Path) -> list[PinnedDirectory]:
        """Toggle ``location`` membership, persist, and return the new list."""
        dirs = toggle_pinned(self.load(), str(location))
        self.save(dirs)
        return dirs
