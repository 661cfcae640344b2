"""Sidebar of pinned directories."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..model import Panel, PinnedDirectory
from .state import AppState

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SidebarDeps:
    """Runtime dependencies required by :class:`SidebarOps`."""

    state: AppState
    toggle_pinned: Callable[[Path], list[PinnedDirectory]]
    change_location: Callable[[Panel, Path], None]
    show_status_message: Callable[[str], None]


class SidebarOps:
    def __init__(self, deps: SidebarDeps) -> None:
        self.state = deps.state
        self._toggle_pinned = deps.toggle_pinned
        self.change_location = deps.change_location
        self.show_status_message = deps.show_status_message

    def toggle_pinned_directory(self) -> None:
        """Pin the focused panel's directory, or unpin it if already pinned."""
        location = self.state.focused_panel().location
        self.state.pinned = self._toggle_pinned(location)
        self.state.sidebar_cursor = max(0, min(self.state.sidebar_cursor, len(self.state.pinned) - 1))
        self.state.dirty = True

    def sidebar_list_up(self) -> None:
        if not self.state.pinned:
            return
        self.state.sidebar_cursor = (self.state.sidebar_cursor - 1) % len(self.state.pinned)
        self.state.dirty = True

    def sidebar_list_down(self) -> None:
        if not self.state.pinned:
            return
        self.state.sidebar_cursor = (self.state.sidebar_cursor + 1) % len(self.state.pinned)
        self.state.dirty = True

    def open_sidebar_selection(self) -> None:
        """Move the focused panel to the pinned directory under the sidebar cursor."""
        if not self.state.pinned:
            return
        pinned = self.state.pinned[self.state.sidebar_cursor]
        target = Path(pinned.location)
        if not target.is_dir():
            log.warning("pinned directory %s is not available", target)
            self.show_status_message("This path does not exist")
            return
        self.change_location(self.state.focused_panel(), target)
