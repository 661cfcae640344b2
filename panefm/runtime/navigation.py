"""Cursor movement and directory changes inside the focused panel.

Each panel remembers its cursor per visited directory (``directory_record``)
so that leaving and re-entering a directory restores the selection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..layout import main_panel_height
from ..model import DirectoryRecord, Element, Panel, SortOptionsData
from .state import AppState

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelNavigationDeps:
    """Runtime dependencies required by :class:`PanelNavigationOps`."""

    state: AppState
    read_directory: Callable[..., list[Element]]
    save_show_hidden: Callable[[bool], None] | None = None


class PanelNavigationOps:
    """Listing refresh and cursor navigation for panels."""

    def __init__(self, deps: PanelNavigationDeps) -> None:
        self.state = deps.state
        self._read_directory = deps.read_directory
        self._save_show_hidden = deps.save_show_hidden

    def visible_rows(self) -> int:
        return main_panel_height(self.state.full_height, self.state.footer_height, self.state.footer_visible)

    def _listing(self, panel: Panel, sort_data: SortOptionsData) -> list[Element]:
        return self._read_directory(
            panel.location,
            sort_data,
            show_hidden=self.state.show_hidden,
            query=panel.search_bar.value,
        )

    def refresh_panel(self, panel: Panel) -> None:
        """Re-read ``panel``'s directory and clamp its cursor to the new listing."""
        panel.elements = self._listing(panel, panel.sort_options.data)
        if not panel.elements:
            panel.cursor = 0
            panel.render_index = 0
        else:
            panel.cursor = max(0, min(panel.cursor, len(panel.elements) - 1))
            self._scroll_to_cursor(panel)
        self.state.dirty = True

    def refresh_focused_panel(self) -> None:
        self.refresh_panel(self.state.focused_panel())

    def _scroll_to_cursor(self, panel: Panel) -> None:
        rows = self.visible_rows()
        if panel.cursor < panel.render_index:
            panel.render_index = panel.cursor
        elif panel.cursor > panel.render_index + rows - 1:
            panel.render_index = panel.cursor - rows + 1
        panel.render_index = max(0, panel.render_index)

    def list_up(self) -> None:
        panel = self.state.focused_panel()
        if not panel.elements:
            return
        if panel.cursor > 0:
            panel.cursor -= 1
        else:
            panel.cursor = len(panel.elements) - 1
        self._scroll_to_cursor(panel)
        self.state.dirty = True

    def list_down(self) -> None:
        panel = self.state.focused_panel()
        if not panel.elements:
            return
        if panel.cursor < len(panel.elements) - 1:
            panel.cursor += 1
        else:
            panel.cursor = 0
        self._scroll_to_cursor(panel)
        self.state.dirty = True

    def change_location(self, panel: Panel, location: Path) -> None:
        """Move ``panel`` to ``location``, saving and restoring per-directory cursors."""
        panel.directory_record[panel.location] = DirectoryRecord(panel.cursor, panel.render_index)
        record = panel.directory_record.get(location)
        panel.location = location
        panel.search_bar.clear()
        panel.cursor = record.cursor if record is not None else 0
        panel.render_index = record.render_index if record is not None else 0
        self.refresh_panel(panel)
        if panel is self.state.focused_panel():
            self.state.pending_dir = location

    def enter_directory(self) -> None:
        panel = self.state.focused_panel()
        element = panel.selected_element()
        if element is None or not element.is_dir:
            return
        self.change_location(panel, element.location)

    def parent_directory(self) -> None:
        panel = self.state.focused_panel()
        parent = panel.location.parent
        if parent == panel.location:
            return
        previous = panel.location
        remembered = parent in panel.directory_record
        self.change_location(panel, parent)
        if not remembered:
            for idx, element in enumerate(panel.elements):
                if element.location == previous:
                    panel.cursor = idx
                    self._scroll_to_cursor(panel)
                    break

    def toggle_hidden_files(self) -> None:
        self.state.show_hidden = not self.state.show_hidden
        if self._save_show_hidden is not None:
            self._save_show_hidden(self.state.show_hidden)
        for panel in self.state.panels:
            self.refresh_panel(panel)
