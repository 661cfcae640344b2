"""Sort-options menu for the focused panel.

The menu cursor moves freely while open and is committed to ``selected`` only
on confirm; cancel snaps it back. The reverse flag is not part of that
commit: ``toggle_reverse_sort`` applies immediately, menu open or not.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..model import ModalKind, Panel
from ..runtime.state import AppState


@dataclass(frozen=True)
class SortOptionsDeps:
    state: AppState
    refresh_panel: Callable[[Panel], None]


class SortOptionsOps:
    def __init__(self, deps: SortOptionsDeps) -> None:
        self.state = deps.state
        self.refresh_panel = deps.refresh_panel

    def open_sort_options_menu(self) -> None:
        self.state.active_modal = ModalKind.SORT_OPTIONS
        self.state.dirty = True

    def _close(self) -> None:
        if self.state.active_modal == ModalKind.SORT_OPTIONS:
            self.state.active_modal = None
        self.state.dirty = True

    def cancel_sort_options(self) -> None:
        sort_options = self.state.focused_panel().sort_options
        sort_options.cursor = sort_options.data.selected
        self._close()

    def confirm_sort_options(self) -> None:
        panel = self.state.focused_panel()
        panel.sort_options.data.selected = panel.sort_options.cursor
        self._close()
        self.refresh_panel(panel)

    def sort_options_list_up(self) -> None:
        sort_options = self.state.focused_panel().sort_options
        if sort_options.cursor > 0:
            sort_options.cursor -= 1
        else:
            sort_options.cursor = len(sort_options.data.options) - 1
        self.state.dirty = True

    def sort_options_list_down(self) -> None:
        sort_options = self.state.focused_panel().sort_options
        if sort_options.cursor < len(sort_options.data.options) - 1:
            sort_options.cursor += 1
        else:
            sort_options.cursor = 0
        self.state.dirty = True

    def toggle_reverse_sort(self) -> None:
        panel = self.state.focused_panel()
        panel.sort_options.data.reversed = not panel.sort_options.data.reversed
        self.refresh_panel(panel)
