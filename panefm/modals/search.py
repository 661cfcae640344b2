"""Per-panel search bar.

Typing filters the focused panel live. Cancel drops the query and shows every
entry again; confirm keeps the filter and hands keys back to the panel.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..model import ModalKind, Panel
from ..runtime.state import AppState


@dataclass(frozen=True)
class SearchDeps:
    state: AppState
    refresh_panel: Callable[[Panel], None]


class SearchOps:
    def __init__(self, deps: SearchDeps) -> None:
        self.state = deps.state
        self.refresh_panel = deps.refresh_panel

    def open_search(self) -> None:
        self.state.focused_panel().search_bar.focus()
        self.state.active_modal = ModalKind.SEARCH
        self.state.dirty = True

    def _blur(self, panel: Panel) -> None:
        panel.search_bar.blur()
        if self.state.active_modal == ModalKind.SEARCH:
            self.state.active_modal = None
        self.state.dirty = True

    def cancel_search(self) -> None:
        panel = self.state.focused_panel()
        self._blur(panel)
        panel.search_bar.set_value("")
        self.refresh_panel(panel)

    def confirm_search(self) -> None:
        self._blur(self.state.focused_panel())

    def set_search_query(self, query: str) -> None:
        """Replace the query and re-filter, selecting the first match."""
        panel = self.state.focused_panel()
        panel.search_bar.set_value(query)
        panel.cursor = 0
        panel.render_index = 0
        self.refresh_panel(panel)
