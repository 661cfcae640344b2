"""Panel creation, removal, preview toggling, and terminal resize.

Every structural change ends in ``apply_geometry`` so panel widths, preview
width, the panel-count ceiling, and search-bar widths never go stale.
Requests that would break a bound (too many panels, closing the last panel)
are ignored rather than raised: they come straight from key presses.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..layout import (
    PanelGeometry,
    compute_panel_geometry,
    default_footer_height,
    help_menu_height,
    search_bar_width,
)
from ..model import PANEL_SCOPED_MODALS, FocusType, ModalKind, Panel
from .focus import focus_type_for_target
from .state import AppState

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelLifecycleDeps:
    """Runtime dependencies required by :class:`PanelLifecycleOps`."""

    state: AppState
    refresh_panel: Callable[[Panel], None]


class PanelLifecycleOps:
    """Structural operations over the panel set."""

    def __init__(self, deps: PanelLifecycleDeps) -> None:
        self.state = deps.state
        self.refresh_panel = deps.refresh_panel

    def apply_geometry(self) -> PanelGeometry:
        """Recompute layout for the current panel set and apply it to every panel."""
        state = self.state
        geometry = compute_panel_geometry(
            state.full_width,
            state.sidebar_width,
            len(state.panels),
            preview_open=state.preview_open,
            preview_divisor=state.file_preview_width,
        )
        state.panel_width = geometry.panel_width
        state.preview_width = geometry.preview_width
        state.max_panel_count = geometry.max_panel_count
        width = search_bar_width(geometry)
        for panel in state.panels:
            panel.search_bar.width = width
        state.dirty = True
        return geometry

    def _close_panel_scoped_modal(self) -> None:
        if self.state.active_modal not in PANEL_SCOPED_MODALS:
            return
        panel = self.state.focused_panel()
        panel.search_bar.blur()
        panel.rename.blur()
        panel.sort_options.cursor = panel.sort_options.data.selected
        self.state.active_modal = None

    def create_new_file_panel(self, target_dir: Path | None = None) -> bool:
        """Open a panel at ``target_dir`` (default: the pending directory) and focus it."""
        state = self.state
        if len(state.panels) >= state.max_panel_count:
            log.debug("not opening panel: %d of %d panels open", len(state.panels), state.max_panel_count)
            return False

        focused = state.focused_panel()
        location = target_dir or state.pending_dir or focused.location
        self._close_panel_scoped_modal()
        panel = Panel(
            location=location,
            sort_options=focused.sort_options.copy(),
            focus_type=focus_type_for_target(state.focus_target),
        )
        focused.focus_type = FocusType.NONE
        state.panels.append(panel)
        state.focus_index = len(state.panels) - 1
        state.pending_dir = location
        self.apply_geometry()
        self.refresh_panel(panel)
        log.info("opened panel %d at %s", state.focus_index, location)
        return True

    def close_file_panel(self) -> bool:
        """Close the focused panel unless it is the last one."""
        state = self.state
        if len(state.panels) == 1:
            return False

        self._close_panel_scoped_modal()
        removed = state.panels.pop(state.focus_index)
        if state.focus_index != 0:
            state.focus_index -= 1
        focused = state.focused_panel()
        focused.focus_type = focus_type_for_target(state.focus_target)
        state.pending_dir = focused.location
        self.apply_geometry()
        log.info("closed panel at %s", removed.location)
        return True

    def toggle_file_preview_panel(self) -> None:
        self.state.preview_open = not self.state.preview_open
        self.state.preview_width = 0
        self.apply_geometry()

    def resize(self, full_width: int, full_height: int) -> None:
        """Adopt a new terminal size and re-derive every size-dependent value.

        Panels beyond the new ceiling stay open; only new ones are refused.
        """
        state = self.state
        state.full_width = full_width
        state.full_height = full_height
        state.footer_height = default_footer_height(full_height)
        if state.active_modal == ModalKind.COMMAND_LINE:
            state.footer_height -= 1
        state.command_line.input.width = max(0, full_width - 3)
        state.help_menu.height = help_menu_height(full_height, len(state.help_menu.data))
        self.apply_geometry()
