"""Keyboard-focus transitions between panels, sidebar, and footer regions.

``AppState.focus_target`` names the region that owns input; the panel at
``focus_index`` mirrors it through its ``focus_type`` (primary while panels
own input, secondary while another region does). Every other panel is
unfocused, so at most one panel is ever primary.
"""

from __future__ import annotations

import logging

from ..layout import main_panel_height
from ..model import FocusTarget, FocusType
from .state import AppState

log = logging.getLogger(__name__)


def focus_type_for_target(target: FocusTarget) -> FocusType:
    """Return the focus type the focused panel takes under ``target``."""
    if target == FocusTarget.PANEL:
        return FocusType.PRIMARY
    return FocusType.SECONDARY


class FocusOps:
    """Focus state machine bound to one ``AppState``."""

    def __init__(self, state: AppState) -> None:
        self.state = state

    def _toggle_region(self, target: FocusTarget) -> None:
        """Hand focus to ``target``, or back to the panel if it already has it."""
        panel = self.state.focused_panel()
        if self.state.focus_target == target:
            self.state.focus_target = FocusTarget.PANEL
            panel.focus_type = FocusType.PRIMARY
        else:
            self.state.focus_target = target
            panel.focus_type = FocusType.SECONDARY
        self.state.dirty = True

    def focus_on_sidebar(self) -> None:
        if self.state.sidebar_width == 0:
            return
        self._toggle_region(FocusTarget.SIDEBAR)

    def focus_on_process_bar(self) -> None:
        if not self.state.footer_visible:
            return
        self._toggle_region(FocusTarget.PROCESS_BAR)

    def focus_on_metadata(self) -> None:
        if not self.state.footer_visible:
            return
        self._toggle_region(FocusTarget.METADATA)

    def toggle_footer(self) -> None:
        """Show or hide the footer, reclaiming focus from hidden footer regions."""
        self.state.footer_visible = not self.state.footer_visible
        if not self.state.footer_visible and self.state.focus_target in (
            FocusTarget.PROCESS_BAR,
            FocusTarget.METADATA,
        ):
            self.state.focus_target = FocusTarget.PANEL
            self.state.focused_panel().focus_type = FocusType.PRIMARY
        log.debug(
            "footer visible=%s, panel height=%d",
            self.state.footer_visible,
            main_panel_height(self.state.full_height, self.state.footer_height, self.state.footer_visible),
        )
        self.state.dirty = True

    def _move_focus(self, step: int) -> None:
        panels = self.state.panels
        panels[self.state.focus_index].focus_type = FocusType.NONE
        self.state.focus_index = (self.state.focus_index + step) % len(panels)
        focused = panels[self.state.focus_index]
        focused.focus_type = focus_type_for_target(self.state.focus_target)
        self.state.pending_dir = focused.location
        self.state.dirty = True

    def next_file_panel(self) -> None:
        self._move_focus(1)

    def previous_file_panel(self) -> None:
        self._move_focus(-1)
