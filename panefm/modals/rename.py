"""Rename prompt for the focused panel's selected entry.

Renaming onto an existing name asks for confirmation through the warn modal.
A failed rename is logged; the prompt is reset either way.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..model import ModalKind, Panel
from ..runtime.state import AppState

log = logging.getLogger(__name__)

RENAME_OVERWRITE_ACTION = "rename_overwrite"


@dataclass(frozen=True)
class RenameDeps:
    """Runtime dependencies required by :class:`RenameOps`."""

    state: AppState
    rename_path: Callable[[Path, Path], None]
    path_exists: Callable[[Path], bool]
    refresh_panel: Callable[[Panel], None]
    show_status_message: Callable[[str], None]
    open_warn_modal: Callable[[str, str, str], None]


class RenameOps:
    def __init__(self, deps: RenameDeps) -> None:
        self.state = deps.state
        self.rename_path = deps.rename_path
        self.path_exists = deps.path_exists
        self.refresh_panel = deps.refresh_panel
        self.show_status_message = deps.show_status_message
        self.open_warn_modal = deps.open_warn_modal
        self.pending_overwrite: tuple[Path, Path] | None = None

    def open_rename(self) -> None:
        panel = self.state.focused_panel()
        element = panel.selected_element()
        if element is None:
            return
        panel.rename_index = panel.cursor
        panel.rename.set_value(element.name)
        panel.rename.focus()
        self.state.active_modal = ModalKind.RENAME
        self.state.dirty = True

    def _reset(self, panel: Panel) -> None:
        panel.rename.blur()
        panel.rename.clear()
        if self.state.active_modal == ModalKind.RENAME:
            self.state.active_modal = None
        self.state.dirty = True

    def cancel_rename(self) -> None:
        self._reset(self.state.focused_panel())

    def confirm_rename(self) -> None:
        """Rename the target entry to the typed name, then reset the prompt."""
        panel = self.state.focused_panel()
        new_name = panel.rename.value
        try:
            if not (0 <= panel.rename_index < len(panel.elements)):
                return
            if not new_name.strip() or os.sep in new_name or (os.altsep and os.altsep in new_name):
                self.show_status_message("Invalid name")
                return
            old_path = panel.elements[panel.rename_index].location
            new_path = panel.location / new_name
            if new_path == old_path:
                return
            if self.path_exists(new_path):
                self.pending_overwrite = (old_path, new_path)
                self.open_warn_modal(
                    "There is already a file or directory with that name",
                    "This operation will override the existing file",
                    RENAME_OVERWRITE_ACTION,
                )
                return
            self._rename(panel, old_path, new_path)
        finally:
            self._reset(panel)

    def confirm_overwrite(self) -> None:
        pending = self.pending_overwrite
        self.pending_overwrite = None
        if pending is None:
            return
        self._rename(self.state.focused_panel(), *pending)

    def cancel_overwrite(self) -> None:
        self.pending_overwrite = None

    def _rename(self, panel: Panel, old_path: Path, new_path: Path) -> None:
        try:
            self.rename_path(old_path, new_path)
        except OSError as exc:
            # The listing is still refreshed below; the entry may have moved anyway.
            log.error("Error while confirmRename during rename: %s", exc)
        else:
            log.info("renamed %s to %s", old_path, new_path)
        self.refresh_panel(panel)
        for idx, element in enumerate(panel.elements):
            if element.location == new_path:
                panel.cursor = idx
                break
