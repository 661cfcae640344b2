"""Create-item prompt.

The user types a path relative to the focused panel's directory. A trailing
separator creates a directory (with parents); anything else creates an empty
file, renamed to ``name (N)`` when the name is taken.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..model import ModalKind
from ..runtime.state import AppState

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypingModalDeps:
    """Runtime dependencies required by :class:`TypingModalOps`."""

    state: AppState
    rename_if_duplicate: Callable[[Path], Path]
    create_file: Callable[[Path], None]
    create_directory: Callable[[Path], None]
    refresh_focused_panel: Callable[[], None]


def _join_under(base: Path, value: str) -> Path:
    """Join ``value`` onto ``base``; a leading separator does not escape ``base``."""
    relative = value.lstrip(os.sep + (os.altsep or ""))
    return Path(os.path.normpath(os.path.join(base, relative)))


def _ends_with_separator(value: str) -> bool:
    if value.endswith(os.sep):
        return True
    return bool(os.altsep) and value.endswith(os.altsep)


class TypingModalOps:
    def __init__(self, deps: TypingModalDeps) -> None:
        self.state = deps.state
        self.rename_if_duplicate = deps.rename_if_duplicate
        self.create_file = deps.create_file
        self.create_directory = deps.create_directory
        self.refresh_focused_panel = deps.refresh_focused_panel

    def open_typing_modal(self) -> None:
        modal = self.state.typing_modal
        modal.location = self.state.focused_panel().location
        modal.text_input.clear()
        modal.text_input.focus()
        self.state.active_modal = ModalKind.CREATE_ITEM
        self.state.dirty = True

    def _reset(self) -> None:
        modal = self.state.typing_modal
        modal.text_input.blur()
        modal.text_input.clear()
        if self.state.active_modal == ModalKind.CREATE_ITEM:
            self.state.active_modal = None
        self.state.dirty = True

    def cancel_typing_modal(self) -> None:
        self._reset()

    def create_item(self) -> None:
        """Create the typed file or directory; the modal closes on every path."""
        modal = self.state.typing_modal
        value = modal.text_input.value
        try:
            if not value.strip() or modal.location is None:
                return
            path = _join_under(modal.location, value)
            if _ends_with_separator(value):
                try:
                    self.create_directory(path)
                except OSError as exc:
                    log.error("Error while createItem during directory creation: %s", exc)
                    return
            else:
                try:
                    path = self.rename_if_duplicate(path)
                    self.create_file(path)
                except OSError as exc:
                    log.error("Error while createItem during file creation: %s", exc)
                    return
            log.info("created %s", path)
            self.refresh_focused_panel()
        finally:
            self._reset()
