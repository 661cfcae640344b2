"""Command line: run a shell command in the focused panel's directory.

A line starting with ``spf `` is not run as typed. Its remainder is echoed by
the shell, so ``~``, variables, and relative paths expand the usual way, and
the resulting path is opened in a new panel (its parent, for files).

Execution blocks the event loop until the command exits. Whatever happens,
the command line is closed at the end.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..command_exec import CommandResult
from ..model import FocusType, ModalKind
from ..runtime.state import AppState

log = logging.getLogger(__name__)

SPF_PREFIX = "spf "
COMMAND_FAILED_MESSAGE = "command failed (see log)"
UNRESOLVED_PATH_MESSAGE = "failed to determine directory"
MISSING_PATH_MESSAGE = "This path does not exist"
NO_ROOM_MESSAGE = "no room for another panel"


class _CommandLineAbort(Exception):
    """Stops ``enter_command_line`` with a user-visible message."""


@dataclass(frozen=True)
class CommandLineDeps:
    """Runtime dependencies required by :class:`CommandLineOps`."""

    state: AppState
    run_shell_command: Callable[[str, Path | None], CommandResult]
    create_new_file_panel: Callable[[Path], bool]
    show_status_message: Callable[[str], None]
    refresh_panels: Callable[[], None] | None = None


class CommandLineOps:
    def __init__(self, deps: CommandLineDeps) -> None:
        self.state = deps.state
        self.run_shell_command = deps.run_shell_command
        self.create_new_file_panel = deps.create_new_file_panel
        self.show_status_message = deps.show_status_message
        self.refresh_panels = deps.refresh_panels

    def open_command_line(self) -> None:
        if self.state.active_modal == ModalKind.COMMAND_LINE:
            return
        self.state.footer_height -= 1
        line = self.state.command_line.input
        line.clear()
        line.width = max(0, self.state.full_width - 3)
        line.focus()
        self.state.active_modal = ModalKind.COMMAND_LINE
        self.state.dirty = True

    def close_command_line(self) -> None:
        if self.state.active_modal == ModalKind.COMMAND_LINE:
            self.state.footer_height += 1
            self.state.active_modal = None
        line = self.state.command_line.input
        line.clear()
        line.blur()
        self.state.dirty = True

    def _focused_panel_dir(self) -> Path | None:
        for panel in self.state.panels:
            if panel.focus_type == FocusType.PRIMARY:
                return panel.location
        return self.state.focused_panel().location

    def enter_command_line(self) -> None:
        """Run the typed line; ``spf <path>`` opens a panel at the expanded path."""
        cmd_line = self.state.command_line.input.value
        cwd = self._focused_panel_dir()
        try:
            if not cmd_line.strip():
                return
            if cmd_line.startswith(SPF_PREFIX):
                target = self._resolve_spf_target(cmd_line[len(SPF_PREFIX):], cwd)
                if not self.create_new_file_panel(target):
                    log.warning("no room to open a panel at %s", target)
                    raise _CommandLineAbort(NO_ROOM_MESSAGE)
            else:
                self._run(cmd_line, cwd)
                if self.refresh_panels is not None:
                    self.refresh_panels()
        except _CommandLineAbort as exc:
            self.show_status_message(str(exc))
        finally:
            self.close_command_line()

    def _run(self, cmd_line: str, cwd: Path | None) -> str:
        result = self.run_shell_command(cmd_line, cwd)
        if not result.ok:
            log.error(
                "Command execution failed: %r (returncode=%s, error=%s, output=%r)",
                cmd_line,
                result.returncode,
                result.error,
                result.output,
            )
            raise _CommandLineAbort(COMMAND_FAILED_MESSAGE)
        return result.output

    def _resolve_spf_target(self, argument: str, cwd: Path | None) -> Path:
        output = self._run(f"echo {argument}", cwd).strip()
        if not output:
            raise _CommandLineAbort(UNRESOLVED_PATH_MESSAGE)
        try:
            path = Path(output).expanduser()
            if not path.is_absolute():
                path = (cwd or Path.cwd()) / path
            path = Path(os.path.normpath(path))
        except (OSError, ValueError) as exc:
            log.error("FilePath failed (can't find absolute): %s, output=%r", exc, output)
            raise _CommandLineAbort(UNRESOLVED_PATH_MESSAGE) from exc

        try:
            is_dir = path.is_dir()
            exists = is_dir or path.exists()
        except OSError as exc:
            log.error("FilePath failed (can't determine stats): %s, output=%r", exc, path)
            raise _CommandLineAbort(UNRESOLVED_PATH_MESSAGE) from exc
        if not exists:
            raise _CommandLineAbort(MISSING_PATH_MESSAGE)
        return path if is_dir else path.parent
