"""Command line tests with a fake shell runner.

``spf <path>`` resolves its argument through the shell's ``echo`` and opens
a panel there; any other line is executed in the focused panel's directory.
The command line closes on every outcome.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from panefm.command_exec import CommandResult
from panefm.modals import CommandLineDeps, CommandLineOps
from panefm.modals.command_line import (
    COMMAND_FAILED_MESSAGE,
    MISSING_PATH_MESSAGE,
    NO_ROOM_MESSAGE,
    UNRESOLVED_PATH_MESSAGE,
)
from panefm.model import FocusType, ModalKind, Panel
from panefm.runtime.state import AppState


class _FakeShell:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Path | None]] = []
        self.results: list[CommandResult] = []

    def __call__(self, command: str, cwd: Path | None) -> CommandResult:
        self.calls.append((command, cwd))
        if self.results:
            return self.results.pop(0)
        return CommandResult(output="", returncode=0)


class CommandLineOpsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "sub").mkdir()
        (self.root / "sub" / "file.txt").write_text("", encoding="utf-8")
        self.other = self.root / "other"
        self.other.mkdir()
        self.state = AppState(
            panels=[
                Panel(location=self.other, focus_type=FocusType.NONE),
                Panel(location=self.root, focus_type=FocusType.PRIMARY),
            ],
            focus_index=1,
            full_width=124,
            full_height=40,
            sidebar_width=20,
            file_preview_width=0,
        )
        self.shell = _FakeShell()
        self.create_panel = mock.Mock(return_value=True)
        self.status = mock.Mock()
        self.refresh_panels = mock.Mock()
        self.ops = CommandLineOps(
            CommandLineDeps(
                state=self.state,
                run_shell_command=self.shell,
                create_new_file_panel=self.create_panel,
                show_status_message=self.status,
                refresh_panels=self.refresh_panels,
            )
        )

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _enter(self, line: str) -> None:
        self.ops.open_command_line()
        self.state.command_line.input.set_value(line)
        self.ops.enter_command_line()

    def _assert_closed(self) -> None:
        self.assertIsNone(self.state.active_modal)
        self.assertEqual(self.state.footer_height, 10)
        self.assertEqual(self.state.command_line.input.value, "")
        self.assertFalse(self.state.command_line.input.focused)

    def test_open_takes_one_footer_row_and_sizes_input(self) -> None:
        self.ops.open_command_line()

        self.assertEqual(self.state.active_modal, ModalKind.COMMAND_LINE)
        self.assertEqual(self.state.footer_height, 9)
        self.assertEqual(self.state.command_line.input.width, 121)
        self.assertTrue(self.state.command_line.input.focused)

    def test_opening_twice_does_not_shrink_footer_twice(self) -> None:
        self.ops.open_command_line()
        self.ops.open_command_line()
        self.assertEqual(self.state.footer_height, 9)

    def test_plain_command_runs_in_primary_panel_directory(self) -> None:
        self._enter("touch x")

        self.assertEqual(self.shell.calls, [("touch x", self.root)])
        self.refresh_panels.assert_called_once_with()
        self.status.assert_not_called()
        self._assert_closed()

    def test_failed_command_shows_status_and_closes(self) -> None:
        self.shell.results.append(CommandResult(output="boom\n", returncode=2))

        with self.assertLogs("panefm.modals.command_line", level="ERROR") as logs:
            self._enter("false")

        self.assertIn("boom", logs.output[0])
        self.status.assert_called_once_with(COMMAND_FAILED_MESSAGE)
        self.refresh_panels.assert_not_called()
        self._assert_closed()

    def test_spf_opens_panel_at_absolute_directory(self) -> None:
        self.shell.results.append(CommandResult(output=f"{self.root / 'sub'}\n", returncode=0))

        self._enter(f"spf {self.root / 'sub'}")

        self.assertEqual(self.shell.calls, [(f"echo {self.root / 'sub'}", self.root)])
        self.create_panel.assert_called_once_with(self.root / "sub")
        self._assert_closed()

    def test_spf_resolves_relative_paths_against_focused_directory(self) -> None:
        self.shell.results.append(CommandResult(output="sub/../sub\n", returncode=0))

        self._enter("spf sub/../sub")

        self.create_panel.assert_called_once_with(self.root / "sub")

    def test_spf_on_file_opens_its_parent(self) -> None:
        self.shell.results.append(CommandResult(output="sub/file.txt\n", returncode=0))

        self._enter("spf sub/file.txt")

        self.create_panel.assert_called_once_with(self.root / "sub")

    def test_spf_without_room_for_panel_shows_status(self) -> None:
        self.create_panel.return_value = False
        self.shell.results.append(CommandResult(output="sub\n", returncode=0))

        with self.assertLogs("panefm.modals.command_line", level="WARNING"):
            self._enter("spf sub")

        self.create_panel.assert_called_once_with(self.root / "sub")
        self.status.assert_called_once_with(NO_ROOM_MESSAGE)
        self._assert_closed()

    def test_spf_on_missing_path_shows_status(self) -> None:
        self.shell.results.append(CommandResult(output="nope\n", returncode=0))

        self._enter("spf nope")

        self.create_panel.assert_not_called()
        self.status.assert_called_once_with(MISSING_PATH_MESSAGE)
        self._assert_closed()

    def test_spf_with_empty_expansion_cannot_resolve(self) -> None:
        self.shell.results.append(CommandResult(output="\n", returncode=0))

        self._enter("spf $UNSET_VARIABLE")

        self.create_panel.assert_not_called()
        self.status.assert_called_once_with(UNRESOLVED_PATH_MESSAGE)

    def test_spf_echo_failure_is_a_command_failure(self) -> None:
        self.shell.results.append(CommandResult(output="", returncode=None, error="spawn failed"))

        with self.assertLogs("panefm.modals.command_line", level="ERROR"):
            self._enter("spf ~/x")

        self.create_panel.assert_not_called()
        self.status.assert_called_once_with(COMMAND_FAILED_MESSAGE)
        self._assert_closed()

    def test_blank_line_only_closes(self) -> None:
        self._enter("   ")

        self.assertEqual(self.shell.calls, [])
        self._assert_closed()

    def test_close_without_open_keeps_footer_height(self) -> None:
        self.ops.close_command_line()
        self._assert_closed()
