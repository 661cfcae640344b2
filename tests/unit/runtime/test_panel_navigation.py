"""Cursor movement and directory change tests against a real directory."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from panefm.directory import read_directory
from panefm.model import FocusType, Panel
from panefm.runtime.navigation import PanelNavigationDeps, PanelNavigationOps
from panefm.runtime.state import AppState


def _make_ops(location: Path, save_show_hidden=None) -> tuple[AppState, PanelNavigationOps]:
    panel = Panel(location=location, focus_type=FocusType.PRIMARY)
    state = AppState(
        panels=[panel],
        focus_index=0,
        full_width=124,
        full_height=40,
        sidebar_width=20,
        file_preview_width=0,
    )
    ops = PanelNavigationOps(
        PanelNavigationDeps(state=state, read_directory=read_directory, save_show_hidden=save_show_hidden)
    )
    ops.refresh_panel(panel)
    return state, ops


def _names(panel: Panel) -> list[str]:
    return [element.name for element in panel.elements]


class PanelNavigationTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "alpha").mkdir()
        (self.root / "beta").mkdir()
        (self.root / "beta" / "inner.txt").write_text("x", encoding="utf-8")
        (self.root / "c.txt").write_text("c", encoding="utf-8")
        (self.root / ".hidden").write_text("h", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_refresh_lists_directories_first_without_hidden(self) -> None:
        state, _ops = _make_ops(self.root)
        self.assertEqual(_names(state.panels[0]), ["alpha", "beta", "c.txt"])

    def test_list_down_and_up_wrap_around(self) -> None:
        state, ops = _make_ops(self.root)
        panel = state.panels[0]

        ops.list_up()
        self.assertEqual(panel.cursor, 2)
        ops.list_down()
        self.assertEqual(panel.cursor, 0)
        ops.list_down()
        self.assertEqual(panel.cursor, 1)

    def test_list_up_wrap_scrolls_viewport_to_bottom(self) -> None:
        for idx in range(40):
            (self.root / f"file{idx:02d}.txt").write_text("", encoding="utf-8")
        state, ops = _make_ops(self.root)
        panel = state.panels[0]
        rows = ops.visible_rows()

        ops.list_up()

        self.assertEqual(panel.cursor, len(panel.elements) - 1)
        self.assertEqual(panel.render_index, len(panel.elements) - rows)

    def test_enter_then_parent_restores_cursor(self) -> None:
        state, ops = _make_ops(self.root)
        panel = state.panels[0]
        ops.list_down()

        ops.enter_directory()
        self.assertEqual(panel.location, self.root / "beta")
        self.assertEqual(_names(panel), ["inner.txt"])
        self.assertEqual(state.pending_dir, self.root / "beta")

        ops.parent_directory()
        self.assertEqual(panel.location, self.root)
        self.assertEqual(panel.cursor, 1)

    def test_parent_directory_selects_child_it_came_from(self) -> None:
        state, ops = _make_ops(self.root / "beta")
        ops.parent_directory()

        panel = state.panels[0]
        self.assertEqual(panel.location, self.root)
        self.assertEqual(panel.selected_element().name, "beta")

    def test_enter_directory_ignores_files(self) -> None:
        state, ops = _make_ops(self.root)
        panel = state.panels[0]
        panel.cursor = 2

        ops.enter_directory()

        self.assertEqual(panel.location, self.root)

    def test_change_location_clears_search_query(self) -> None:
        state, ops = _make_ops(self.root)
        panel = state.panels[0]
        panel.search_bar.set_value("zzz")

        ops.change_location(panel, self.root / "alpha")

        self.assertEqual(panel.search_bar.value, "")

    def test_refresh_clamps_cursor_after_entries_disappear(self) -> None:
        state, ops = _make_ops(self.root)
        panel = state.panels[0]
        panel.cursor = 2
        (self.root / "c.txt").unlink()

        ops.refresh_panel(panel)

        self.assertEqual(panel.cursor, 1)

    def test_toggle_hidden_files_persists_and_relists(self) -> None:
        save = mock.Mock()
        state, ops = _make_ops(self.root, save_show_hidden=save)

        ops.toggle_hidden_files()

        self.assertTrue(state.show_hidden)
        save.assert_called_once_with(True)
        self.assertIn(".hidden", _names(state.panels[0]))

    def test_unreadable_directory_lists_empty(self) -> None:
        state, ops = _make_ops(self.root)
        panel = state.panels[0]
        panel.location = self.root / "missing"

        with self.assertLogs("panefm.directory", level="ERROR"):
            ops.refresh_panel(panel)

        self.assertEqual(panel.elements, [])
        self.assertEqual(panel.cursor, 0)
