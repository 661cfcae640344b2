"""Panel creation, removal, preview toggle, and resize tests."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from panefm.model import FocusTarget, FocusType, ModalKind, Panel, SortOptions
from panefm.runtime.panels import PanelLifecycleDeps, PanelLifecycleOps
from panefm.runtime.state import AppState, HelpEntry


def _make_ops(full_width: int = 124, full_height: int = 40) -> tuple[AppState, PanelLifecycleOps, mock.Mock]:
    panel = Panel(location=Path("/start"), focus_type=FocusType.PRIMARY)
    state = AppState(
        panels=[panel],
        focus_index=0,
        full_width=full_width,
        full_height=full_height,
        sidebar_width=20,
        file_preview_width=0,
        pending_dir=Path("/start"),
    )
    refresh = mock.Mock()
    ops = PanelLifecycleOps(PanelLifecycleDeps(state=state, refresh_panel=refresh))
    ops.resize(full_width, full_height)
    return state, ops, refresh


class PanelCreationTests(unittest.TestCase):
    def test_create_opens_focused_panel_at_pending_dir(self) -> None:
        state, ops, refresh = _make_ops()
        state.pending_dir = Path("/elsewhere")

        self.assertTrue(ops.create_new_file_panel())

        self.assertEqual(len(state.panels), 2)
        self.assertEqual(state.focus_index, 1)
        new_panel = state.panels[1]
        self.assertEqual(new_panel.location, Path("/elsewhere"))
        self.assertEqual(new_panel.focus_type, FocusType.PRIMARY)
        self.assertEqual(state.panels[0].focus_type, FocusType.NONE)
        refresh.assert_called_once_with(new_panel)

    def test_create_with_explicit_target_overrides_pending_dir(self) -> None:
        state, ops, _refresh = _make_ops()
        ops.create_new_file_panel(Path("/target"))

        self.assertEqual(state.panels[1].location, Path("/target"))
        self.assertEqual(state.pending_dir, Path("/target"))

    def test_new_panel_gets_independent_copy_of_sort_options(self) -> None:
        state, ops, _refresh = _make_ops()
        state.panels[0].sort_options = SortOptions.for_key("Size", reversed_=True)
        ops.create_new_file_panel()

        copied = state.panels[1].sort_options
        self.assertEqual(copied.data.selected_key, "Size")
        self.assertTrue(copied.data.reversed)
        copied.data.reversed = False
        self.assertTrue(state.panels[0].sort_options.data.reversed)

    def test_create_recomputes_widths_for_all_panels(self) -> None:
        state, ops, _refresh = _make_ops()
        ops.create_new_file_panel()

        self.assertEqual(state.panel_width, 49)
        self.assertEqual([panel.search_bar.width for panel in state.panels], [45, 45])

    def test_create_at_panel_ceiling_is_noop(self) -> None:
        state, ops, refresh = _make_ops(full_width=60)
        self.assertEqual(state.max_panel_count, 2)

        self.assertTrue(ops.create_new_file_panel())
        refresh.reset_mock()
        self.assertFalse(ops.create_new_file_panel())

        self.assertEqual(len(state.panels), 2)
        self.assertEqual(state.focus_index, 1)
        refresh.assert_not_called()

    def test_focus_index_points_at_new_panel_when_focus_was_not_last(self) -> None:
        state, ops, _refresh = _make_ops(full_width=200)
        ops.create_new_file_panel()
        ops.create_new_file_panel()
        state.panels[state.focus_index].focus_type = FocusType.NONE
        state.focus_index = 0
        state.panels[0].focus_type = FocusType.PRIMARY

        ops.create_new_file_panel()

        self.assertEqual(state.focus_index, 3)
        self.assertEqual(state.panels[3].focus_type, FocusType.PRIMARY)
        self.assertEqual(state.panels[0].focus_type, FocusType.NONE)

    def test_create_closes_open_search(self) -> None:
        state, ops, _refresh = _make_ops()
        state.panels[0].search_bar.focus()
        state.active_modal = ModalKind.SEARCH

        ops.create_new_file_panel()

        self.assertIsNone(state.active_modal)
        self.assertFalse(state.panels[0].search_bar.focused)

    def test_new_panel_is_secondary_while_sidebar_has_focus(self) -> None:
        state, ops, _refresh = _make_ops()
        state.focus_target = FocusTarget.SIDEBAR
        state.panels[0].focus_type = FocusType.SECONDARY

        ops.create_new_file_panel()

        self.assertEqual(state.panels[1].focus_type, FocusType.SECONDARY)


class PanelCloseTests(unittest.TestCase):
    def test_closing_last_panel_is_noop(self) -> None:
        state, ops, _refresh = _make_ops()
        self.assertFalse(ops.close_file_panel())
        self.assertEqual(len(state.panels), 1)

    def test_closing_first_panel_keeps_focus_index_zero(self) -> None:
        state, ops, _refresh = _make_ops()
        ops.create_new_file_panel(Path("/second"))
        state.panels[1].focus_type = FocusType.NONE
        state.focus_index = 0
        state.panels[0].focus_type = FocusType.PRIMARY

        self.assertTrue(ops.close_file_panel())

        self.assertEqual(state.focus_index, 0)
        self.assertEqual(state.panels[0].location, Path("/second"))
        self.assertEqual(state.panels[0].focus_type, FocusType.PRIMARY)
        self.assertEqual(state.pending_dir, Path("/second"))

    def test_closing_last_index_moves_focus_left(self) -> None:
        state, ops, _refresh = _make_ops(full_width=200)
        ops.create_new_file_panel(Path("/b"))
        ops.create_new_file_panel(Path("/c"))

        ops.close_file_panel()

        self.assertEqual(state.focus_index, 1)
        self.assertEqual(state.panels[1].location, Path("/b"))
        self.assertEqual(state.panels[1].focus_type, FocusType.PRIMARY)
        self.assertEqual(state.panel_width, (200 - 20 - 6) // 2)


class PreviewAndResizeTests(unittest.TestCase):
    def test_preview_toggle_recomputes_widths(self) -> None:
        state, ops, _refresh = _make_ops()
        ops.toggle_file_preview_panel()

        self.assertTrue(state.preview_open)
        self.assertEqual(state.preview_width, (124 - 20 - 6) // 2)
        self.assertEqual(state.panel_width, (124 - 20 - state.preview_width - 4) // 1)

        ops.toggle_file_preview_panel()
        self.assertFalse(state.preview_open)
        self.assertEqual(state.preview_width, 0)
        self.assertEqual(state.panel_width, 100)

    def test_resize_sets_footer_command_line_and_help_sizes(self) -> None:
        state, ops, _refresh = _make_ops()
        state.help_menu.data = [HelpEntry(sub_title="General")] + [
            HelpEntry(hotkeys=("x",), description="x") for _ in range(40)
        ]

        ops.resize(100, 30)

        self.assertEqual(state.full_width, 100)
        self.assertEqual(state.footer_height, 6)
        self.assertEqual(state.command_line.input.width, 97)
        self.assertEqual(state.help_menu.height, 24)
        self.assertEqual(state.panel_width, 100 - 20 - 4)

    def test_resize_with_open_command_line_keeps_footer_one_row_shorter(self) -> None:
        state, ops, _refresh = _make_ops()
        state.active_modal = ModalKind.COMMAND_LINE

        ops.resize(124, 40)

        self.assertEqual(state.footer_height, 9)

    def test_resize_below_ceiling_keeps_open_panels(self) -> None:
        state, ops, _refresh = _make_ops(full_width=200)
        ops.create_new_file_panel()
        ops.create_new_file_panel()

        ops.resize(60, 40)

        self.assertEqual(len(state.panels), 3)
        self.assertEqual(state.max_panel_count, 2)
        self.assertFalse(ops.create_new_file_panel())
