from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from panefm.modals import SearchDeps, SearchOps
from panefm.model import FocusType, ModalKind, Panel
from panefm.runtime.state import AppState


def _make_ops() -> tuple[AppState, SearchOps, mock.Mock]:
    state = AppState(
        panels=[Panel(location=Path("/"), focus_type=FocusType.PRIMARY)],
        focus_index=0,
        full_width=124,
        full_height=40,
        sidebar_width=20,
        file_preview_width=0,
    )
    refresh = mock.Mock()
    return state, SearchOps(SearchDeps(state=state, refresh_panel=refresh)), refresh


class SearchOpsTests(unittest.TestCase):
    def test_query_change_resets_cursor_and_refreshes(self) -> None:
        state, ops, refresh = _make_ops()
        panel = state.panels[0]
        panel.cursor = 5
        panel.render_index = 3
        ops.open_search()

        ops.set_search_query("rea")

        self.assertEqual(panel.search_bar.value, "rea")
        self.assertEqual((panel.cursor, panel.render_index), (0, 0))
        refresh.assert_called_once_with(panel)

    def test_confirm_keeps_query_and_releases_input(self) -> None:
        state, ops, _refresh = _make_ops()
        ops.open_search()
        ops.set_search_query("rea")

        ops.confirm_search()

        panel = state.panels[0]
        self.assertIsNone(state.active_modal)
        self.assertFalse(panel.search_bar.focused)
        self.assertEqual(panel.search_bar.value, "rea")

    def test_cancel_clears_query_and_relists(self) -> None:
        state, ops, refresh = _make_ops()
        ops.open_search()
        self.assertEqual(state.active_modal, ModalKind.SEARCH)
        ops.set_search_query("rea")
        refresh.reset_mock()

        ops.cancel_search()

        panel = state.panels[0]
        self.assertIsNone(state.active_modal)
        self.assertFalse(panel.search_bar.focused)
        self.assertEqual(panel.search_bar.value, "")
        refresh.assert_called_once_with(panel)
