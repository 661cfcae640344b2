"""Tests for panel geometry and viewport heights.

Covers the width formulas for panels and the preview pane, the panel-count
ceiling, and the footer/help-menu height rules.
"""

from __future__ import annotations

import unittest

from panefm.layout import (
    compute_panel_geometry,
    compute_preview_width,
    default_footer_height,
    help_menu_height,
    main_panel_height,
    panel_columns_total,
    search_bar_width,
)


class PanelGeometryTests(unittest.TestCase):
    def test_two_panels_fill_width_exactly_when_divisible(self) -> None:
        geometry = compute_panel_geometry(124, 20, 2, preview_open=False, preview_divisor=0)

        self.assertEqual(geometry.panel_width, 49)
        self.assertEqual(geometry.preview_width, 0)
        self.assertEqual(geometry.max_panel_count, 5)
        self.assertEqual(panel_columns_total(geometry, 2), 124 - 20)

    def test_rounding_loses_fewer_columns_than_panels(self) -> None:
        for full_width in range(60, 200):
            for panel_count in (1, 2, 3):
                geometry = compute_panel_geometry(
                    full_width, 20, panel_count, preview_open=False, preview_divisor=0
                )
                slack = (full_width - 20) - panel_columns_total(geometry, panel_count)
                self.assertGreaterEqual(slack, 0, (full_width, panel_count))
                self.assertLess(slack, panel_count, (full_width, panel_count))

    def test_auto_preview_takes_one_extra_panel_share(self) -> None:
        geometry = compute_panel_geometry(120, 20, 1, preview_open=True, preview_divisor=0)

        self.assertEqual(geometry.preview_width, (120 - 20 - (4 + 2)) // 2)
        self.assertEqual(geometry.panel_width, (120 - 20 - geometry.preview_width - 4) // 1)
        self.assertEqual(geometry.max_panel_count, (120 - 20 - geometry.preview_width) // 20)

    def test_preview_divisor_takes_fraction_of_columns_after_sidebar(self) -> None:
        self.assertEqual(compute_preview_width(120, 20, 3, 4), 25)
        self.assertEqual(compute_preview_width(120, 0, 3, 3), 40)

    def test_closed_preview_has_zero_width(self) -> None:
        geometry = compute_panel_geometry(120, 20, 1, preview_open=False, preview_divisor=4)
        self.assertEqual(geometry.preview_width, 0)
        self.assertEqual(geometry.panel_width, 96)

    def test_widths_never_go_negative_on_tiny_terminals(self) -> None:
        geometry = compute_panel_geometry(10, 20, 3, preview_open=True, preview_divisor=0)
        self.assertEqual(geometry.panel_width, 0)
        self.assertEqual(geometry.preview_width, 0)
        self.assertEqual(search_bar_width(geometry), 0)

    def test_panel_count_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            compute_panel_geometry(120, 20, 0, preview_open=False, preview_divisor=0)

    def test_search_bar_is_panel_width_minus_padding(self) -> None:
        geometry = compute_panel_geometry(124, 20, 2, preview_open=False, preview_divisor=0)
        self.assertEqual(search_bar_width(geometry), 45)


class HeightPolicyTests(unittest.TestCase):
    def test_footer_shrinks_on_short_terminals(self) -> None:
        self.assertEqual(default_footer_height(34), 6)
        self.assertEqual(default_footer_height(35), 10)

    def test_main_panel_height_accounts_for_visible_footer(self) -> None:
        self.assertEqual(main_panel_height(40, 10, True), 26)
        self.assertEqual(main_panel_height(40, 10, False), 38)
        self.assertEqual(main_panel_height(5, 10, True), 1)

    def test_help_menu_height_is_bounded_by_rows_and_terminal(self) -> None:
        self.assertEqual(help_menu_height(40, 26), 26)
        self.assertEqual(help_menu_height(20, 26), 14)
        self.assertEqual(help_menu_height(5, 26), 1)
