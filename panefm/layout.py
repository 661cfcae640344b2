"""Panel geometry policy.

Pure functions that turn terminal size, sidebar width, preview settings, and
panel count into per-panel widths. Every structural change (panel opened or
closed, preview toggled, terminal resized) re-runs ``compute_panel_geometry``;
nothing here keeps state.
"""

from __future__ import annotations

from typing import NamedTuple

# Columns reserved regardless of panel count (outer borders of the panel row).
FIXED_COLUMNS = 4
# Border columns consumed by each panel beyond the first.
PANEL_BORDER_COLUMNS = 2
MIN_PANEL_COLUMNS = 20
SEARCH_BAR_PADDING = 4

# Rows taken by the footer (process bar, metadata, clipboard) when visible.
FOOTER_HEIGHT = 10
MIN_FOOTER_TERMINAL_HEIGHT = 35
SMALL_FOOTER_HEIGHT = 6


class PanelGeometry(NamedTuple):
    """Derived widths for the current panel set."""

    panel_width: int
    preview_width: int
    max_panel_count: int


def compute_preview_width(
    full_width: int,
    sidebar_width: int,
    panel_count: int,
    preview_divisor: int,
) -> int:
    """Return preview-pane width for an open preview.

    ``preview_divisor == 0`` means the preview shares the space equally with
    the panels; otherwise it takes ``1 / preview_divisor`` of the columns left
    after the sidebar.
    """
    if preview_divisor == 0:
        reserved = FIXED_COLUMNS + panel_count * PANEL_BORDER_COLUMNS
        return max(0, (full_width - sidebar_width - reserved) // (panel_count + 1))
    return max(0, (full_width - sidebar_width) // preview_divisor)


def compute_panel_geometry(
    full_width: int,
    sidebar_width: int,
    panel_count: int,
    *,
    preview_open: bool,
    preview_divisor: int,
) -> PanelGeometry:
    """Compute panel width, preview width, and the panel-count ceiling."""
    if panel_count < 1:
        raise ValueError("panel_count must be >= 1")
    preview_width = 0
    if preview_open:
        preview_width = compute_preview_width(full_width, sidebar_width, panel_count, preview_divisor)
    available = full_width - sidebar_width - preview_width
    borders = FIXED_COLUMNS + (panel_count - 1) * PANEL_BORDER_COLUMNS
    panel_width = max(0, (available - borders) // panel_count)
    max_panel_count = available // MIN_PANEL_COLUMNS
    return PanelGeometry(panel_width, preview_width, max_panel_count)


def panel_columns_total(geometry: PanelGeometry, panel_count: int) -> int:
    """Return columns used by ``panel_count`` panels including their borders."""
    borders = FIXED_COLUMNS + (panel_count - 1) * PANEL_BORDER_COLUMNS
    return geometry.panel_width * panel_count + borders


def search_bar_width(geometry: PanelGeometry) -> int:
    return max(0, geometry.panel_width - SEARCH_BAR_PADDING)


def default_footer_height(full_height: int) -> int:
    """Footer height for a terminal of ``full_height`` rows."""
    if full_height < MIN_FOOTER_TERMINAL_HEIGHT:
        return SMALL_FOOTER_HEIGHT
    return FOOTER_HEIGHT


def main_panel_height(full_height: int, footer_height: int, footer_visible: bool) -> int:
    """Rows available to panel listings after the header and the footer."""
    used = 2
    if footer_visible:
        used += footer_height + 2
    return max(1, full_height - used)


def help_menu_height(full_height: int, row_count: int) -> int:
    """Visible rows of the help menu overlay."""
    return max(1, min(row_count, full_height - 6))
