"""Plain-text frame rendering.

Turns ``AppState`` into one string per terminal row. Column widths come
straight from the geometry the panel lifecycle computed; this module never
changes state.
"""

from __future__ import annotations

import time
from datetime import datetime

from ..layout import main_panel_height
from ..model import FocusTarget, FocusType, ModalKind, Panel
from ..runtime.state import AppState

BOLD = "\033[1m"
RESET = "\033[0m"

_FOCUS_MARKERS = {
    FocusType.PRIMARY: "*",
    FocusType.SECONDARY: "+",
    FocusType.NONE: " ",
}


def fit(text: str, width: int) -> str:
    """Pad or truncate ``text`` to exactly ``width`` columns."""
    if width <= 0:
        return ""
    if len(text) > width:
        if width == 1:
            return text[:1]
        return text[: width - 1] + "~"
    return text.ljust(width)


def _format_size(size: int) -> str:
    value = float(size)
    for unit in ("B", "kB", "MB", "GB"):
        if value < 1000:
            return f"{value:.0f}{unit}" if unit == "B" else f"{value:.1f}{unit}"
        value /= 1000
    return f"{value:.1f}TB"


def _panel_rows(panel: Panel, width: int, rows: int) -> list[str]:
    out = [fit(f"{_FOCUS_MARKERS[panel.focus_type]} {panel.location}", width)]
    if panel.search_bar.focused or panel.search_bar.value:
        out.append(fit(f"/ {panel.search_bar.value or panel.search_bar.placeholder}", width))
    list_rows = max(0, rows - len(out))
    for idx in range(panel.render_index, min(len(panel.elements), panel.render_index + list_rows)):
        element = panel.elements[idx]
        name = element.name + ("/" if element.is_dir else "")
        marker = ">" if idx == panel.cursor and panel.focus_type != FocusType.NONE else " "
        out.append(fit(f"{marker} {name}", width))
    while len(out) < rows:
        out.append(fit("", width))
    return out


def _sidebar_rows(state: AppState, width: int, rows: int) -> list[str]:
    out = [fit("Pinned", width)]
    focused = state.focus_target == FocusTarget.SIDEBAR
    for idx, pinned in enumerate(state.pinned):
        marker = ">" if focused and idx == state.sidebar_cursor else " "
        out.append(fit(f"{marker} {pinned.name}", width))
    out = out[:rows]
    while len(out) < rows:
        out.append(fit("", width))
    return out


def _preview_rows(state: AppState, width: int, rows: int) -> list[str]:
    element = state.focused_panel().selected_element()
    out = [fit("Preview", width)]
    if element is not None:
        out.append(fit(element.name, width))
        out.append(fit("directory" if element.is_dir else _format_size(element.size), width))
    while len(out) < rows:
        out.append(fit("", width))
    return out[:rows]


def _footer_rows(state: AppState) -> list[str]:
    half = max(1, state.full_width // 2 - 1)
    process_title = "[Processes]" if state.focus_target == FocusTarget.PROCESS_BAR else " Processes "
    metadata_title = "[Metadata]" if state.focus_target == FocusTarget.METADATA else " Metadata "
    rows = [fit(process_title, half) + "| " + fit(metadata_title, half)]
    element = state.focused_panel().selected_element()
    details: list[str] = []
    if element is not None:
        details.append(f"Name: {element.name}")
        if not element.is_dir:
            details.append(f"Size: {_format_size(element.size)}")
        if element.modified:
            details.append("Modified: " + datetime.fromtimestamp(element.modified).strftime("%Y-%m-%d %H:%M"))
    for idx in range(max(0, state.footer_height - 1)):
        detail = details[idx] if idx < len(details) else ""
        rows.append(fit("", half) + "| " + fit(detail, half))
    return rows


def _modal_lines(state: AppState) -> list[str]:
    modal = state.active_modal
    panel = state.focused_panel()
    if modal == ModalKind.CREATE_ITEM:
        text_input = state.typing_modal.text_input
        return [
            "Create file or directory",
            f"> {text_input.value or text_input.placeholder}",
            "Enter confirm  Esc cancel",
        ]
    if modal == ModalKind.WARN:
        return [state.warn_modal.title, state.warn_modal.content, "y/Enter confirm  n/Esc cancel"]
    if modal == ModalKind.RENAME:
        return ["Rename", f"> {panel.rename.value}", "Enter confirm  Esc cancel"]
    if modal == ModalKind.SORT_OPTIONS:
        sort_options = panel.sort_options
        lines = ["Sort options" + (" (reversed)" if sort_options.data.reversed else "")]
        for idx, option in enumerate(sort_options.data.options):
            marker = ">" if idx == sort_options.cursor else " "
            selected = "*" if idx == sort_options.data.selected else " "
            lines.append(f"{marker}{selected} {option}")
        return lines
    if modal == ModalKind.HELP_MENU:
        menu = state.help_menu
        lines = ["Help"]
        for idx in range(menu.render_index, min(len(menu.data), menu.render_index + menu.height)):
            entry = menu.data[idx]
            if entry.sub_title:
                lines.append(f"-- {entry.sub_title} --")
                continue
            marker = ">" if idx == menu.cursor else " "
            lines.append(f"{marker} {' | '.join(entry.hotkeys):<24} {entry.description}")
        return lines
    return []


def build_screen_lines(state: AppState, now: float | None = None) -> list[str]:
    """Return exactly ``state.full_height`` rows of at most ``full_width`` columns."""
    if now is None:
        now = time.monotonic()
    width = state.full_width
    rows = main_panel_height(state.full_height, state.footer_height, state.footer_visible)

    columns: list[list[str]] = []
    if state.sidebar_width > 0:
        columns.append(_sidebar_rows(state, max(1, state.sidebar_width - 1), rows))
    for panel in state.panels:
        columns.append(_panel_rows(panel, max(1, state.panel_width), rows))
    if state.preview_open and state.preview_width > 0:
        columns.append(_preview_rows(state, state.preview_width, rows))

    body = [fit("|".join(column[row] for column in columns), width) for row in range(rows)]

    modal_lines = _modal_lines(state)
    if modal_lines:
        box_width = min(width, max(len(line) for line in modal_lines) + 4)
        top = max(0, (rows - len(modal_lines)) // 2)
        left = max(0, (width - box_width) // 2)
        for offset, line in enumerate(modal_lines[:rows]):
            row = top + offset
            body[row] = fit(body[row][:left] + fit(f"| {line}", box_width) + body[row][left + box_width:], width)

    bottom: list[str] = []
    if state.footer_visible:
        bottom.extend(fit(row, width) for row in _footer_rows(state))
    if state.active_modal == ModalKind.COMMAND_LINE:
        bottom.append(fit(f": {state.command_line.input.value}", width))
    elif state.status_message and now < state.status_message_until:
        bottom.append(fit(state.status_message, width))
    else:
        bottom.append(fit("? help  q quit", width))

    if state.full_height <= 0:
        return []
    # The status row stays on the last line; short terminals lose rows from the top.
    body_rows = max(0, state.full_height - 1 - len(bottom))
    body = body[:body_rows] + [fit("", width)] * max(0, body_rows - len(body))
    lines = [BOLD + fit("panefm", width) + RESET] + body + bottom
    return lines[-state.full_height:]
