"""Scrollable help menu.

Rows come from the key map: each section starts with a sub-title row, which
the cursor steps over. Row 0 is always a sub-title, so the cursor never
rests there. ``render_index`` is the first row drawn in a viewport of
``height`` rows.
"""

from __future__ import annotations

from ..input.keymap import HOTKEY_SECTIONS, Hotkey, key_label
from ..layout import help_menu_height
from ..model import ModalKind
from ..runtime.state import AppState, HelpEntry


def build_help_entries(
    sections: tuple[tuple[str, tuple[Hotkey, ...]], ...] = HOTKEY_SECTIONS,
) -> list[HelpEntry]:
    entries: list[HelpEntry] = []
    for title, hotkeys in sections:
        entries.append(HelpEntry(sub_title=title))
        for hotkey in hotkeys:
            entries.append(
                HelpEntry(
                    hotkeys=tuple(key_label(key) for key in hotkey.keys),
                    description=hotkey.description,
                )
            )
    return entries


class HelpMenuOps:
    def __init__(self, state: AppState) -> None:
        self.state = state

    def open_help_menu(self) -> None:
        """Toggle the help menu."""
        if self.state.active_modal == ModalKind.HELP_MENU:
            self.quit_help_menu()
            return
        menu = self.state.help_menu
        menu.height = help_menu_height(self.state.full_height, len(menu.data))
        self.state.active_modal = ModalKind.HELP_MENU
        self.state.dirty = True

    def quit_help_menu(self) -> None:
        if self.state.active_modal == ModalKind.HELP_MENU:
            self.state.active_modal = None
        self.state.dirty = True

    def help_menu_list_up(self) -> None:
        menu = self.state.help_menu
        if not menu.data:
            return
        if menu.cursor > 1:
            menu.cursor -= 1
            if menu.cursor < menu.render_index:
                menu.render_index -= 1
                if menu.data[menu.cursor].sub_title:
                    menu.render_index -= 1
            if menu.data[menu.cursor].sub_title:
                menu.cursor -= 1
        else:
            menu.cursor = len(menu.data) - 1
            menu.render_index = max(0, len(menu.data) - menu.height)
        self.state.dirty = True

    def help_menu_list_down(self) -> None:
        menu = self.state.help_menu
        if not menu.data:
            return
        if menu.cursor < len(menu.data) - 1:
            menu.cursor += 1
            if menu.cursor > menu.render_index + menu.height - 1:
                menu.render_index += 1
                if menu.data[menu.cursor].sub_title:
                    menu.render_index += 1
            if menu.data[menu.cursor].sub_title:
                menu.cursor += 1
        else:
            menu.cursor = 1
            menu.render_index = 0
        self.state.dirty = True
