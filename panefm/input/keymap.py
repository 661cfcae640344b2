"""Default key bindings, grouped into the sections the help menu shows."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Hotkey:
    """Key tokens bound to one action name."""

    action: str
    keys: tuple[str, ...]
    description: str


HOTKEY_SECTIONS: tuple[tuple[str, tuple[Hotkey, ...]], ...] = (
    (
        "General",
        (
            Hotkey("open_help_menu", ("?",), "Open help menu"),
            Hotkey("quit", ("q", "CTRL_C"), "Quit"),
            Hotkey("open_command_line", (":",), "Open command line"),
            Hotkey("toggle_footer", ("F",), "Toggle footer"),
            Hotkey("toggle_hidden", (".",), "Toggle hidden files"),
        ),
    ),
    (
        "Panel navigation",
        (
            Hotkey("list_up", ("UP", "k"), "Up"),
            Hotkey("list_down", ("DOWN", "j"), "Down"),
            Hotkey("enter_directory", ("ENTER", "l", "RIGHT"), "Open directory"),
            Hotkey("parent_directory", ("h", "LEFT", "BACKSPACE"), "Parent directory"),
            Hotkey("next_file_panel", ("TAB", "L"), "Focus next panel"),
            Hotkey("previous_file_panel", ("SHIFT_TAB", "H"), "Focus previous panel"),
            Hotkey("create_new_file_panel", ("n",), "Open new panel"),
            Hotkey("close_file_panel", ("w",), "Close panel"),
            Hotkey("toggle_file_preview_panel", ("f",), "Toggle preview"),
            Hotkey("focus_on_sidebar", ("s",), "Focus sidebar"),
            Hotkey("focus_on_process_bar", ("p",), "Focus process bar"),
            Hotkey("focus_on_metadata", ("m",), "Focus metadata"),
        ),
    ),
    (
        "File operations",
        (
            Hotkey("open_typing_modal", ("CTRL_N",), "Create file or directory"),
            Hotkey("open_rename", ("CTRL_R",), "Rename"),
            Hotkey("open_search", ("/",), "Search"),
            Hotkey("open_sort_options_menu", ("o",), "Sort options"),
            Hotkey("toggle_reverse_sort", ("R",), "Reverse sort"),
            Hotkey("toggle_pinned_directory", ("P",), "Pin or unpin directory"),
        ),
    ),
)

_KEY_LABELS = {
    "UP": "Up",
    "DOWN": "Down",
    "LEFT": "Left",
    "RIGHT": "Right",
    "ENTER": "Enter",
    "TAB": "Tab",
    "SHIFT_TAB": "Shift+Tab",
    "BACKSPACE": "Backspace",
    "ESC": "Esc",
}


def key_label(key: str) -> str:
    """Return a human-readable label for a key token."""
    if key in _KEY_LABELS:
        return _KEY_LABELS[key]
    if key.startswith("CTRL_"):
        return f"Ctrl+{key[5:].lower()}"
    return key


def default_bindings() -> dict[str, str]:
    """Map every bound key token to its action name."""
    bindings: dict[str, str] = {}
    for _title, hotkeys in HOTKEY_SECTIONS:
        for hotkey in hotkeys:
            for key in hotkey.keys:
                bindings[key] = hotkey.action
    return bindings
