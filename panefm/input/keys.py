"""Keyboard dispatch.

An open modal gets every key first and swallows it. With no modal open the
focus target decides: the sidebar handles its list keys itself, footer
regions ignore list keys, and all remaining keys go through the global key
registry (which moves the focused panel's cursor when a panel has focus).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..model import FocusTarget, ModalKind, TextInput
from ..runtime.state import AppState
from .key_registry import KeyActionRegistry

LIST_UP_KEYS = frozenset({"UP", "k"})
LIST_DOWN_KEYS = frozenset({"DOWN", "j"})
CONFIRM_KEYS = frozenset({"ENTER"})
CANCEL_KEYS = frozenset({"ESC", "CTRL_C"})
PANEL_LIST_ACTIONS = frozenset({"list_up", "list_down", "enter_directory", "parent_directory"})


@dataclass(frozen=True)
class ModalKeyCallbacks:
    """Operations the open modal may trigger."""

    cancel_typing_modal: Callable[[], None]
    create_item: Callable[[], None]
    cancel_warn_modal: Callable[[], None]
    confirm_warn_modal: Callable[[], None]
    cancel_rename: Callable[[], None]
    confirm_rename: Callable[[], None]
    sort_options_list_up: Callable[[], None]
    sort_options_list_down: Callable[[], None]
    cancel_sort_options: Callable[[], None]
    confirm_sort_options: Callable[[], None]
    toggle_reverse_sort: Callable[[], None]
    cancel_search: Callable[[], None]
    confirm_search: Callable[[], None]
    set_search_query: Callable[[str], None]
    help_menu_list_up: Callable[[], None]
    help_menu_list_down: Callable[[], None]
    quit_help_menu: Callable[[], None]
    close_command_line: Callable[[], None]
    enter_command_line: Callable[[], None]


@dataclass(frozen=True)
class SidebarKeyCallbacks:
    sidebar_list_up: Callable[[], None]
    sidebar_list_down: Callable[[], None]
    open_sidebar_selection: Callable[[], None]


def edited_text(key: str, value: str) -> str | None:
    """Return ``value`` after applying an editing key, or ``None`` if not one."""
    if key == "BACKSPACE":
        return value[:-1]
    if key == "CTRL_U":
        return ""
    if len(key) == 1 and key.isprintable():
        return value + key
    return None


def _edit_input(key: str, text_input: TextInput) -> bool:
    value = edited_text(key, text_input.value)
    if value is None:
        return False
    text_input.set_value(value)
    return True


def _handle_text_modal(
    key: str,
    text_input: TextInput,
    cancel: Callable[[], None],
    confirm: Callable[[], None],
) -> bool:
    if key in CANCEL_KEYS:
        cancel()
    elif key in CONFIRM_KEYS:
        confirm()
    else:
        _edit_input(key, text_input)
    return True


def handle_modal_key(key: str, state: AppState, callbacks: ModalKeyCallbacks) -> bool:
    """Route ``key`` to the open modal; return ``False`` when none is open."""
    modal = state.active_modal
    if modal is None:
        return False
    state.dirty = True

    if modal == ModalKind.CREATE_ITEM:
        return _handle_text_modal(
            key, state.typing_modal.text_input, callbacks.cancel_typing_modal, callbacks.create_item
        )
    if modal == ModalKind.RENAME:
        return _handle_text_modal(
            key, state.focused_panel().rename, callbacks.cancel_rename, callbacks.confirm_rename
        )
    if modal == ModalKind.COMMAND_LINE:
        return _handle_text_modal(
            key, state.command_line.input, callbacks.close_command_line, callbacks.enter_command_line
        )
    if modal == ModalKind.WARN:
        if key in CANCEL_KEYS or key in {"n", "N"}:
            callbacks.cancel_warn_modal()
        elif key in CONFIRM_KEYS or key in {"y", "Y"}:
            callbacks.confirm_warn_modal()
        return True
    if modal == ModalKind.SEARCH:
        if key in CANCEL_KEYS:
            callbacks.cancel_search()
        elif key in CONFIRM_KEYS:
            callbacks.confirm_search()
        else:
            value = edited_text(key, state.focused_panel().search_bar.value)
            if value is not None:
                callbacks.set_search_query(value)
        return True
    if modal == ModalKind.SORT_OPTIONS:
        if key in LIST_UP_KEYS:
            callbacks.sort_options_list_up()
        elif key in LIST_DOWN_KEYS:
            callbacks.sort_options_list_down()
        elif key in CONFIRM_KEYS:
            callbacks.confirm_sort_options()
        elif key in CANCEL_KEYS or key == "o":
            callbacks.cancel_sort_options()
        elif key == "R":
            callbacks.toggle_reverse_sort()
        return True
    if modal == ModalKind.HELP_MENU:
        if key in LIST_UP_KEYS:
            callbacks.help_menu_list_up()
        elif key in LIST_DOWN_KEYS:
            callbacks.help_menu_list_down()
        elif key in CANCEL_KEYS or key in {"?", "q"}:
            callbacks.quit_help_menu()
        return True
    return True


def handle_key(
    key: str,
    state: AppState,
    registry: KeyActionRegistry,
    modal_callbacks: ModalKeyCallbacks,
    sidebar_callbacks: SidebarKeyCallbacks,
) -> bool:
    """Handle one key press; return whether anything consumed it."""
    if not key:
        return False
    if handle_modal_key(key, state, modal_callbacks):
        return True

    action = registry.action_for(key)
    if state.focus_target == FocusTarget.SIDEBAR:
        if key in LIST_UP_KEYS:
            sidebar_callbacks.sidebar_list_up()
            return True
        if key in LIST_DOWN_KEYS:
            sidebar_callbacks.sidebar_list_down()
            return True
        if action == "enter_directory":
            sidebar_callbacks.open_sidebar_selection()
            return True
    if state.focus_target != FocusTarget.PANEL and action in PANEL_LIST_ACTIONS:
        return False
    return registry.dispatch(key)
