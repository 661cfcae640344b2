"""Input-layer public API: key decoding, key map, and dispatch."""

from .key_registry import KeyActionRegistry
from .keymap import HOTKEY_SECTIONS, Hotkey, default_bindings, key_label
from .keys import (
    ModalKeyCallbacks,
    SidebarKeyCallbacks,
    edited_text,
    handle_key,
    handle_modal_key,
)
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "HOTKEY_SECTIONS",
    "Hotkey",
    "default_bindings",
    "key_label",
    "KeyActionRegistry",
    "ModalKeyCallbacks",
    "SidebarKeyCallbacks",
    "edited_text",
    "handle_key",
    "handle_modal_key",
]
