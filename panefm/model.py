"""Core data model shared by panels, focus handling, and modals.

Panels own their directory listing, sort options, and the input widgets that
per-panel modals (search, rename) capture. Focus and modal variants are enums
so that the runtime state can hold exactly one active value for each.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from pathlib import Path

SORT_OPTIONS: tuple[str, ...] = ("Name", "Size", "Date Modified")


class FocusType(enum.Enum):
    """How strongly a panel is focused."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    NONE = "none"


class FocusTarget(enum.Enum):
    """Region that currently owns keyboard input when no modal is open."""

    PANEL = "panel"
    SIDEBAR = "sidebar"
    PROCESS_BAR = "process_bar"
    METADATA = "metadata"


class ModalKind(enum.Enum):
    """Modal interaction currently consuming raw key input."""

    CREATE_ITEM = "create_item"
    WARN = "warn"
    RENAME = "rename"
    SORT_OPTIONS = "sort_options"
    SEARCH = "search"
    HELP_MENU = "help_menu"
    COMMAND_LINE = "command_line"


# Modals that act on the focused panel's own widgets.
PANEL_SCOPED_MODALS = frozenset({ModalKind.RENAME, ModalKind.SORT_OPTIONS, ModalKind.SEARCH})


@dataclass
class TextInput:
    """Single-line text input widget with explicit focus state."""

    prompt: str = ""
    placeholder: str = ""
    value: str = ""
    width: int = 0
    focused: bool = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def set_value(self, value: str) -> None:
        self.value = value

    def insert(self, text: str) -> None:
        self.value += text

    def backspace(self) -> None:
        self.value = self.value[:-1]

    def clear(self) -> None:
        self.value = ""


def make_search_bar() -> TextInput:
    """Return a fresh, unfocused search-bar input."""
    return TextInput(prompt="", placeholder="(/) Type something")


def make_rename_input() -> TextInput:
    return TextInput(prompt="", placeholder="New name")


@dataclass
class SortOptionsData:
    """Committed sort settings for one panel."""

    options: tuple[str, ...] = SORT_OPTIONS
    selected: int = 0
    reversed: bool = False

    @property
    def selected_key(self) -> str:
        return self.options[self.selected]


@dataclass
class SortOptions:
    """Sort settings plus the sort-options menu cursor."""

    data: SortOptionsData = field(default_factory=SortOptionsData)
    cursor: int = 0

    @classmethod
    def for_key(cls, key: str, reversed_: bool = False) -> SortOptions:
        """Build options with ``key`` committed, falling back to the first key."""
        selected = SORT_OPTIONS.index(key) if key in SORT_OPTIONS else 0
        return cls(data=SortOptionsData(selected=selected, reversed=reversed_), cursor=selected)

    def copy(self) -> SortOptions:
        """Return an independent copy so panels never share sort state."""
        return SortOptions(data=replace(self.data), cursor=self.cursor)


@dataclass(frozen=True)
class Element:
    """One directory entry as listed in a panel."""

    name: str
    location: Path
    is_dir: bool
    size: int = 0
    modified: float = 0.0


@dataclass(frozen=True)
class DirectoryRecord:
    """Remembered cursor position for a directory a panel has visited."""

    cursor: int
    render_index: int


@dataclass
class Panel:
    """One file-browsing panel."""

    location: Path
    sort_options: SortOptions = field(default_factory=SortOptions)
    focus_type: FocusType = FocusType.NONE
    search_bar: TextInput = field(default_factory=make_search_bar)
    rename: TextInput = field(default_factory=make_rename_input)
    rename_index: int = 0
    elements: list[Element] = field(default_factory=list)
    cursor: int = 0
    render_index: int = 0
    directory_record: dict[Path, DirectoryRecord] = field(default_factory=dict)

    def selected_element(self) -> Element | None:
        """Return the entry under the cursor, or ``None`` for an empty listing."""
        if not self.elements:
            return None
        if not (0 <= self.cursor < len(self.elements)):
            return None
        return self.elements[self.cursor]


@dataclass(frozen=True)
class PinnedDirectory:
    """Sidebar shortcut to a directory."""

    location: str
    name: str
