from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..layout import FOOTER_HEIGHT
from ..model import (
    FocusTarget,
    ModalKind,
    Panel,
    PinnedDirectory,
    TextInput,
)


@dataclass
class TypingModal:
    """Create-item prompt: base location plus the typed relative path."""

    location: Path | None = None
    text_input: TextInput = field(
        default_factory=lambda: TextInput(placeholder="Add \"/\" at the end to create a directory")
    )


@dataclass
class WarnModal:
    """Yes/no confirmation dialog bound to a named pending action."""

    title: str = ""
    content: str = ""
    action: str = ""


@dataclass(frozen=True)
class HelpEntry:
    """One help-menu row; rows with ``sub_title`` are section headers."""

    hotkeys: tuple[str, ...] = ()
    description: str = ""
    sub_title: str = ""


@dataclass
class HelpMenu:
    data: list[HelpEntry] = field(default_factory=list)
    cursor: int = 1
    render_index: int = 0
    height: int = 1
    width: int = 0


@dataclass
class CommandLine:
    input: TextInput = field(default_factory=TextInput)


@dataclass
class AppState:
    panels: list[Panel]
    focus_index: int
    full_width: int
    full_height: int
    sidebar_width: int
    file_preview_width: int
    focus_target: FocusTarget = FocusTarget.PANEL
    active_modal: ModalKind | None = None
    footer_visible: bool = True
    footer_height: int = FOOTER_HEIGHT
    preview_open: bool = False
    preview_width: int = 0
    panel_width: int = 0
    max_panel_count: int = 0
    pending_dir: Path | None = None
    show_hidden: bool = False
    typing_modal: TypingModal = field(default_factory=TypingModal)
    warn_modal: WarnModal = field(default_factory=WarnModal)
    help_menu: HelpMenu = field(default_factory=HelpMenu)
    command_line: CommandLine = field(default_factory=CommandLine)
    pinned: list[PinnedDirectory] = field(default_factory=list)
    sidebar_cursor: int = 0
    status_message: str = ""
    status_message_until: float = 0.0
    dirty: bool = True
    quit_requested: bool = False

    def focused_panel(self) -> Panel:
        return self.panels[self.focus_index]
