"""Runtime composition layer for panefm.

Builds initial state, wires every ops object to its collaborators, and runs
the loop. This is the only module where filesystem, subprocess, persistence,
and terminal collaborators meet the state machine.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from .. import fs_ops
from ..command_exec import run_shell_command
from ..directory import read_directory
from ..input import (
    KeyActionRegistry,
    ModalKeyCallbacks,
    SidebarKeyCallbacks,
    default_bindings,
    handle_key,
    read_key,
)
from ..modals import (
    RENAME_OVERWRITE_ACTION,
    CommandLineDeps,
    CommandLineOps,
    HelpMenuOps,
    RenameDeps,
    RenameOps,
    SearchDeps,
    SearchOps,
    SortOptionsDeps,
    SortOptionsOps,
    TypingModalDeps,
    TypingModalOps,
    WarnModalOps,
    build_help_entries,
)
from ..model import FocusType, Panel, SortOptions
from ..render import build_screen_lines
from .config import PINNED_PATH, Settings, save_show_hidden
from .focus import FocusOps
from .loop import RuntimeLoopCallbacks, run_main_loop
from .navigation import PanelNavigationDeps, PanelNavigationOps
from .panels import PanelLifecycleDeps, PanelLifecycleOps
from .pinned import PinnedDirectoryStore
from .sidebar import SidebarDeps, SidebarOps
from .state import AppState
from .status import show_status_message
from .terminal import DEFAULT_TERMINAL_SIZE, TerminalController

log = logging.getLogger(__name__)


def build_state(paths: list[Path], settings: Settings, size: tuple[int, int] = DEFAULT_TERMINAL_SIZE) -> AppState:
    """Create the initial single-panel state at the first of ``paths``."""
    first = paths[0] if paths else Path.cwd()
    panel = Panel(
        location=first,
        sort_options=SortOptions.for_key(settings.default_sort),
        focus_type=FocusType.PRIMARY,
    )
    state = AppState(
        panels=[panel],
        focus_index=0,
        full_width=size[0],
        full_height=size[1],
        sidebar_width=settings.sidebar_width,
        file_preview_width=settings.file_preview_width,
        footer_visible=settings.footer_visible,
        show_hidden=settings.show_hidden,
        pending_dir=first,
    )
    state.help_menu.data = build_help_entries()
    return state


@dataclass
class Runtime:
    """Every ops object bound to one ``AppState``, plus key dispatch."""

    state: AppState
    focus: FocusOps
    navigation: PanelNavigationOps
    panels: PanelLifecycleOps
    sidebar: SidebarOps
    warn: WarnModalOps
    typing: TypingModalOps
    rename: RenameOps
    sort_options: SortOptionsOps
    search: SearchOps
    help_menu: HelpMenuOps
    command_line: CommandLineOps
    registry: KeyActionRegistry
    modal_callbacks: ModalKeyCallbacks
    sidebar_callbacks: SidebarKeyCallbacks

    def handle_key(self, key: str) -> bool:
        return handle_key(key, self.state, self.registry, self.modal_callbacks, self.sidebar_callbacks)


def build_runtime(
    state: AppState,
    *,
    pinned_store: PinnedDirectoryStore,
    list_directory: Callable[..., list] = read_directory,
    run_command: Callable[..., object] = run_shell_command,
    persist_show_hidden: Callable[[bool], None] | None = save_show_hidden,
    now: Callable[[], float] = time.monotonic,
) -> Runtime:
    """Wire ops objects together and apply initial geometry and listings."""
    status = partial(show_status_message, state, now=now)

    focus = FocusOps(state)
    navigation = PanelNavigationOps(
        PanelNavigationDeps(state=state, read_directory=list_directory, save_show_hidden=persist_show_hidden)
    )
    panels = PanelLifecycleOps(PanelLifecycleDeps(state=state, refresh_panel=navigation.refresh_panel))
    sidebar = SidebarOps(
        SidebarDeps(
            state=state,
            toggle_pinned=pinned_store.toggle,
            change_location=navigation.change_location,
            show_status_message=status,
        )
    )
    warn = WarnModalOps(state)
    typing = TypingModalOps(
        TypingModalDeps(
            state=state,
            rename_if_duplicate=fs_ops.rename_if_duplicate,
            create_file=fs_ops.create_file,
            create_directory=fs_ops.create_directory,
            refresh_focused_panel=navigation.refresh_focused_panel,
        )
    )
    rename = RenameOps(
        RenameDeps(
            state=state,
            rename_path=fs_ops.rename_path,
            path_exists=fs_ops.path_exists,
            refresh_panel=navigation.refresh_panel,
            show_status_message=status,
            open_warn_modal=warn.open_warn_modal,
        )
    )
    warn.register_action(RENAME_OVERWRITE_ACTION, rename.confirm_overwrite, rename.cancel_overwrite)
    sort_options = SortOptionsOps(SortOptionsDeps(state=state, refresh_panel=navigation.refresh_panel))
    search = SearchOps(SearchDeps(state=state, refresh_panel=navigation.refresh_panel))
    help_menu = HelpMenuOps(state)

    def refresh_all_panels() -> None:
        for panel in state.panels:
            navigation.refresh_panel(panel)

    command_line = CommandLineOps(
        CommandLineDeps(
            state=state,
            run_shell_command=run_command,
            create_new_file_panel=panels.create_new_file_panel,
            show_status_message=status,
            refresh_panels=refresh_all_panels,
        )
    )

    def request_quit() -> None:
        state.quit_requested = True

    handlers: dict[str, Callable[[], None]] = {
        "open_help_menu": help_menu.open_help_menu,
        "quit": request_quit,
        "open_command_line": command_line.open_command_line,
        "toggle_footer": focus.toggle_footer,
        "toggle_hidden": navigation.toggle_hidden_files,
        "list_up": navigation.list_up,
        "list_down": navigation.list_down,
        "enter_directory": navigation.enter_directory,
        "parent_directory": navigation.parent_directory,
        "next_file_panel": focus.next_file_panel,
        "previous_file_panel": focus.previous_file_panel,
        "create_new_file_panel": panels.create_new_file_panel,
        "close_file_panel": panels.close_file_panel,
        "toggle_file_preview_panel": panels.toggle_file_preview_panel,
        "focus_on_sidebar": focus.focus_on_sidebar,
        "focus_on_process_bar": focus.focus_on_process_bar,
        "focus_on_metadata": focus.focus_on_metadata,
        "open_typing_modal": typing.open_typing_modal,
        "open_rename": rename.open_rename,
        "open_search": search.open_search,
        "open_sort_options_menu": sort_options.open_sort_options_menu,
        "toggle_reverse_sort": sort_options.toggle_reverse_sort,
        "toggle_pinned_directory": sidebar.toggle_pinned_directory,
    }
    modal_callbacks = ModalKeyCallbacks(
        cancel_typing_modal=typing.cancel_typing_modal,
        create_item=typing.create_item,
        cancel_warn_modal=warn.cancel_warn_modal,
        confirm_warn_modal=warn.confirm_warn_modal,
        cancel_rename=rename.cancel_rename,
        confirm_rename=rename.confirm_rename,
        sort_options_list_up=sort_options.sort_options_list_up,
        sort_options_list_down=sort_options.sort_options_list_down,
        cancel_sort_options=sort_options.cancel_sort_options,
        confirm_sort_options=sort_options.confirm_sort_options,
        toggle_reverse_sort=sort_options.toggle_reverse_sort,
        cancel_search=search.cancel_search,
        confirm_search=search.confirm_search,
        set_search_query=search.set_search_query,
        help_menu_list_up=help_menu.help_menu_list_up,
        help_menu_list_down=help_menu.help_menu_list_down,
        quit_help_menu=help_menu.quit_help_menu,
        close_command_line=command_line.close_command_line,
        enter_command_line=command_line.enter_command_line,
    )
    sidebar_callbacks = SidebarKeyCallbacks(
        sidebar_list_up=sidebar.sidebar_list_up,
        sidebar_list_down=sidebar.sidebar_list_down,
        open_sidebar_selection=sidebar.open_sidebar_selection,
    )

    state.pinned = pinned_store.load()
    panels.resize(state.full_width, state.full_height)
    refresh_all_panels()

    return Runtime(
        state=state,
        focus=focus,
        navigation=navigation,
        panels=panels,
        sidebar=sidebar,
        warn=warn,
        typing=typing,
        rename=rename,
        sort_options=sort_options,
        search=search,
        help_menu=help_menu,
        command_line=command_line,
        registry=KeyActionRegistry(default_bindings(), handlers),
        modal_callbacks=modal_callbacks,
        sidebar_callbacks=sidebar_callbacks,
    )


def open_initial_panels(runtime: Runtime, paths: list[Path]) -> None:
    """Open one extra panel per path, then give focus back to the first panel."""
    for path in paths:
        if not runtime.panels.create_new_file_panel(path):
            log.warning("not enough room to open a panel at %s", path)
            break
    state = runtime.state
    while state.focus_index != 0:
        runtime.focus.next_file_panel()


def run_app(paths: list[Path], settings: Settings, pinned_path: Path = PINNED_PATH) -> None:
    """Run the interactive file manager on ``paths`` until the user quits."""
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise SystemExit("panefm needs an interactive terminal")

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    state = build_state(paths, settings, terminal.size())
    runtime = build_runtime(state, pinned_store=PinnedDirectoryStore(pinned_path))
    open_initial_panels(runtime, paths[1:])
    log.info("starting with %d panel(s) in %s", len(state.panels), os.getcwd())

    callbacks = RuntimeLoopCallbacks(
        read_key=partial(read_key, stdin_fd),
        terminal_size=terminal.size,
        resize=runtime.panels.resize,
        build_screen_lines=build_screen_lines,
        write_frame=terminal.write_frame,
        handle_key=runtime.handle_key,
    )
    with terminal.raw_mode():
        run_main_loop(state, callbacks)
