"""Main interactive event loop for the terminal UI.

One key press drives one transition. The loop itself only checks for
terminal resizes, expires status messages, redraws dirty frames, and hands
keys to the dispatcher; feature logic lives in the callbacks.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from .state import AppState
from .status import clear_expired_status_message

log = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 100


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    read_key: Callable[[int | None], str]
    terminal_size: Callable[[], tuple[int, int]]
    resize: Callable[[int, int], None]
    build_screen_lines: Callable[[AppState], list[str]]
    write_frame: Callable[[list[str]], None]
    handle_key: Callable[[str], bool]
    now: Callable[[], float] = time.monotonic


def run_main_loop(state: AppState, callbacks: RuntimeLoopCallbacks) -> None:
    """Run until a handler sets ``state.quit_requested``."""
    while not state.quit_requested:
        columns, rows = callbacks.terminal_size()
        if (columns, rows) != (state.full_width, state.full_height):
            log.debug("terminal resized to %dx%d", columns, rows)
            callbacks.resize(columns, rows)

        clear_expired_status_message(state, callbacks.now())

        if state.dirty:
            callbacks.write_frame(callbacks.build_screen_lines(state))
            state.dirty = False

        key = callbacks.read_key(KEY_POLL_TIMEOUT_MS)
        if not key:
            continue
        if callbacks.handle_key(key):
            state.dirty = True
