"""Transient status-line messages.

Messages replace the footer hint for a short, fixed time and then disappear.
Showing one never blocks the event loop.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from .state import AppState

STATUS_MESSAGE_SECONDS = 1.0


def show_status_message(
    state: AppState,
    message: str,
    *,
    now: Callable[[], float] = time.monotonic,
    seconds: float = STATUS_MESSAGE_SECONDS,
) -> None:
    """Display ``message`` until ``seconds`` from now."""
    state.status_message = message
    state.status_message_until = now() + seconds
    state.dirty = True


def clear_expired_status_message(state: AppState, now: float) -> bool:
    """Drop the status message once expired; return whether it was cleared."""
    if not state.status_message or now < state.status_message_until:
        return False
    state.status_message = ""
    state.status_message_until = 0.0
    state.dirty = True
    return True
