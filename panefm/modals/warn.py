"""Warn modal: a yes/no confirmation that runs a registered action."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..model import ModalKind
from ..runtime.state import AppState

log = logging.getLogger(__name__)


class WarnModalOps:
    """Open, confirm, and cancel warn dialogs.

    Dialogs name their follow-up by action key; owners register the matching
    confirm/cancel callbacks with ``register_action``.
    """

    def __init__(self, state: AppState) -> None:
        self.state = state
        self._actions: dict[str, tuple[Callable[[], None], Callable[[], None] | None]] = {}

    def register_action(
        self,
        action: str,
        on_confirm: Callable[[], None],
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._actions[action] = (on_confirm, on_cancel)

    def open_warn_modal(self, title: str, content: str, action: str) -> None:
        modal = self.state.warn_modal
        modal.title = title
        modal.content = content
        modal.action = action
        self.state.active_modal = ModalKind.WARN
        self.state.dirty = True

    def _close(self) -> str:
        modal = self.state.warn_modal
        action = modal.action
        modal.title = ""
        modal.content = ""
        modal.action = ""
        if self.state.active_modal == ModalKind.WARN:
            self.state.active_modal = None
        self.state.dirty = True
        return action

    def cancel_warn_modal(self) -> None:
        action = self._close()
        callbacks = self._actions.get(action)
        if callbacks is not None and callbacks[1] is not None:
            callbacks[1]()

    def confirm_warn_modal(self) -> None:
        action = self._close()
        callbacks = self._actions.get(action)
        if callbacks is None:
            log.warning("warn modal confirmed with unknown action %r", action)
            return
        callbacks[0]()
