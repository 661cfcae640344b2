"""Key-to-action dispatch table."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

log = logging.getLogger(__name__)


class KeyActionRegistry:
    """Resolve key tokens to action names, and action names to handlers."""

    def __init__(self, bindings: Mapping[str, str], handlers: Mapping[str, Callable[[], None]]) -> None:
        self._handlers: dict[str, Callable[[], None]] = {}
        for key, action in bindings.items():
            handler = handlers.get(action)
            if handler is None:
                log.debug("no handler for action %r bound to %r", action, key)
                continue
            self._handlers[key] = handler
        self._actions = dict(bindings)

    def action_for(self, key: str) -> str | None:
        return self._actions.get(key)

    def dispatch(self, key: str) -> bool:
        """Run the handler bound to ``key``; return whether one ran."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler()
        return True
