"""Runtime orchestration: state, ops objects, and the event loop.

``run_app`` is the interactive entry point; the ops modules are imported
directly by tests and by the composition code in ``runtime.app``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopCallbacks


def run_app(*args, **kwargs):
    """Lazily import the app entrypoint to avoid package-import cycles."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopCallbacks":
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_app",
    "RuntimeLoopCallbacks",
    "run_main_loop",
]
