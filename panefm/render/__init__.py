"""Presentation-only helpers that turn runtime state into terminal rows."""

from .screen import build_screen_lines, fit

__all__ = ["build_screen_lines", "fit"]
