"""Persistent JSON config helpers.

Stores layout and listing preferences. Malformed or missing config falls
back to defaults, and failed writes are logged instead of raised.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

from ..model import SORT_OPTIONS

APP_NAME = "panefm"
CONFIG_FILENAME = "config.json"
PINNED_FILENAME = "pinned.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
PINNED_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / PINNED_FILENAME

DEFAULT_SIDEBAR_WIDTH = 20
DEFAULT_FILE_PREVIEW_WIDTH = 0

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """User preferences that shape layout and listings."""

    sidebar_width: int = DEFAULT_SIDEBAR_WIDTH
    file_preview_width: int = DEFAULT_FILE_PREVIEW_WIDTH
    footer_visible: bool = True
    show_hidden: bool = False
    default_sort: str = SORT_OPTIONS[0]


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        log.error("Error while saving config %s: %s", CONFIG_PATH, exc)


def _coerce_nonnegative_int(value: object, default: int) -> int:
    """Booleans and non-integers are invalid and fall back to ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return max(0, value)


def _coerce_bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def load_settings() -> Settings:
    """Load ``Settings`` from config, validating each field independently."""
    data = load_config()
    default_sort = data.get("default_sort")
    if not isinstance(default_sort, str) or default_sort not in SORT_OPTIONS:
        default_sort = SORT_OPTIONS[0]
    return Settings(
        sidebar_width=_coerce_nonnegative_int(data.get("sidebar_width"), DEFAULT_SIDEBAR_WIDTH),
        file_preview_width=_coerce_nonnegative_int(data.get("file_preview_width"), DEFAULT_FILE_PREVIEW_WIDTH),
        footer_visible=_coerce_bool(data.get("footer_visible"), True),
        show_hidden=_coerce_bool(data.get("show_hidden"), False),
        default_sort=default_sort,
    )


def save_show_hidden(show_hidden: bool) -> None:
    """Persist hidden-file visibility preference as a boolean."""
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)
