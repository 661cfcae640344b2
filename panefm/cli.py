"""Command-line front door for panefm.

Parses CLI options, resolves the starting directories, and sets up logging.
Then dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from .logging_setup import configure_logging
from .runtime import run_app
from .runtime.config import PINNED_PATH, load_settings
from .runtime.pinned import PinnedDirectoryStore

log = logging.getLogger(__name__)


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def resolve_start_dir(raw: str) -> Path:
    """Map a CLI path to the directory a panel should open.

    Files open their parent directory. Missing paths exit with an error.
    """
    path = Path(raw).expanduser().resolve()
    if not path.exists():
        raise SystemExit(f"Path not found: {raw}")
    return path if path.is_dir() else path.parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panefm",
        description="Browse directories in side-by-side terminal panels.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Directories to open, one panel each. Defaults to the current directory.",
    )
    parser.add_argument("--sidebar-width", type=_nonnegative_int, default=None, help="Sidebar width (0 hides it).")
    parser.add_argument(
        "--preview-width",
        type=_nonnegative_int,
        default=None,
        help="Preview width divisor (0 sizes the preview like one more panel).",
    )
    parser.add_argument("--log-level", default=None, help="Log level for the log file (default: INFO).")
    parser.add_argument("--print-pinned", action="store_true", help="Print pinned directories as JSON and exit.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch panefm."""
    args = build_parser().parse_args(argv)

    if args.print_pinned:
        dirs = PinnedDirectoryStore(PINNED_PATH).load()
        payload = [{"location": pinned.location, "name": pinned.name} for pinned in dirs]
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")
        return

    paths = [resolve_start_dir(raw) for raw in args.paths] or [Path.cwd()]
    log_path = configure_logging(args.log_level)
    log.info("panefm starting, logging to %s", log_path)

    settings = load_settings()
    overrides: dict[str, int] = {}
    if args.sidebar_width is not None:
        overrides["sidebar_width"] = args.sidebar_width
    if args.preview_width is not None:
        overrides["file_preview_width"] = args.preview_width
    if overrides:
        settings = dataclasses.replace(settings, **overrides)
    run_app(paths, settings)


if __name__ == "__main__":
    main()
