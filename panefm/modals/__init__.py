"""Modal interactions that borrow keyboard input and hand it back.

Each modal module exposes one ops class; all of them record the open modal in
``AppState.active_modal`` and clear it on every close path.
"""

from .command_line import CommandLineDeps, CommandLineOps
from .create_item import TypingModalDeps, TypingModalOps
from .help_menu import HelpMenuOps, build_help_entries
from .rename import RENAME_OVERWRITE_ACTION, RenameDeps, RenameOps
from .search import SearchDeps, SearchOps
from .sort_options import SortOptionsDeps, SortOptionsOps
from .warn import WarnModalOps

__all__ = [
    "CommandLineDeps",
    "CommandLineOps",
    "HelpMenuOps",
    "build_help_entries",
    "RENAME_OVERWRITE_ACTION",
    "RenameDeps",
    "RenameOps",
    "SearchDeps",
    "SearchOps",
    "SortOptionsDeps",
    "SortOptionsOps",
    "TypingModalDeps",
    "TypingModalOps",
    "WarnModalOps",
]
