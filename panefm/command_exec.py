"""Shell command execution for the command line.

Commands run through the host platform's shell so users get the expansion
rules they expect (``~``, environment variables, globs). Execution blocks
until the command exits.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Combined stdout/stderr plus exit status of one shell command."""

    output: str
    returncode: int | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.returncode == 0


def shell_argv(command: str, platform: str | None = None) -> list[str]:
    """Return argv that runs ``command`` in the platform shell."""
    if platform is None:
        platform = sys.platform
    if platform.startswith("win"):
        return ["powershell.exe", "-Command", command]
    return ["/bin/sh", "-c", command]


def run_shell_command(command: str, cwd: Path | None, timeout: float | None = None) -> CommandResult:
    """Run ``command`` in ``cwd`` and capture its combined output.

    Spawn failures and timeouts are reported through ``CommandResult.error``
    rather than raised. ``timeout`` defaults to waiting indefinitely.
    """
    argv = shell_argv(command)
    try:
        proc = subprocess.run(
            argv,
            cwd=str(cwd) if cwd is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            stdin=subprocess.DEVNULL,
            text=True,
            errors="replace",
            check=False,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        output = exc.output if isinstance(exc.output, str) else ""
        return CommandResult(output=output, returncode=None, error=f"timed out after {timeout}s")
    except (OSError, subprocess.SubprocessError) as exc:
        return CommandResult(output="", returncode=None, error=str(exc))
    if proc.returncode != 0:
        log.debug("command %r exited with %d", command, proc.returncode)
    return CommandResult(output=proc.stdout or "", returncode=proc.returncode)
