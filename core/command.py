"""Thin wrapper around external commands with merged output."""

from __future__ import annotations

from dataclasses import dataclass
import subprocess
from typing import Callable, Sequence

from core.logging import logger as LOGGER

Runner = Callable[..., subprocess.CompletedProcess[str]]


@dataclass(frozen=True)
class CommandOutput:
    """Exit status and output lines of a finished command."""

    returncode: int
    lines: tuple[str, ...]


def run_command(cmd: Sequence[str], *, runner: Runner = subprocess.run) -> CommandOutput:
    """Run a command to completion with stderr folded into stdout.

    Raises:
        OSError: The executable could not be started.
    """

    LOGGER.debug("$ %s", " ".join(cmd))
    result = runner(
        list(cmd),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        check=False,
    )
    lines = tuple(line.rstrip() for line in (result.stdout or "").splitlines())
    for line in lines:
        LOGGER.debug("  %s", line)
    LOGGER.debug("rc=%s", result.returncode)
    return CommandOutput(returncode=result.returncode, lines=lines)
