"""
External command execution for the bootstrap pipeline.

Verbosity is chosen per call:
- run(...)             → echo `$ cmd` via logging, stream output to the terminal
- run(..., quiet=True) → capture stdout/stderr, no echo
Every call uses check=True, so a non-zero exit raises CalledProcessError.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)


class CommandRunner:
    """Runs commands synchronously inside one fixed working directory."""

    def __init__(self, cwd: Path):
        self.cwd = Path(cwd)

    def run(self, *args: str, quiet: bool = False) -> subprocess.CompletedProcess:
        cmdline = shlex.join(args)
        if quiet:
            log.debug("$ %s (quiet)", cmdline)
        else:
            log.info("$ %s", cmdline)
        return subprocess.run(
            list(args),
            cwd=str(self.cwd),
            check=True,
            text=True,
            capture_output=quiet,
        )

    def capture(self, *args: str) -> str:
        """Run a command quietly and return its stripped stdout."""
        proc = self.run(*args, quiet=True)
        return (proc.stdout or "").strip()
