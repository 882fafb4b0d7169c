"""Logging setup and colored user-facing messages."""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console

LOG_LEVEL = os.getenv("BOOTSTRAP_TOOL_LOG_LEVEL", "INFO").upper()

stdout_console = Console()
stderr_console = Console(stderr=True)


def setup_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="[%(levelname)s] %(message)s",
    )


def _emit(console: Console, message: str, style: str) -> None:
    # markup off: package names and paths are printed verbatim
    console.print(message, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True)


def error(message: str, console: Optional[Console] = None) -> None:
    _emit(console or stderr_console, message, "red")


def warn(message: str, console: Optional[Console] = None) -> None:
    _emit(console or stderr_console, message, "yellow")


def success(message: str, console: Optional[Console] = None) -> None:
    _emit(console or stdout_console, message, "green")


def ask(prompt: str) -> str:
    """Read one line from stdin after printing `prompt` verbatim."""
    return stdout_console.input(prompt, markup=False)
