"""hello-world: print the listing of the current directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from . import console
from .runner import CommandRunner


def list_directory(runner: CommandRunner) -> str:
    return runner.capture("ls")


def main(directory: Optional[Path] = None) -> None:
    console.setup_logging()
    runner = CommandRunner(directory or Path.cwd())
    print(list_directory(runner))


if __name__ == "__main__":
    main()
