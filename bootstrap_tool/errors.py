"""Fatal error types for the bootstrapper."""

from __future__ import annotations

from pathlib import Path


class BootstrapError(Exception):
    """A precondition failure that stops the run before anything is mutated."""

    exit_code = 1


class MissingProgramError(BootstrapError):
    def __init__(self, program: str):
        self.program = program
        super().__init__(f"Error: Required command not found: {program}")


class MissingDirectoryArgumentError(BootstrapError):
    def __init__(self) -> None:
        super().__init__("Error: You must specify the --directory argument")


class TargetDirectoryError(BootstrapError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Error: Target directory '{path}' does not exist")


class ConfigError(BootstrapError):
    pass
