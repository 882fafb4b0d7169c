"""Checks that run before the bootstrap pipeline mutates anything."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from rich.console import Console

from . import console
from .errors import MissingDirectoryArgumentError, MissingProgramError, TargetDirectoryError
from .runner import CommandRunner


@dataclass
class SettingCheck:
    name: str
    value: str

    @property
    def is_set(self) -> bool:
        return bool(self.value)


def check_required_programs(
    programs: Iterable[str],
    which: Optional[Callable[[str], Optional[str]]] = None,
) -> None:
    """
    Verify every program is on PATH.

    Stops at the first missing program; the remaining names are not looked up.
    """
    which = which or shutil.which
    for program in programs:
        if not which(program):
            raise MissingProgramError(program)


def resolve_target_directory(value: Optional[str]) -> Path:
    if not value:
        raise MissingDirectoryArgumentError()
    target = Path(value).expanduser().resolve()
    if not target.is_dir():
        raise TargetDirectoryError(target)
    return target


def get_global_git_setting(runner: CommandRunner, name: str) -> str:
    try:
        return runner.capture("git", "config", "--global", "--get", name)
    except subprocess.CalledProcessError:
        # git exits 1 for an unset key
        return ""


def check_global_git_settings(
    runner: CommandRunner,
    names: Iterable[str],
    err_console: Optional[Console] = None,
) -> List[SettingCheck]:
    """Warn about each unset global git setting; never fails."""
    results: List[SettingCheck] = []
    for name in names:
        result = SettingCheck(name=name, value=get_global_git_setting(runner, name))
        if not result.is_set:
            console.warn(f"Warning: Global git setting '{name}' is not set.", err_console)
        results.append(result)
    return results
