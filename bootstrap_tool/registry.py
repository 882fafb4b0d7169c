"""npm registry lookups used to validate requested packages."""

from __future__ import annotations

import subprocess
from typing import Iterable, List

from .runner import CommandRunner


def package_exists(runner: CommandRunner, name: str) -> bool:
    try:
        runner.run("npm", "view", name, quiet=True)
    except subprocess.CalledProcessError:
        return False
    return True


def find_invalid_packages(runner: CommandRunner, names: Iterable[str]) -> List[str]:
    """Return the names npm cannot resolve, in the order given."""
    return [name for name in names if not package_exists(runner, name)]
