"""
Interactive prompts with retry-until-valid loops.

Both loops are unbounded: an invalid answer prints an error on stderr and
asks again. Tests drive them by injecting `ask`.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from rich.console import Console

from . import console
from .registry import find_invalid_packages
from .runner import CommandRunner

log = logging.getLogger(__name__)

Ask = Callable[[str], str]

PACKAGES_PROMPT = "Which npm packages do you want to install for this project? "


def module_system_prompt(choices: Sequence[str]) -> str:
    return f"Which Node.js module system do you want to use? ({' or '.join(choices)}) "


def prompt_module_system(
    choices: Sequence[str],
    ask: Ask = console.ask,
    err_console: Optional[Console] = None,
) -> str:
    prompt = module_system_prompt(choices)
    while True:
        answer = ask(prompt).strip()
        if answer in choices:
            return answer
        log.debug("rejected module system %r", answer)
        quoted = "' or '".join(choices)
        console.error(f"Error: Module system must be either '{quoted}'\n", err_console)


def parse_package_list(raw: str) -> List[str]:
    return [name for name in raw.split() if name]


def prompt_packages(ask: Ask = console.ask) -> List[str]:
    return parse_package_list(ask(PACKAGES_PROMPT))


def select_packages(
    runner: CommandRunner,
    ask: Ask = console.ask,
    err_console: Optional[Console] = None,
) -> List[str]:
    """
    Ask for packages until every name resolves on npm.

    A single unknown name discards the whole answer. An empty answer is
    accepted without any registry lookup.
    """
    while True:
        packages = prompt_packages(ask)
        invalid = find_invalid_packages(runner, packages)
        if not invalid:
            return packages
        console.error(
            f"Error: The following packages do not exist on npm: {', '.join(invalid)}\n",
            err_console,
        )
