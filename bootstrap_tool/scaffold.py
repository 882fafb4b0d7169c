"""Generated project files: .gitignore, tool configs and README."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .runner import CommandRunner

README_FILENAME = "README.md"


def generate_gitignore(runner: CommandRunner, template: str) -> None:
    runner.run("npx", "gitignore", template)


def generate_tool_configs(runner: CommandRunner, tasks: Iterable[str]) -> None:
    """Run one `npx mrm <task>` per task (EditorConfig, Prettier, ESLint by default)."""
    for task in tasks:
        runner.run("npx", "mrm", task)


def render_readme(project_name: str, template: str) -> str:
    # plain substitution: other braces in the template are literal text
    return template.replace("{name}", project_name)


def write_readme(directory: Path, project_name: str, template: str) -> Path:
    path = Path(directory) / README_FILENAME
    path.write_text(render_readme(project_name, template), encoding="utf-8")
    return path
