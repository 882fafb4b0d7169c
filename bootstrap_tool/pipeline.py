# bootstrap_tool/pipeline.py
from __future__ import annotations

"""
The bootstrap pipeline.

Steps run strictly in order against one target directory:

    check-git-settings → git-init → manifest-init → module-system →
    manifest-write → dependencies → install → gitignore → tool-configs →
    readme → commit → notify

The first exception stops the run and propagates to the caller. Completed
steps are not rolled back, so a failure leaves the directory in whatever
state the earlier steps produced.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from rich.console import Console

from . import console, manifest, preflight, prompts, scaffold
from .config import BootstrapConfig
from .runner import CommandRunner

log = logging.getLogger(__name__)


@dataclass
class BootstrapContext:
    directory: Path
    config: BootstrapConfig
    runner: CommandRunner
    ask: prompts.Ask = console.ask
    out_console: Optional[Console] = None
    err_console: Optional[Console] = None

    # Filled in by the steps.
    manifest: Dict[str, Any] = field(default_factory=dict)
    module_system: Optional[str] = None
    packages: List[str] = field(default_factory=list)
    project_name: Optional[str] = None
    completed: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Step:
    name: str
    action: Callable[[BootstrapContext], None]


# ----------------------------
# Steps
# ----------------------------
def check_git_settings(ctx: BootstrapContext) -> None:
    preflight.check_global_git_settings(ctx.runner, ctx.config.git_settings, ctx.err_console)


def git_init(ctx: BootstrapContext) -> None:
    ctx.runner.run("git", "init")


def manifest_init(ctx: BootstrapContext) -> None:
    ctx.runner.run("npm", "init", "--yes")
    ctx.manifest = manifest.read_manifest(ctx.directory)


def choose_module_system(ctx: BootstrapContext) -> None:
    ctx.module_system = prompts.prompt_module_system(
        ctx.config.module_systems, ask=ctx.ask, err_console=ctx.err_console
    )


def manifest_write(ctx: BootstrapContext) -> None:
    manifest.set_module_system(ctx.manifest, ctx.module_system)
    manifest.write_manifest(ctx.directory, ctx.manifest)


def choose_dependencies(ctx: BootstrapContext) -> None:
    ctx.packages = prompts.select_packages(ctx.runner, ask=ctx.ask, err_console=ctx.err_console)


def install_dependencies(ctx: BootstrapContext) -> None:
    if not ctx.packages:
        log.debug("no packages selected; skipping npm install")
        return
    ctx.runner.run("npm", "install", *ctx.packages)


def gitignore(ctx: BootstrapContext) -> None:
    scaffold.generate_gitignore(ctx.runner, ctx.config.gitignore_template)


def tool_configs(ctx: BootstrapContext) -> None:
    scaffold.generate_tool_configs(ctx.runner, ctx.config.mrm_tasks)


def readme(ctx: BootstrapContext) -> None:
    # npm install and mrm may have rewritten package.json since manifest-write
    ctx.project_name = manifest.read_manifest(ctx.directory)["name"]
    scaffold.write_readme(ctx.directory, ctx.project_name, ctx.config.readme_template)


def commit(ctx: BootstrapContext) -> None:
    ctx.runner.run("git", "add", ".")
    ctx.runner.run("git", "commit", "-m", ctx.config.commit_message)


def notify(ctx: BootstrapContext) -> None:
    console.success(
        f"\n✔️ The project {ctx.project_name} has been successfully bootstrapped!\n",
        ctx.out_console,
    )
    console.success("Add a git remote and push your changes.", ctx.out_console)


DEFAULT_STEPS: Sequence[Step] = (
    Step("check-git-settings", check_git_settings),
    Step("git-init", git_init),
    Step("manifest-init", manifest_init),
    Step("module-system", choose_module_system),
    Step("manifest-write", manifest_write),
    Step("dependencies", choose_dependencies),
    Step("install", install_dependencies),
    Step("gitignore", gitignore),
    Step("tool-configs", tool_configs),
    Step("readme", readme),
    Step("commit", commit),
    Step("notify", notify),
)


def run_pipeline(ctx: BootstrapContext, steps: Sequence[Step] = DEFAULT_STEPS) -> BootstrapContext:
    for step in steps:
        log.debug("[pipeline] step: %s", step.name)
        step.action(ctx)
        ctx.completed.append(step.name)
    return ctx


def bootstrap(
    directory: Optional[str],
    config: BootstrapConfig,
    *,
    which: Optional[Callable[[str], Optional[str]]] = None,
    runner_factory: Callable[[Path], CommandRunner] = CommandRunner,
    ask: prompts.Ask = console.ask,
    out_console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> BootstrapContext:
    """Run the preflight checks, then the full pipeline in `directory`."""
    preflight.check_required_programs(config.required_programs, which=which)
    target = preflight.resolve_target_directory(directory)

    ctx = BootstrapContext(
        directory=target,
        config=config,
        runner=runner_factory(target),
        ask=ask,
        out_console=out_console,
        err_console=err_console,
    )
    return run_pipeline(ctx)
