"""
bootstrap-tool CLI.

    bootstrap-tool --directory <path> [--config <file>] [--log-level LEVEL]
    python -m bootstrap_tool.cli --directory <path>

Exit codes:
- 0   project bootstrapped
- 1   precondition failure (missing program, directory, bad config)
- N   exit status of a failing git/npm/npx command
- 128+S killed by signal S
- 130 interrupted at a prompt (Ctrl-C or end of input)
"""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from typing import List, Optional

from . import __version__, console
from .config import load_config, resolve_config_path
from .errors import BootstrapError
from .pipeline import bootstrap

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bootstrap-tool",
        description="Bootstrap a Node.js project with git, npm and standard config files.",
    )
    # Validated by the tool so a missing value exits 1 with a readable message.
    parser.add_argument(
        "--directory",
        default=None,
        help="Existing directory to bootstrap the project in.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML settings file (falls back to BOOTSTRAP_TOOL_CONFIG env).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (falls back to BOOTSTRAP_TOOL_LOG_LEVEL env, then INFO).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console.setup_logging(args.log_level)

    try:
        config = load_config(resolve_config_path(args.config))
        bootstrap(args.directory, config)
    except BootstrapError as exc:
        console.error(str(exc))
        return exc.exit_code
    except subprocess.CalledProcessError as exc:
        # The command's own output has already reached the terminal.
        log.debug("command failed with exit status %s: %s", exc.returncode, exc.cmd)
        if exc.returncode < 0:
            # killed by a signal
            return 128 - exc.returncode
        return exc.returncode or 1
    except (KeyboardInterrupt, EOFError):
        print(file=sys.stderr)
        return 130
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
