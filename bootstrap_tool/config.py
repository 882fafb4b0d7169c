"""
Bootstrapper settings.

Defaults live in DEFAULT_CONFIG. A YAML file can override any of them:
1) --config argument
2) BOOTSTRAP_TOOL_CONFIG env var
3) nothing (defaults only)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .errors import ConfigError


DEFAULT_CONFIG: Dict[str, Any] = {
    # Checked with `which` before anything runs; npm itself is not checked.
    "required_programs": ["git", "node", "npx"],
    "git_settings": ["user.name", "user.email"],
    "module_systems": ["module", "commonjs"],
    "gitignore_template": "node",
    "mrm_tasks": ["editorconfig", "prettier", "eslint"],
    "commit_message": "Add project skeleton",
    "readme_template": "# {name}\n\n...\n",
}

_LIST_KEYS = {"required_programs", "git_settings", "module_systems", "mrm_tasks"}


@dataclass(frozen=True)
class BootstrapConfig:
    required_programs: Tuple[str, ...]
    git_settings: Tuple[str, ...]
    module_systems: Tuple[str, ...]
    gitignore_template: str
    mrm_tasks: Tuple[str, ...]
    commit_message: str
    readme_template: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BootstrapConfig":
        values: Dict[str, Any] = {}
        for key, value in data.items():
            values[key] = tuple(value) if key in _LIST_KEYS else value
        return cls(**values)


def resolve_config_path(explicit: Optional[str]) -> Optional[Path]:
    if explicit:
        return Path(explicit).expanduser().resolve()
    env_path = os.getenv("BOOTSTRAP_TOOL_CONFIG")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return None


def _validate(overrides: Dict[str, Any]) -> List[str]:
    errors: List[str] = []
    for key, value in overrides.items():
        if key not in DEFAULT_CONFIG:
            errors.append(f"unknown setting '{key}'")
            continue
        if key in _LIST_KEYS:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                errors.append(f"'{key}' must be a list of strings")
        elif not isinstance(value, str):
            errors.append(f"'{key}' must be a string")

    systems = overrides.get("module_systems")
    if isinstance(systems, list) and not systems:
        errors.append("'module_systems' must offer at least one choice")

    template = overrides.get("readme_template")
    if isinstance(template, str) and "{name}" not in template:
        errors.append("'readme_template' must contain the {name} placeholder")
    return errors


def load_config(path: Optional[Path] = None) -> BootstrapConfig:
    data = dict(DEFAULT_CONFIG)
    if path is None:
        return BootstrapConfig.from_dict(data)

    if not path.is_file():
        raise ConfigError(f"Error: Config file '{path}' does not exist")
    try:
        overrides = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Error: Config file '{path}' is not valid YAML: {exc}") from exc

    if not isinstance(overrides, dict):
        raise ConfigError(f"Error: Config file '{path}' must contain a mapping")

    errors = _validate(overrides)
    if errors:
        raise ConfigError(f"Error: Invalid config file '{path}': " + "; ".join(errors))

    data.update(overrides)
    return BootstrapConfig.from_dict(data)
