"""package.json read/write helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

MANIFEST_FILENAME = "package.json"


def manifest_path(directory: Path) -> Path:
    return Path(directory) / MANIFEST_FILENAME


def read_manifest(directory: Path) -> Dict[str, Any]:
    return json.loads(manifest_path(directory).read_text(encoding="utf-8"))


def write_manifest(directory: Path, contents: Dict[str, Any]) -> Path:
    """Overwrite package.json with 2-space indented JSON."""
    path = manifest_path(directory)
    path.write_text(json.dumps(contents, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path


def set_module_system(manifest: Dict[str, Any], module_system: str) -> Dict[str, Any]:
    manifest["module"] = module_system
    return manifest
