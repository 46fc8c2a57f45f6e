"""Project and config file discovery.

Walk-up finder, similar to how git finds .git/.  The walk stops at the
first directory holding ``uvmake.toml`` or ``pyproject.toml``: that is the
project, and settings from a parent directory never apply to it.  In the
project directory a dedicated ``uvmake.toml`` wins; otherwise a
``[tool.uvmake]`` table in ``pyproject.toml`` is used.  The UVMAKE_CONFIG
env var and the --config CLI flag name a config file directly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "uvmake.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "UVMAKE_CONFIG"


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return False
    return isinstance(data.get("tool", {}).get("uvmake"), dict)


def find_project(start: Path | None = None) -> tuple[Path | None, Path | None]:
    """Walk up from *start* (default: cwd) to the nearest project directory.

    Returns ``(project_dir, config_file)``.  *config_file* is None when the
    project has no uvmake settings; both are None outside any project.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        dedicated = current / CONFIG_FILENAME
        if dedicated.is_file():
            return current, dedicated
        pyproject = current / PYPROJECT_FILENAME
        if pyproject.is_file():
            return current, pyproject if _has_tool_table(pyproject) else None
        if current.parent == current:
            return None, None
        current = current.parent


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start*, or None.

    Checks the UVMAKE_CONFIG env var first, then the nearest project.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None
    return find_project(start)[1]


def read_config_table(path: Path) -> dict[str, Any]:
    """Parse *path* and return the uvmake settings table.

    For ``pyproject.toml`` that is ``[tool.uvmake]``; any other file is
    read whole.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("uvmake", {})
        return table if isinstance(table, dict) else {}
    return data
