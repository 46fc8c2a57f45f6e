"""Subprocess wrapper for the external tools uvmake drives (uv, ruff, tree).

Tools inherit the terminal by default so their output streams straight to
the user.  When a virtual environment is given, every invocation runs with
an environment equivalent to ``. .venv/bin/activate``.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

# Exit status a POSIX shell reports for "command not found".
COMMAND_NOT_FOUND = 127


class ToolNotFoundError(OSError):
    """The executable for an external tool could not be located."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"{tool}: command not found")
        self.tool = tool


def venv_bin_dir(venv: Path) -> Path:
    """Return the directory holding a virtual environment's executables."""
    return venv / ("Scripts" if os.name == "nt" else "bin")


def activated_environ(venv: Path, base: Mapping[str, str] | None = None) -> dict[str, str]:
    """Build an environment equivalent to sourcing the venv's activate script."""
    env = dict(os.environ if base is None else base)
    env["VIRTUAL_ENV"] = str(venv)
    env["PATH"] = os.pathsep.join(
        part for part in (str(venv_bin_dir(venv)), env.get("PATH", "")) if part
    )
    env.pop("PYTHONHOME", None)
    return env


class ToolRunner:
    """Runs external commands from the project root.

    Args:
        cwd: Working directory for every invocation.
        venv: Virtual environment to activate, or None for the ambient one.
    """

    def __init__(self, cwd: Path, *, venv: Path | None = None) -> None:
        self.cwd = cwd
        self.venv = venv

    def environ(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        """The environment tools run with, plus *extra* overrides."""
        env = activated_environ(self.venv) if self.venv is not None else dict(os.environ)
        if extra:
            env.update(extra)
        return env

    def which(self, tool: str) -> str | None:
        """Resolve *tool* on the (possibly activated) PATH."""
        return shutil.which(tool, path=self.environ().get("PATH"))

    def run(
        self,
        *args: str,
        extra_env: Mapping[str, str] | None = None,
    ) -> int:
        """Run a command with inherited stdout and return its exit status.

        Raises:
            ToolNotFoundError: If the executable does not exist.
        """
        logger.debug("Running %s in %s", " ".join(args), self.cwd)
        try:
            completed = subprocess.run(
                list(args),
                cwd=self.cwd,
                env=self.environ(extra_env),
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolNotFoundError(args[0]) from exc
        logger.debug("%s exited with %d", args[0], completed.returncode)
        return completed.returncode

    def capture(self, *args: str) -> subprocess.CompletedProcess[str]:
        """Run a command and capture its stdout/stderr as text.

        Raises:
            ToolNotFoundError: If the executable does not exist.
        """
        logger.debug("Capturing %s in %s", " ".join(args), self.cwd)
        try:
            return subprocess.run(
                list(args),
                cwd=self.cwd,
                env=self.environ(),
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolNotFoundError(args[0]) from exc
