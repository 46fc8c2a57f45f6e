"""Python version resolution from a pin file with a fixed fallback.

Resolution is re-done on every call; the pin file is small and the CLI
runs one command per process.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

logger = logging.getLogger(__name__)

VersionSource = Literal["pin", "default"]


class PythonVersion(BaseModel):
    """The interpreter version a project should use, and where it came from."""

    model_config = {"frozen": True}

    value: str
    source: VersionSource
    pin_file: Path

    @property
    def pinned(self) -> bool:
        return self.source == "pin"


def read_pin(path: Path) -> str | None:
    """Return the version recorded in *path*, or None if there is none.

    The first non-blank line that is not a ``#`` comment wins.  Surrounding
    whitespace is stripped; the rest of the line is kept verbatim.  A file
    that cannot be read or decoded counts as absent.
    """
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("Ignoring unreadable pin file %s", path, exc_info=True)
        return None
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            return stripped
    return None


def resolve_python_version(pin_file: Path, fallback: str) -> PythonVersion:
    """Resolve the project's Python version: pin file first, then *fallback*."""
    pinned = read_pin(pin_file)
    if pinned is not None:
        return PythonVersion(value=pinned, source="pin", pin_file=pin_file)
    return PythonVersion(value=fallback, source="default", pin_file=pin_file)
