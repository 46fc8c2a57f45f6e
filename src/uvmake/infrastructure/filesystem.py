"""Filesystem helpers for cache cleanup and project tree listing.

All deletions are best-effort: a path that cannot be removed is logged
and skipped, never raised.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def matches_any(name: str, patterns: Iterable[str]) -> bool:
    """Whether *name* matches any shell-style glob in *patterns*."""
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


# ---------------------------------------------------------------------------
# Cleanup
# ---------------------------------------------------------------------------


def find_cache_paths(
    root: Path,
    *,
    dir_patterns: Iterable[str],
    file_patterns: Iterable[str],
    skip_dirs: Iterable[str] = (),
) -> list[Path]:
    """Find directories and files under *root* whose names match a pattern.

    Matched directories are not descended into (their contents go with
    them).  Directories named in *skip_dirs* are pruned from the walk
    entirely.  Symlinked directories are never followed.
    """
    dir_patterns = tuple(dir_patterns)
    file_patterns = tuple(file_patterns)
    skip = frozenset(skip_dirs)
    found: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, followlinks=False):
        current = Path(dirpath)
        keep: list[str] = []
        for name in sorted(dirnames):
            if name in skip:
                continue
            if matches_any(name, dir_patterns):
                found.append(current / name)
                continue
            keep.append(name)
        dirnames[:] = keep

        for name in sorted(filenames):
            if matches_any(name, file_patterns):
                found.append(current / name)

    return found


def remove_path(path: Path) -> bool:
    """Delete a file, symlink, or directory tree.

    Returns True if something was removed, False if the path was absent
    or could not be deleted.
    """
    try:
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)
        else:
            return False
    except OSError as exc:
        logger.debug("Could not remove %s: %s", path, exc)
        return False
    return True


# ---------------------------------------------------------------------------
# Tree listing
# ---------------------------------------------------------------------------


def list_children(directory: Path, ignore: Iterable[str]) -> list[Path]:
    """Return the visible entries of *directory*, directories first, by name.

    Entries whose names match *ignore* are hidden, as with ``tree -I``.
    Unreadable directories yield no entries.
    """
    ignore = tuple(ignore)
    try:
        entries = [p for p in directory.iterdir() if not matches_any(p.name, ignore)]
    except OSError as exc:
        logger.debug("Could not list %s: %s", directory, exc)
        return []
    return sorted(entries, key=lambda p: (not p.is_dir(), p.name.lower()))
