"""CleanupService — remove caches, build artifacts, and the virtual environment.

Commands: ``clean``, ``obliviate``.  Both are best-effort: paths that
cannot be deleted are logged and skipped, and the result is always ok.
"""

from __future__ import annotations

import logging
from pathlib import Path

from uvmake.infrastructure.filesystem import find_cache_paths, remove_path
from uvmake.services.base import BaseService
from uvmake.services.result import ServiceResult

logger = logging.getLogger(__name__)

# Pruned from the ``clean`` walk in addition to the venv directory.
_ALWAYS_SKIP = (".git",)


class CleanupService(BaseService):
    """Cache and environment removal."""

    def clean(self) -> ServiceResult:
        """Delete cache and artifact paths, leaving everything else untouched."""
        self._progress("🧹 Cleaning cache files...")
        removed = self._remove_caches()
        return ServiceResult(ok=True, op="clean", data={"removed": removed})

    def obliviate(self) -> ServiceResult:
        """``clean``, then delete the virtual environment.  Idempotent."""
        project = self._project
        self._progress("🧹 Cleaning cache files...")
        removed = self._remove_caches()

        self._progress("🗑️  Removing virtual environment...")
        venv_removed = remove_path(project.venv_path)
        if not venv_removed and project.venv_path.exists():
            logger.warning("Could not fully remove %s", project.venv_path)

        return ServiceResult(
            ok=True,
            op="obliviate",
            data={
                "removed": removed,
                "venv": project.relative(project.venv_path),
                "venv_removed": venv_removed,
                "next_steps": [
                    "Run 'uvmake init' to create venv",
                    "Run 'uvmake install' to install dependencies",
                ],
            },
        )

    def _remove_caches(self) -> list[str]:
        """Delete every configured cache path.  Returns what was removed."""
        project = self._project
        config = project.settings.clean
        skip = (Path(project.settings.environment.venv_dir).name, *_ALWAYS_SKIP)

        targets = find_cache_paths(
            project.root,
            dir_patterns=config.recursive_dirs,
            file_patterns=config.recursive_files,
            skip_dirs=skip,
        )
        targets.extend(project.root / name for name in config.root_paths)

        removed: list[str] = []
        seen: set[Path] = set()
        for path in targets:
            if path in seen:
                continue
            seen.add(path)
            if remove_path(path):
                removed.append(project.relative(path))
        logger.debug("Removed %d cache paths", len(removed))
        return removed
