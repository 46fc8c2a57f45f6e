"""Project — the filesystem state every shortcut command inspects.

The Project is the single dependency injected into every service.  It
resolves the configured paths (virtual environment, manifest, pin file)
against the project root and hands out :class:`ToolRunner` instances.
It holds no state of its own: every existence check reads the disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from uvmake.domain.versions import PythonVersion, resolve_python_version
from uvmake.infrastructure.runner import ToolRunner

if TYPE_CHECKING:
    from uvmake.config.settings import UvmakeSettings
    from uvmake.plugins.manager import PluginManager


class Project:
    """Paths and existence checks for one uv-managed project."""

    def __init__(self, settings: UvmakeSettings) -> None:
        self.settings = settings
        self.root = Path(settings.project_root)
        self.plugin_manager: PluginManager | None = None

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def venv_path(self) -> Path:
        return self.root / self.settings.environment.venv_dir

    @property
    def manifest_path(self) -> Path:
        return self.root / self.settings.environment.manifest

    @property
    def pin_path(self) -> Path:
        return self.root / self.settings.environment.pin_file

    @property
    def uv(self) -> str:
        return self.settings.environment.uv

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def has_venv(self) -> bool:
        return self.venv_path.is_dir()

    def has_manifest(self) -> bool:
        return self.manifest_path.is_file()

    def python_version(self) -> PythonVersion:
        """Resolve the interpreter version (pin file, else configured default)."""
        return resolve_python_version(
            self.pin_path, self.settings.environment.default_python
        )

    def relative(self, path: Path) -> str:
        """Render *path* relative to the project root when possible."""
        try:
            return str(path.relative_to(self.root))
        except ValueError:
            return str(path)

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    def runner(self, *, activated: bool = False) -> ToolRunner:
        """A runner rooted at the project, optionally inside the venv."""
        return ToolRunner(self.root, venv=self.venv_path if activated else None)

    # ------------------------------------------------------------------
    # Plugins
    # ------------------------------------------------------------------

    def init_plugins(self) -> None:
        """Discover and load plugins (entry points + ``.uvmake/plugins``)."""
        if not self.settings.plugins.enabled:
            return
        from uvmake.plugins.manager import PluginManager

        pm = PluginManager()
        pm.discover_and_load(local_dir=self.root / ".uvmake" / "plugins")
        self.plugin_manager = pm
