"""EnvironmentService — create the virtual environment and sync dependencies.

Commands: ``init``, ``install``, ``python-version``.
"""

from __future__ import annotations

from uvmake.infrastructure.runner import ToolNotFoundError
from uvmake.services.base import BaseService
from uvmake.services.result import ErrorCode, ServiceResult, failure


class EnvironmentService(BaseService):
    """Virtual environment lifecycle on top of ``uv``."""

    def init(self) -> ServiceResult:
        """Create the venv pinned to the resolved Python version.

        Fails with ``VENV_EXISTS`` (leaving the directory untouched) if a
        virtual environment is already present.
        """
        project = self._project
        version = project.python_version()
        pin_name = project.settings.environment.pin_file
        venv = project.relative(project.venv_path)

        self._progress("🚀 Creating virtual environment...")
        if version.pinned:
            self._progress(f"📌 Using Python {version.value} from {pin_name} file")
        else:
            self._progress(f"📌 Using Python {version.value} (default)")
            self._progress(f"💡 Tip: Create {pin_name} file to pin a specific version")
        self._progress("")

        if project.has_venv():
            return failure(
                "init",
                ErrorCode.VENV_EXISTS,
                f"Virtual environment already exists at {venv}",
                "Use 'uvmake obliviate' first to remove it, then run 'uvmake init' again",
                venv=venv,
            )

        self._progress(f"📦 Creating venv with Python {version.value}...")
        failed = self._run_tool(
            "init",
            project.runner(),
            project.uv,
            "venv",
            venv,
            "--python",
            version.value,
        )
        if failed is not None:
            return failed

        return ServiceResult(
            ok=True,
            op="init",
            data={
                "venv": venv,
                "python": version.value,
                "source": version.source,
                "next_steps": [
                    "Run 'uvmake install' to install dependencies",
                    "Run 'uvmake dev' to start development",
                ],
            },
        )

    def install(self) -> ServiceResult:
        """Sync dependencies from the manifest into the activated venv.

        A failing sync is not rolled back: the environment stays as the
        tool left it.
        """
        project = self._project
        manifest = project.settings.environment.manifest
        missing = self._require_venv(
            "install", "Run 'uvmake init' first to create the virtual environment."
        ) or self._require_manifest(
            "install", f"Run 'uv init' to create a project or add {manifest} manually."
        )
        if missing is not None:
            return missing

        self._progress(f"📥 Installing dependencies from {manifest}...")
        failed = self._run_tool("install", project.runner(activated=True), project.uv, "sync")
        if failed is not None:
            return failed

        return ServiceResult(ok=True, op="install", data={"manifest": manifest})

    def python_version(self) -> ServiceResult:
        """Report the resolved version, its source, and uv's known interpreters.

        Never fails: if ``uv python list`` is unavailable, ``available`` is None.
        """
        project = self._project
        version = project.python_version()

        available: list[str] | None = None
        try:
            completed = project.runner().capture(project.uv, "python", "list")
        except ToolNotFoundError:
            completed = None
        if completed is not None and completed.returncode == 0:
            available = [line for line in completed.stdout.splitlines() if line.strip()]

        return ServiceResult(
            ok=True,
            op="python-version",
            data={
                "python": version.value,
                "source": version.source,
                "pin_file": project.settings.environment.pin_file,
                "available": available,
            },
        )
