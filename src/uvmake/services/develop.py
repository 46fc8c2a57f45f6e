"""DevelopService — day-to-day commands run inside the project environment.

Commands: ``dev``, ``tree``, ``lint``, ``format``, ``build``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from uvmake.infrastructure.filesystem import list_children
from uvmake.infrastructure.runner import ToolNotFoundError
from uvmake.services.base import BaseService
from uvmake.services.result import ErrorCode, ServiceResult, failure

TREE_TOOL = "tree"


class DevelopService(BaseService):
    """Run, inspect, lint, format, and package the application."""

    def dev(self) -> ServiceResult:
        """Run the application entry module with the development flag set."""
        project = self._project
        app = project.settings.app
        missing = self._require_venv("dev")
        if missing is not None:
            return missing

        self._progress("🚀 Starting development server...")
        dev_env = {app.dev_env_var: app.dev_env_value}
        failed = self._run_tool(
            "dev",
            project.runner(activated=True),
            project.uv,
            "run",
            "-m",
            app.module,
            extra_env=dev_env,
        )
        if failed is not None:
            return failed
        return ServiceResult(ok=True, op="dev", data={"module": app.module, "env": dev_env})

    def lint(self) -> ServiceResult:
        """Check the application source with the configured linter."""
        return self._run_linter("lint", "check", "🔍 Checking code quality...")

    def format_code(self) -> ServiceResult:
        """Auto-format the application source with the configured linter."""
        return self._run_linter("format", "format", "✨ Formatting code...")

    def build(self) -> ServiceResult:
        """Build sdist and wheel into ``dist/`` via ``python -m build``."""
        project = self._project
        missing = self._require_venv("build") or self._require_manifest("build")
        if missing is not None:
            return missing

        self._progress("📦 Building distribution packages...")
        failed = self._run_tool(
            "build",
            project.runner(activated=True),
            project.uv,
            "run",
            "python",
            "-m",
            "build",
        )
        if failed is not None:
            return failed
        return ServiceResult(ok=True, op="build", data={"output": "dist/"})

    def tree(self, *, builtin: bool = False) -> ServiceResult:
        """Show the project layout, hiding cache, venv, and build paths.

        Uses the ``tree`` utility when available.  With *builtin*, the
        listing is produced here and returned in ``data["tree"]``.  A
        missing utility is a warning, never an error.
        """
        project = self._project
        ignore = list(project.settings.tree.ignore)
        self._progress("🌳 Project Structure:")

        if builtin:
            return ServiceResult(
                ok=True,
                op="tree",
                data={"builtin": True, "tree": _build_tree(project.root, ignore)},
            )

        runner = project.runner()
        warnings: list[str] = []
        if runner.which(TREE_TOOL) is None:
            warnings.append(
                f"'{TREE_TOOL}' command not found. Please install it "
                "(brew install tree / sudo apt install tree) "
                "or run 'uvmake tree --builtin'"
            )
        else:
            try:
                returncode = runner.run(TREE_TOOL, "-I", "|".join(ignore))
            except ToolNotFoundError:
                returncode = None
            if returncode != 0:
                warnings.append(f"'{TREE_TOOL}' did not complete (exit status {returncode})")

        return ServiceResult(ok=True, op="tree", data={"builtin": False}, warnings=warnings)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run_linter(self, op: str, subcommand: str, banner: str) -> ServiceResult:
        project = self._project
        tool = project.settings.lint.tool
        source_dir = project.settings.app.source_dir
        missing = self._require_venv(op)
        if missing is not None:
            return missing

        runner = project.runner(activated=True)
        if runner.which(tool) is None:
            return failure(
                op,
                ErrorCode.TOOL_MISSING,
                f"{tool} not installed!",
                "Add it to your project:",
                f"  uv add {tool} --dev",
                tool=tool,
            )

        self._progress(banner)
        failed = self._run_tool(op, runner, project.uv, "run", tool, subcommand, source_dir)
        if failed is not None:
            return failed
        return ServiceResult(ok=True, op=op, data={"tool": tool, "path": source_dir})


def _build_tree(directory: Path, ignore: list[str]) -> dict[str, Any]:
    """Nested ``{"name", "dir", "children"}`` listing of *directory*.

    Symlinked directories are listed but not descended into.
    """
    node: dict[str, Any] = {"name": directory.name or str(directory), "dir": True, "children": []}
    for child in list_children(directory, ignore):
        if child.is_dir() and not child.is_symlink():
            node["children"].append(_build_tree(child, ignore))
        else:
            node["children"].append({"name": child.name, "dir": child.is_dir(), "children": []})
    return node
