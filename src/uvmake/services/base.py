"""BaseService — shared precondition checks and tool invocation.

Every service receives a :class:`Project` at construction time, plus an
optional ``progress`` callback for status lines that must appear before
a tool's own output (the result is only rendered once the command ends).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from uvmake.infrastructure.runner import COMMAND_NOT_FOUND, ToolNotFoundError
from uvmake.services.result import ErrorCode, ServiceResult, failure

if TYPE_CHECKING:
    from uvmake.infrastructure.project import Project
    from uvmake.infrastructure.runner import ToolRunner

logger = logging.getLogger(__name__)

Progress = Callable[[str], None]


def _discard(_message: str) -> None:
    return None


class BaseService:
    """Base for service-layer classes.

    Subclasses implement one method per shortcut command.  Preconditions
    are checked with :meth:`_require_venv` / :meth:`_require_manifest`,
    which return a failed result (or None when satisfied), so each
    command reads as a fail-fast sequence::

        def install(self) -> ServiceResult:
            missing = self._require_venv("install") or self._require_manifest("install")
            if missing is not None:
                return missing
            ...
    """

    def __init__(self, project: Project, *, progress: Progress | None = None) -> None:
        self._project = project
        self._progress = progress or _discard

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    def _require_venv(
        self,
        op: str,
        hint: str = "Run 'uvmake init' first.",
    ) -> ServiceResult | None:
        if self._project.has_venv():
            return None
        return failure(
            op,
            ErrorCode.VENV_MISSING,
            "Virtual environment not found!",
            hint,
            venv=self._project.relative(self._project.venv_path),
        )

    def _require_manifest(self, op: str, *hints: str) -> ServiceResult | None:
        if self._project.has_manifest():
            return None
        name = self._project.settings.environment.manifest
        return failure(op, ErrorCode.MANIFEST_MISSING, f"{name} not found!", *hints)

    # ------------------------------------------------------------------
    # Tool execution
    # ------------------------------------------------------------------

    def _run_tool(
        self,
        op: str,
        runner: ToolRunner,
        *args: str,
        extra_env: Mapping[str, str] | None = None,
    ) -> ServiceResult | None:
        """Run an external tool.  Returns a failed result, or None on success.

        The tool's exit status is carried unmodified in
        ``error.detail["returncode"]``.
        """
        try:
            returncode = runner.run(*args, extra_env=extra_env)
        except ToolNotFoundError as exc:
            return failure(
                op,
                ErrorCode.TOOL_MISSING,
                f"'{exc.tool}' not found on PATH",
                "Install uv: https://docs.astral.sh/uv/getting-started/installation/",
                command=list(args),
                returncode=COMMAND_NOT_FOUND,
            )
        if returncode != 0:
            logger.debug("%s failed with exit status %d", op, returncode)
            return failure(
                op,
                ErrorCode.TOOL_FAILED,
                f"{args[0]} exited with status {returncode}",
                command=list(args),
                returncode=returncode,
            )
        return None
