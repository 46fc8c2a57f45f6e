"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Project initialization, progress
output, and centralized result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from uvmake.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from uvmake.config.settings import UvmakeSettings
    from uvmake.infrastructure.project import Project
    from uvmake.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The project (and its plugins) is initialized on first use so
    ``--help``, ``--version`` and the menu never touch the filesystem.
    """

    def __init__(self, settings: UvmakeSettings) -> None:
        self.settings = settings
        self._project: Project | None = None

        from uvmake.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def project(self) -> Project:
        """The project instance (created lazily on first access)."""
        if self._project is None:
            from uvmake.infrastructure.project import Project

            self._project = Project(self.settings)
            self._project.init_plugins()
        return self._project

    def progress(self, message: str) -> None:
        """Write a status line ahead of tool output.

        Suppressed with ``--quiet``; sent to stderr with ``--json`` so
        stdout stays a single JSON document.
        """
        if self.settings.quiet:
            return
        click.echo(message, err=self.settings.json_output)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with the wrapped tool's status
          (or 1 for a failed precondition).
        """
        result = self._notify_plugins(result)
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            code = result.error.exit_code if result.error else 1
            raise SystemExit(code)

    def _notify_plugins(self, result: ServiceResult) -> ServiceResult:
        """Fire ``post_command`` and fold plugin failures into warnings."""
        if self._project is None or self._project.plugin_manager is None:
            return result
        warnings = self._project.plugin_manager.notify_command(
            result.op, ok=result.ok, project_root=self._project.root
        )
        if not warnings:
            return result
        return result.model_copy(update={"warnings": [*result.warnings, *warnings]})
