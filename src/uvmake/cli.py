"""Root CLI group for uvmake with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from uvmake import __version__
from uvmake.commands import register_commands
from uvmake.commands._context import AppContext
from uvmake.config.settings import UvmakeSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="uvmake")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-C",
    "--project-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run as if started in this directory.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    project_dir: Path | None,
) -> None:
    """uvmake — shortcut commands for uv-managed Python projects."""
    # Unset flags stay out of the init kwargs so UVMAKE_* env vars still apply.
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    settings = UvmakeSettings.from_cli(
        config_path=config_path,
        project_root=project_dir.resolve() if project_dir else None,
        **{name: True for name, given in flags.items() if given},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from uvmake.services.help import HelpService

        ctx.obj.emit(HelpService.menu())


register_commands(cli)
