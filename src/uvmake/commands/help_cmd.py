"""Command: the static command menu (also shown when no command is given)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from uvmake.commands._base import UvmakeCommand

if TYPE_CHECKING:
    from uvmake.commands._context import AppContext


@click.command(
    "help",
    cls=UvmakeCommand,
    examples="""\
  uvmake
  uvmake help
  uvmake --json help""",
)
@click.pass_obj
def help_cmd(app: AppContext) -> None:
    """Show available commands."""
    from uvmake.services.help import HelpService

    app.emit(HelpService.menu())
