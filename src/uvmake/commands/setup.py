"""Commands: virtual environment creation and dependency sync."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from uvmake.commands._base import UvmakeCommand

if TYPE_CHECKING:
    from uvmake.commands._context import AppContext


@click.command(
    "init",
    cls=UvmakeCommand,
    examples="""\
  uvmake init
  echo '3.13' > .python-version && uvmake init
  uvmake -C ../other-project init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    from uvmake.services.environment import EnvironmentService

    app.emit(EnvironmentService(app.project, progress=app.progress).init())


@click.command(
    "install",
    cls=UvmakeCommand,
    examples="""\
  uvmake install
  uvmake --json install""",
)
@click.pass_obj
def install(app: AppContext) -> None:
    from uvmake.services.environment import EnvironmentService

    app.emit(EnvironmentService(app.project, progress=app.progress).install())
