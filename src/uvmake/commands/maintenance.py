"""Commands: cache cleanup, full reset, and Python version reporting."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from uvmake.commands._base import UvmakeCommand

if TYPE_CHECKING:
    from uvmake.commands._context import AppContext


@click.command(
    "clean",
    cls=UvmakeCommand,
    examples="""\
  uvmake clean
  uvmake -v clean   # list every removed path""",
)
@click.pass_obj
def clean(app: AppContext) -> None:
    from uvmake.services.cleanup import CleanupService

    app.emit(CleanupService(app.project, progress=app.progress).clean())


@click.command(
    "obliviate",
    cls=UvmakeCommand,
    examples="""\
  uvmake obliviate
  uvmake obliviate && uvmake init && uvmake install   # rebuild from scratch""",
)
@click.pass_obj
def obliviate(app: AppContext) -> None:
    from uvmake.services.cleanup import CleanupService

    app.emit(CleanupService(app.project, progress=app.progress).obliviate())


@click.command(
    "python-version",
    cls=UvmakeCommand,
    examples="""\
  uvmake python-version
  uvmake --json python-version""",
)
@click.pass_obj
def python_version(app: AppContext) -> None:
    from uvmake.services.environment import EnvironmentService

    app.emit(EnvironmentService(app.project, progress=app.progress).python_version())
