"""Commands: run, inspect, lint, format, and build the application."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from uvmake.commands._base import UvmakeCommand

if TYPE_CHECKING:
    from uvmake.commands._context import AppContext


@click.command(
    "dev",
    cls=UvmakeCommand,
    examples="""\
  uvmake dev
  UVMAKE_APP__MODULE=myapp.server uvmake dev""",
)
@click.pass_obj
def dev(app: AppContext) -> None:
    from uvmake.services.develop import DevelopService

    app.emit(DevelopService(app.project, progress=app.progress).dev())


@click.command(
    "tree",
    cls=UvmakeCommand,
    examples="""\
  uvmake tree
  uvmake tree --builtin""",
)
@click.option(
    "--builtin",
    is_flag=True,
    help="Render the tree without the external 'tree' utility.",
)
@click.pass_obj
def tree(app: AppContext, builtin: bool) -> None:
    from uvmake.services.develop import DevelopService

    app.emit(DevelopService(app.project, progress=app.progress).tree(builtin=builtin))


@click.command(
    "lint",
    cls=UvmakeCommand,
    examples="""\
  uvmake lint
  uvmake -q lint && git commit""",
)
@click.pass_obj
def lint(app: AppContext) -> None:
    from uvmake.services.develop import DevelopService

    app.emit(DevelopService(app.project, progress=app.progress).lint())


@click.command(
    "format",
    cls=UvmakeCommand,
    examples="""\
  uvmake format
  uvmake format && uvmake lint""",
)
@click.pass_obj
def format_cmd(app: AppContext) -> None:
    from uvmake.services.develop import DevelopService

    app.emit(DevelopService(app.project, progress=app.progress).format_code())


@click.command(
    "build",
    cls=UvmakeCommand,
    examples="""\
  uvmake build
  uvmake clean && uvmake build   # fresh dist/""",
)
@click.pass_obj
def build(app: AppContext) -> None:
    from uvmake.services.develop import DevelopService

    app.emit(DevelopService(app.project, progress=app.progress).build())
