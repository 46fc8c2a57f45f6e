"""Click command class bound to the shortcut catalog.

Help text for a shortcut is looked up in :mod:`uvmake.domain.catalog`, so
``uvmake <name> --help`` and the menu always print the same line.  Usage
examples are kept out of ``--help`` and printed on demand with ``--examples``.
"""

from __future__ import annotations

from typing import Any

import click

from uvmake.domain.catalog import get_command


def _catalog_help(name: str | None) -> str | None:
    if name is None:
        return None
    try:
        return get_command(name).description
    except KeyError:
        return None


def _print_examples(examples: str) -> click.Option:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=callback,
        help="Print usage examples and exit.",
    )


class UvmakeCommand(click.Command):
    """A shortcut command.

    An explicit ``help=`` (or a docstring) wins over the catalog entry.
    """

    def __init__(
        self, name: str | None, *args: Any, examples: str | None = None, **kwargs: Any
    ) -> None:
        if kwargs.get("help") is None:
            kwargs["help"] = _catalog_help(name)
        super().__init__(name, *args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_print_examples(examples))
