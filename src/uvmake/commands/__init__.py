"""Subcommand modules for uvmake.

Provides register_commands() which uses deferred imports to keep
``uvmake --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the menu and every catalog command on the root CLI group."""
    from uvmake.commands.develop import build, dev, format_cmd, lint, tree
    from uvmake.commands.help_cmd import help_cmd
    from uvmake.commands.maintenance import clean, obliviate, python_version
    from uvmake.commands.setup import init_cmd, install

    cli.add_command(help_cmd)

    # --- Setup ---
    cli.add_command(init_cmd)
    cli.add_command(install)

    # --- Development ---
    cli.add_command(dev)
    cli.add_command(tree)
    cli.add_command(lint)
    cli.add_command(format_cmd)
    cli.add_command(build)

    # --- Maintenance ---
    cli.add_command(clean)
    cli.add_command(obliviate)
    cli.add_command(python_version)
