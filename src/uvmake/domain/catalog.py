"""Command catalog — the single source of truth for shortcut names and help text.

The static help menu and the CLI registration both read from here, so the
menu cannot list a command that does not exist (or miss one that does).
"""

from __future__ import annotations

from pydantic import BaseModel

SECTIONS: tuple[str, ...] = ("Setup", "Development", "Maintenance")


class CommandSpec(BaseModel):
    """A named shortcut command."""

    model_config = {"frozen": True}

    name: str
    description: str
    section: str


COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(name="init", description="Create virtual environment", section="Setup"),
    CommandSpec(
        name="install",
        description="Install/sync dependencies from pyproject.toml",
        section="Setup",
    ),
    CommandSpec(name="dev", description="Run app in development mode", section="Development"),
    CommandSpec(
        name="tree",
        description="Show project structure (excludes cache/venv)",
        section="Development",
    ),
    CommandSpec(name="lint", description="Check code quality with ruff", section="Development"),
    CommandSpec(name="format", description="Auto-format code with ruff", section="Development"),
    CommandSpec(name="build", description="Build distribution package", section="Development"),
    CommandSpec(name="clean", description="Remove cache files", section="Maintenance"),
    CommandSpec(
        name="obliviate",
        description="Remove cache + venv (full reset)",
        section="Maintenance",
    ),
    CommandSpec(
        name="python-version",
        description="Show current Python version",
        section="Maintenance",
    ),
)


def get_command(name: str) -> CommandSpec:
    """Look up a command by name.

    Raises:
        KeyError: If no command with *name* exists.
    """
    for spec in COMMANDS:
        if spec.name == name:
            return spec
    raise KeyError(name)


def commands_by_section() -> dict[str, list[CommandSpec]]:
    """Group the catalog by menu section, preserving catalog order."""
    grouped: dict[str, list[CommandSpec]] = {section: [] for section in SECTIONS}
    for spec in COMMANDS:
        grouped.setdefault(spec.section, []).append(spec)
    return grouped
