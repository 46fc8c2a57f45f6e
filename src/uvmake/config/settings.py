"""Settings for one uvmake invocation.

Sources, highest priority first:

1. CLI flags (init kwargs from Click)
2. ``UVMAKE_*`` environment variables, ``__`` for nested sections,
   e.g. ``UVMAKE_ENVIRONMENT__VENV_DIR=.env``
3. The config table: ``uvmake.toml`` or ``[tool.uvmake]`` in pyproject.toml
4. Section model defaults

The config table is parsed once in :meth:`UvmakeSettings.from_cli` and
handed to :class:`ConfigTableSource` through a context variable, because
pydantic-settings builds its sources from the class, not the instance.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from uvmake.config.discovery import find_config, find_project, read_config_table
from uvmake.config.models import (
    AppConfig,
    CleanConfig,
    EnvironmentConfig,
    LintConfig,
    PluginsConfig,
    TreeConfig,
)

_config_table: ContextVar[dict[str, Any] | None] = ContextVar("uvmake_config_table", default=None)


class ConfigTableSource(PydanticBaseSettingsSource):
    """Feed the parsed config table to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], table: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._table = table

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        if field_name not in self._table:
            return None, field_name, False
        return self._table[field_name], field_name, True

    def __call__(self) -> dict[str, Any]:
        return dict(self._table)


def _locate_config(config_path: str | None, start: Path | None) -> Path | None:
    if not config_path:
        return find_config(start)
    path = Path(config_path)
    return path if path.is_file() else None


def _parse_config(path: Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    try:
        return read_config_table(path)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        import click

        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class UvmakeSettings(BaseSettings):
    """Frozen, merged settings stored on the CLI's ``AppContext``.

    Attributes:
        project_root: ``--project-dir`` if given, else the nearest directory
            holding ``uvmake.toml`` or ``pyproject.toml``, else the working
            directory.
        config_path: The config file that was read, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="UVMAKE_",
        env_nested_delimiter="__",
    )

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    environment: EnvironmentConfig = Field(default_factory=EnvironmentConfig)
    app: AppConfig = Field(default_factory=AppConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
    tree: TreeConfig = Field(default_factory=TreeConfig)
    clean: CleanConfig = Field(default_factory=CleanConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        table = _config_table.get() or {}
        return init_settings, env_settings, ConfigTableSource(settings_cls, table)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> UvmakeSettings:
        """Build settings for a CLI run.

        *project_root* defaults to the nearest directory holding
        ``uvmake.toml`` or ``pyproject.toml``, else the working directory.
        The config file never moves the root: an explicit *config_path*
        (or UVMAKE_CONFIG) elsewhere only supplies settings.  An explicit
        *config_path* that does not exist is ignored.

        Raises:
            click.ClickException: If the config file is not valid TOML.
        """
        found = _locate_config(config_path, project_root)
        if project_root is None:
            project_root = find_project()[0] or Path.cwd()

        token = _config_table.set(_parse_config(found))
        try:
            return cls(project_root=project_root, config_path=found, **cli_flags)
        finally:
            _config_table.reset(token)
