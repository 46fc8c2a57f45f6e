"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, uvmake.toml only contains overrides.
A project with no uvmake.toml behaves exactly like the stock Makefile.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- uvmake.toml sections ---


class EnvironmentConfig(BaseModel):
    """[environment] section."""

    model_config = {"frozen": True}

    venv_dir: str = ".venv"
    uv: str = "uv"
    default_python: str = "3.12"
    pin_file: str = ".python-version"
    manifest: str = "pyproject.toml"


class AppConfig(BaseModel):
    """[app] section."""

    model_config = {"frozen": True}

    module: str = "app.main"
    source_dir: str = "app/"
    dev_env_var: str = "ENV"
    dev_env_value: str = "dev"


class LintConfig(BaseModel):
    """[lint] section."""

    model_config = {"frozen": True}

    tool: str = "ruff"


class TreeConfig(BaseModel):
    """[tree] section."""

    model_config = {"frozen": True}

    ignore: list[str] = Field(
        default_factory=lambda: [
            "__pycache__",
            ".venv",
            ".git",
            ".pytest_cache",
            ".mypy_cache",
            "*.egg-info",
            "dist",
            "build",
            "site",
        ]
    )


class CleanConfig(BaseModel):
    """[clean] section.

    ``recursive_dirs`` and ``recursive_files`` are glob patterns matched
    against names anywhere under the project root.  ``root_paths`` are
    removed only at the project root.
    """

    model_config = {"frozen": True}

    recursive_dirs: list[str] = Field(
        default_factory=lambda: ["__pycache__", "*.egg-info", ".pytest_cache", ".ruff_cache"]
    )
    recursive_files: list[str] = Field(default_factory=lambda: ["*.pyc", "*.pyo"])
    root_paths: list[str] = Field(
        default_factory=lambda: [
            "site",
            "dist",
            "build",
            ".pytest_cache",
            ".ruff_cache",
            ".mypy_cache",
            ".ipynb_checkpoints",
            ".coverage",
            "htmlcov",
        ]
    )


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
