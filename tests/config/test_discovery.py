"""Tests for project and config file discovery."""

from pathlib import Path

import pytest

from uvmake.config.discovery import (
    CONFIG_ENV_VAR,
    find_config,
    find_project,
    read_config_table,
)


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / "uvmake.toml"
        cfg.write_text("")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / "uvmake.toml"
        cfg.write_text("")
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        assert find_config(deep) == cfg.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "uvmake.toml").write_text("")
        other = tmp_path / "other.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_pointing_nowhere(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestFindProject:
    def test_outside_any_project(self, tmp_path: Path) -> None:
        assert find_project(tmp_path) == (None, None)

    def test_manifest_marks_project_without_config(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')
        sub = tmp_path / "app"
        sub.mkdir()
        assert find_project(sub) == (tmp_path.resolve(), None)

    def test_nested_project_shadows_parent_config(self, tmp_path: Path) -> None:
        (tmp_path / "uvmake.toml").write_text('[app]\nmodule = "mono.main"\n')
        child = tmp_path / "svc"
        child.mkdir()
        (child / "pyproject.toml").write_text('[project]\nname = "svc"\n')

        assert find_project(child) == (child.resolve(), None)
        assert find_config(child) is None

    def test_nested_project_uses_its_own_table(self, tmp_path: Path) -> None:
        (tmp_path / "uvmake.toml").write_text("")
        child = tmp_path / "svc"
        child.mkdir()
        pyproject = child / "pyproject.toml"
        pyproject.write_text("[tool.uvmake.lint]\ntool = 'flake8'\n")
        assert find_project(child) == (child.resolve(), pyproject.resolve())


class TestPyprojectTable:
    def test_tool_table_found(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "demo"\n[tool.uvmake.app]\nmodule = "demo.cli"\n')
        assert find_config(tmp_path) == pyproject.resolve()
        assert read_config_table(pyproject) == {"app": {"module": "demo.cli"}}

    def test_pyproject_without_table_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')
        assert find_config(tmp_path) is None

    def test_dedicated_file_wins(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.uvmake.lint]\ntool = 'flake8'\n")
        dedicated = tmp_path / "uvmake.toml"
        dedicated.write_text("")
        assert find_config(tmp_path) == dedicated.resolve()

    def test_broken_pyproject_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.uvmake\n")
        assert find_config(tmp_path) is None

    def test_read_config_table_without_tool_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.other]\nx = 1\n")
        assert read_config_table(pyproject) == {}

    def test_read_dedicated_file_whole(self, tmp_path: Path) -> None:
        cfg = tmp_path / "uvmake.toml"
        cfg.write_text('[clean]\nroot_paths = ["out"]\n')
        assert read_config_table(cfg) == {"clean": {"root_paths": ["out"]}}
