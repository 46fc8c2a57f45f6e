"""Shared pytest fixtures and test helpers for uvmake tests."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from uvmake.config.settings import UvmakeSettings
from uvmake.infrastructure.project import Project
from uvmake.infrastructure.runner import ToolNotFoundError, ToolRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory, isolated from any ambient uvmake config."""
    monkeypatch.delenv("UVMAKE_CONFIG", raising=False)
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def project(project_root: Path) -> Project:
    """Project rooted at the empty temp directory, plugins disabled."""
    settings = UvmakeSettings.from_cli(
        project_root=project_root, plugins={"enabled": False}
    )
    return Project(settings)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project root so the CLI operates there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Fake external tools
# ---------------------------------------------------------------------------


@dataclass
class ToolCall:
    """One recorded external tool invocation."""

    args: tuple[str, ...]
    cwd: Path
    venv: Path | None
    extra_env: dict[str, str]

    @property
    def line(self) -> str:
        return " ".join(self.args)


@dataclass
class FakeTools:
    """Stand-in for uv/ruff/tree that records calls instead of running them.

    ``uv venv <dir>`` creates ``<dir>`` so follow-up commands see a venv.
    """

    available: set[str] = field(default_factory=lambda: {"uv", "ruff", "tree"})
    failures: dict[str, int] = field(default_factory=dict)
    python_list: str = "cpython-3.13.1-linux-x86_64-gnu    <download available>\n"
    calls: list[ToolCall] = field(default_factory=list)

    def fail(self, prefix: str, returncode: int) -> None:
        """Make any call whose command line starts with *prefix* exit non-zero."""
        self.failures[prefix] = returncode

    @property
    def lines(self) -> list[str]:
        return [call.line for call in self.calls]

    def _returncode(self, line: str) -> int:
        for prefix, code in self.failures.items():
            if line.startswith(prefix):
                return code
        return 0

    def run(self, runner: ToolRunner, *args: str, **kwargs: Any) -> int:
        if args[0] not in self.available:
            raise ToolNotFoundError(args[0])
        call = ToolCall(
            args=args,
            cwd=runner.cwd,
            venv=runner.venv,
            extra_env=dict(kwargs.get("extra_env") or {}),
        )
        self.calls.append(call)
        code = self._returncode(call.line)
        if code == 0 and args[:2] == ("uv", "venv"):
            venv = runner.cwd / args[2]
            venv.mkdir(parents=True)
            (venv / "pyvenv.cfg").write_text("home = /usr/bin\n", encoding="utf-8")
        return code

    def capture(self, runner: ToolRunner, *args: str) -> subprocess.CompletedProcess[str]:
        if args[0] not in self.available:
            raise ToolNotFoundError(args[0])
        self.calls.append(ToolCall(args=args, cwd=runner.cwd, venv=runner.venv, extra_env={}))
        code = self._returncode(" ".join(args))
        stdout = self.python_list if code == 0 else ""
        return subprocess.CompletedProcess(list(args), code, stdout, "")

    def which(self, runner: ToolRunner, tool: str) -> str | None:
        return f"/fake/bin/{tool}" if tool in self.available else None


@pytest.fixture
def fake_tools(monkeypatch: pytest.MonkeyPatch) -> FakeTools:
    """Replace real subprocess execution with a recording fake."""
    tools = FakeTools()
    monkeypatch.setattr(ToolRunner, "run", lambda self, *a, **kw: tools.run(self, *a, **kw))
    monkeypatch.setattr(ToolRunner, "capture", lambda self, *a: tools.capture(self, *a))
    monkeypatch.setattr(ToolRunner, "which", lambda self, tool: tools.which(self, tool))
    return tools


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_venv(root: Path, name: str = ".venv") -> Path:
    """Create a minimal virtual environment directory."""
    venv = root / name
    (venv / "bin").mkdir(parents=True)
    (venv / "pyvenv.cfg").write_text("home = /usr/bin\n", encoding="utf-8")
    return venv


def make_manifest(root: Path) -> Path:
    """Write a minimal pyproject.toml."""
    manifest = root / "pyproject.toml"
    manifest.write_text('[project]\nname = "demo"\nversion = "0.1.0"\n', encoding="utf-8")
    return manifest


def snapshot(root: Path) -> dict[str, str]:
    """Map every path under *root* to its file content ('' for directories)."""
    return {
        str(p.relative_to(root)): ("" if p.is_dir() else p.read_text(encoding="utf-8"))
        for p in sorted(root.rglob("*"))
    }
