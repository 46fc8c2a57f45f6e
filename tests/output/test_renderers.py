"""Tests for Rich renderers and output-mode formatting."""

from __future__ import annotations

import json

from uvmake.output.formatters import OutputSettings, format_result
from uvmake.output.renderers import render_quiet, render_result
from uvmake.services.help import HelpService
from uvmake.services.result import ErrorCode, ServiceResult, failure


class TestRenderResult:
    def test_help_menu(self) -> None:
        output = render_result(HelpService.menu())
        assert "Python Project Commands" in output
        assert "Setup Commands:" in output
        assert "Maintenance Commands:" in output
        assert "uvmake python-version - Show current Python version" in output
        assert "uvmake init           - Create virtual environment" in output

    def test_error_with_hints(self) -> None:
        result = failure(
            "install",
            ErrorCode.VENV_MISSING,
            "Virtual environment not found!",
            "Run 'uvmake init' first.",
        )
        output = render_result(result)
        assert "❌ Virtual environment not found!" in output
        assert "Run 'uvmake init' first." in output
        assert "VENV_MISSING" not in output

    def test_verbose_error_shows_code_and_command(self) -> None:
        result = failure(
            "build", ErrorCode.TOOL_FAILED, "uv exited with status 1", command=["uv", "run"]
        )
        output = render_result(result, verbose=True)
        assert "code: TOOL_FAILED" in output
        assert "command: uv run" in output

    def test_unknown_op_generic(self) -> None:
        output = render_result(ServiceResult(ok=True, op="lint"))
        assert output == "✅ lint complete"

    def test_tree_without_listing_is_empty(self) -> None:
        assert render_result(ServiceResult(ok=True, op="tree", data={"builtin": False})) == ""

    def test_builtin_tree(self) -> None:
        node = {
            "name": "proj",
            "dir": True,
            "children": [
                {"name": "app", "dir": True, "children": [
                    {"name": "main.py", "dir": False, "children": []},
                ]},
            ],
        }
        output = render_result(ServiceResult(ok=True, op="tree", data={"tree": node}))
        assert output.splitlines()[0].strip() == "proj"
        assert "app" in output
        assert "main.py" in output

    def test_markup_is_not_interpreted(self) -> None:
        result = ServiceResult(
            ok=True,
            op="python-version",
            data={
                "python": "3.12",
                "source": "pin",
                "pin_file": ".python-version",
                "available": ["cpython-3.12 [bold]x[/bold]"],
            },
        )
        assert "[bold]x[/bold]" in render_result(result)


class TestRenderQuiet:
    def test_ok(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="clean")) == "OK: clean"

    def test_error(self) -> None:
        result = failure("init", ErrorCode.VENV_EXISTS, "exists")
        assert render_quiet(result) == "ERROR: init — exists"


class TestFormatResult:
    def test_json_wins_over_quiet(self) -> None:
        result = ServiceResult(ok=True, op="clean")
        output = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "clean"

    def test_default_settings_render_human(self) -> None:
        output = format_result(ServiceResult(ok=True, op="install"))
        assert "Dependencies installed successfully" in output
