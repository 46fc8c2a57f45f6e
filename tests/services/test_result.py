"""Tests for ServiceResult, ServiceError, and the failure() helper."""

import json

import pytest

from uvmake.services.result import ErrorCode, ServiceError, ServiceResult, failure


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="install", data={"manifest": "pyproject.toml"})
        assert result.ok is True
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="clean", data={"removed": ["dist"]})
        parsed = json.loads(result.model_dump_json())
        assert parsed["op"] == "clean"
        assert parsed["data"]["removed"] == ["dist"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="clean")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_exit_code_defaults_to_1(self) -> None:
        assert ServiceError(code=ErrorCode.VENV_MISSING, message="x").exit_code == 1

    def test_exit_code_from_returncode(self) -> None:
        error = ServiceError(code=ErrorCode.TOOL_FAILED, message="x", detail={"returncode": 4})
        assert error.exit_code == 4

    def test_zero_returncode_still_fails(self) -> None:
        error = ServiceError(code=ErrorCode.TOOL_FAILED, message="x", detail={"returncode": 0})
        assert error.exit_code == 1


class TestFailure:
    def test_hints_and_detail(self) -> None:
        result = failure(
            "lint", ErrorCode.TOOL_MISSING, "ruff not installed!", "a", "b", tool="ruff"
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.detail == {"tool": "ruff", "hints": ["a", "b"]}
