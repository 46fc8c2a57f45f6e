"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI consumes this type; exit codes are derived from it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorCode:
    """Error codes carried on :attr:`ServiceError.code`.

    Precondition failures are detected locally before any tool runs.
    ``TOOL_FAILED`` means a wrapped tool ran and exited non-zero.
    """

    VENV_MISSING = "VENV_MISSING"
    VENV_EXISTS = "VENV_EXISTS"
    MANIFEST_MISSING = "MANIFEST_MISSING"
    TOOL_MISSING = "TOOL_MISSING"
    TOOL_FAILED = "TOOL_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``detail`` may carry ``hints`` (remediation lines shown to the user)
    and ``returncode`` (the process exit status to use).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        code = self.detail.get("returncode")
        return code if isinstance(code, int) and code != 0 else 1


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the command (e.g. ``"install"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def failure(op: str, code: str, message: str, *hints: str, **detail: Any) -> ServiceResult:
    """Build a failed ServiceResult with optional remediation *hints*."""
    if hints:
        detail["hints"] = list(hints)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
