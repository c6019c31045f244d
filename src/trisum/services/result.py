"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Service methods return ServiceResult and never raise SumError.
A failed sum becomes ``ok=False`` with ``error.code`` set to its ErrorKind.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from trisum.domain.types import SumError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"sum"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None


def error_result(op: str, exc: SumError, **detail: Any) -> ServiceResult:
    """Wrap a SumError as a failed ServiceResult."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=exc.kind.value,
            message=exc.message,
            detail={"input": repr(exc.offending_input), **detail},
        ),
    )
