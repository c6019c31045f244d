"""Value types, error taxonomy, and type guards.

Every value here lives for a single call: created, inspected, discarded.

INVARIANT: Exactly one ErrorKind is attached to any raised SumError.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel

from trisum.domain.constants import MAX_SAFE_INTEGER, MAX_SAFE_SUM_INPUT


class ErrorKind(StrEnum):
    """Closed set of failure classifications."""

    INVALID_INPUT = "INVALID_INPUT"
    OVERFLOW_RISK = "OVERFLOW_RISK"
    STACK_OVERFLOW = "STACK_OVERFLOW"
    NEGATIVE_INPUT = "NEGATIVE_INPUT"
    NON_INTEGER = "NON_INTEGER"


class ValidationOptions(BaseModel):
    """Knobs for :func:`trisum.domain.validation.validate`.

    Attributes:
        allow_negative: Let negative values through (strategies map them to 0).
        strict: Reject fractional values instead of rounding them.
        max_input: Upper bound on the normalized value.
    """

    model_config = {"frozen": True}

    allow_negative: bool = False
    strict: bool = True
    max_input: int = MAX_SAFE_SUM_INPUT


class Valid(BaseModel):
    """Successful validation carrying the normalized integer."""

    model_config = {"frozen": True}

    ok: Literal[True] = True
    normalized_value: int

    @property
    def is_valid(self) -> bool:
        return True


class Invalid(BaseModel):
    """Failed validation carrying a human-readable reason."""

    model_config = {"frozen": True}

    ok: Literal[False] = False
    message: str

    @property
    def is_valid(self) -> bool:
        return False


ValidationOutcome = Valid | Invalid


class SumError(Exception):
    """Classified failure raised by the summation strategies.

    Callers should branch on :attr:`kind`, never on the message text.
    """

    def __init__(self, kind: ErrorKind, offending_input: Any, message: str | None = None) -> None:
        self._kind = ErrorKind(kind)
        self._offending_input = offending_input
        self._message = message or f"Sum calculation error: {self._kind}"
        super().__init__(self._message)

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def offending_input(self) -> Any:
        return self._offending_input

    @property
    def message(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"SumError(kind={self._kind.value}, offending_input={self._offending_input!r})"


def is_number(value: Any) -> bool:
    """True for ``int`` and ``float``; ``bool`` does not count as a number."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_safe_integer(value: Any) -> bool:
    """True when *value* is integral and within +/- MAX_SAFE_INTEGER."""
    if not is_number(value):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return abs(value) <= MAX_SAFE_INTEGER


def is_non_negative_integer(value: Any) -> bool:
    return is_safe_integer(value) and value >= 0
