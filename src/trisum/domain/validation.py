"""Input validation and failure classification.

Rules run in a fixed order and the first failing rule wins:

1. ``None``                      -> "cannot be null or undefined"
2. not an int/float              -> "must be a number, received <type>"
3. NaN                           -> "cannot be NaN"
4. +/- infinity                  -> "must be a finite number"
5. fractional (strict)           -> "must be an integer"; non-strict rounds
6. beyond +/- MAX_SAFE_INTEGER   -> "exceeds safe integer range"
7. negative (unless allowed)     -> "cannot be negative"
8. above ``max_input``           -> "exceeds maximum allowed value"

INVARIANT: validate() never raises and has no side effects.
"""

from __future__ import annotations

import math
from typing import Any

from trisum.domain.types import (
    ErrorKind,
    Invalid,
    SumError,
    Valid,
    ValidationOptions,
    ValidationOutcome,
    is_number,
    is_safe_integer,
)

DEFAULT_OPTIONS = ValidationOptions()


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def validate(value: Any, options: ValidationOptions | None = None) -> ValidationOutcome:
    """Normalize *value* to an integer or explain why it cannot be used."""
    opts = options or DEFAULT_OPTIONS

    if value is None:
        return Invalid(message="Input cannot be null or undefined")

    if not is_number(value):
        return Invalid(message=f"Input must be a number, received {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            return Invalid(message="Input cannot be NaN")
        if math.isinf(value):
            return Invalid(message="Input must be a finite number")
        if not value.is_integer():
            if opts.strict:
                return Invalid(message="Input must be an integer")
            value = _round_half_up(value)
        else:
            value = int(value)

    if not is_safe_integer(value):
        return Invalid(message="Input exceeds safe integer range")

    if value < 0 and not opts.allow_negative:
        return Invalid(message="Input cannot be negative")

    if value > opts.max_input:
        return Invalid(message=f"Input {value} exceeds maximum allowed value {opts.max_input}")

    return Valid(normalized_value=value)


def classify(value: Any, message: str | None = None) -> ErrorKind:
    """Derive an ErrorKind from a rejected raw input and its rejection message.

    Works on the original input, not the normalized one, so a fractional
    value rounded in non-strict mode still classifies as NON_INTEGER.
    """
    if not is_number(value):
        return ErrorKind.INVALID_INPUT

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return ErrorKind.INVALID_INPUT
        if not value.is_integer():
            return ErrorKind.NON_INTEGER

    if value < 0:
        return ErrorKind.NEGATIVE_INPUT

    if not is_safe_integer(value) or (message is not None and "exceeds" in message):
        return ErrorKind.OVERFLOW_RISK

    return ErrorKind.INVALID_INPUT


def safe_validate(value: Any, options: ValidationOptions | None = None) -> int:
    """Validate *value* and return the normalized integer.

    Raises:
        SumError: With the kind chosen by :func:`classify`.
    """
    outcome = validate(value, options)
    if isinstance(outcome, Invalid):
        raise SumError(classify(value, outcome.message), value, outcome.message)
    return outcome.normalized_value
