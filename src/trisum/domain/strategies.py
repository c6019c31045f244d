"""Three equivalent ways to compute f(n) = 1 + 2 + ... + n.

f(n) is 0 for n <= 0. Every strategy validates with negatives allowed,
short-circuits non-positive input to 0, and refuses inputs whose result
would overflow the safe-integer range.

INVARIANT: All strategies return identical results for every input they
all accept (0 <= n <= MAX_RECURSION_DEPTH).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

from trisum.domain.constants import MAX_RECURSION_DEPTH
from trisum.domain.risk import overflow_risk, stack_overflow_risk
from trisum.domain.types import ErrorKind, SumError, ValidationOptions, is_number
from trisum.domain.validation import safe_validate

SumFunction = Callable[[Any], int]

_STRATEGY_OPTIONS = ValidationOptions(allow_negative=True)


class SumMethod(StrEnum):
    """Names under which the strategies are registered."""

    ITERATIVE = "iterative"
    FORMULA = "formula"
    RECURSIVE = "recursive"


def _prepare(n: Any) -> int:
    """Validate *n* and reject inputs whose sum would overflow.

    Returns the normalized value; callers treat ``<= 0`` as an empty sum.
    """
    value = safe_validate(n, _STRATEGY_OPTIONS)
    # Second guard: validation already caps at max_input, which equals the threshold.
    if value > 0 and overflow_risk(value):
        raise SumError(
            ErrorKind.OVERFLOW_RISK,
            value,
            f"Input {value} would cause integer overflow",
        )
    return value


def sum_iterative(n: Any) -> int:
    """Accumulate 1, 2, ..., n in a single pass. O(n) time, O(1) space.

    >>> sum_iterative(5)
    15
    """
    value = _prepare(n)
    if value <= 0:
        return 0

    total = 0
    for i in range(1, value + 1):
        total += i
    return total


def sum_formula(n: Any) -> int:
    """Closed form ``n * (n + 1) // 2``. O(1) time and space.

    >>> sum_formula(100)
    5050
    """
    value = _prepare(n)
    if value <= 0:
        return 0
    return value * (value + 1) // 2


def sum_recursive(n: Any, *, max_depth: int = MAX_RECURSION_DEPTH) -> int:
    """Evaluate ``f(n) = n + f(n - 1)`` with ``f(1) = 1`` and ``f(0) = 0``.

    The depth check runs on the raw input before validation, so a numeric
    input above *max_depth* is always reported as STACK_OVERFLOW, even
    when validation would have classified it differently.

    Frames are kept on an explicit stack: CPython's default recursion
    limit sits below MAX_RECURSION_DEPTH.
    """
    if max_depth > MAX_RECURSION_DEPTH:
        raise ValueError(f"max_depth {max_depth} exceeds the hard limit {MAX_RECURSION_DEPTH}")

    if is_number(n) and stack_overflow_risk(n, max_depth):
        raise SumError(
            ErrorKind.STACK_OVERFLOW,
            n,
            f"Input {n} would cause stack overflow in recursive implementation",
        )

    value = _prepare(n)
    if value <= 0:
        return 0

    # Descend: push pending frames n, n-1, ..., 2 until the f(1) base case.
    pending: list[int] = []
    k = value
    while k > 1:
        pending.append(k)
        k -= 1

    # Unwind: each frame adds its own term to the result of the frame below.
    result = 1
    while pending:
        result = pending.pop() + result
    return result


STRATEGIES: dict[SumMethod, SumFunction] = {
    SumMethod.ITERATIVE: sum_iterative,
    SumMethod.FORMULA: sum_formula,
    SumMethod.RECURSIVE: sum_recursive,
}


def get_strategy(method: SumMethod | str) -> SumFunction:
    """Look up a strategy by name.

    Raises:
        ValueError: If *method* is not a registered strategy name.
    """
    return STRATEGIES[SumMethod(method)]


def expected_sum(n: int) -> int:
    """Reference oracle with no validation, for cross-checking strategies."""
    if n <= 0:
        return 0
    return n * (n + 1) // 2


def demonstrate_all_methods(n: Any) -> dict[str, int]:
    """Run every strategy on *n*. Raises the first SumError encountered."""
    return {method.value: strategy(n) for method, strategy in STRATEGIES.items()}


def generate_test_values(include_edge_cases: bool = True) -> list[int]:
    """Representative inputs for exercising the strategies."""
    values = [1, 2, 3, 5, 10, 100, 1000]
    if include_edge_cases:
        values = [0, *values, 10000, 50000]
    return values
