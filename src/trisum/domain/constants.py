"""Numeric limits derived once at import time.

All bounds are computed with exact integer square roots. The values are
the ones a double-backed numeric type would produce, so results stay
exactly representable as IEEE-754 doubles.

INVARIANT: Nothing in this module is mutated after import.
"""

from __future__ import annotations

import math

from pydantic import BaseModel

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


class Constants(BaseModel):
    """Frozen bundle of derived limits."""

    model_config = {"frozen": True}

    max_safe_sum_input: int
    max_recursion_depth: int
    default_benchmark_iterations: int


CONSTANTS = Constants(
    # Largest n still accepted as input: floor(sqrt(2 * MAX_SAFE_INTEGER)).
    max_safe_sum_input=math.isqrt(2 * MAX_SAFE_INTEGER),
    max_recursion_depth=5000,
    default_benchmark_iterations=1000,
)

MAX_SAFE_SUM_INPUT = CONSTANTS.max_safe_sum_input
MAX_RECURSION_DEPTH = CONSTANTS.max_recursion_depth

# Positive root of n**2 + n - 2 * MAX_SAFE_INTEGER = 0, floored.
OVERFLOW_THRESHOLD = (math.isqrt(1 + 8 * MAX_SAFE_INTEGER) - 1) // 2
