"""Pre-flight risk detectors.

Both predicates are pure and run before any arithmetic so that overflow
and stack exhaustion surface as classified SumErrors, never as a
lower-level fault.
"""

from __future__ import annotations

from trisum.domain.constants import MAX_RECURSION_DEPTH, OVERFLOW_THRESHOLD


def overflow_risk(n: int) -> bool:
    """True iff ``n * (n + 1) / 2`` would leave the safe-integer range."""
    return n > OVERFLOW_THRESHOLD


def stack_overflow_risk(n: int, max_depth: int = MAX_RECURSION_DEPTH) -> bool:
    """True iff a recursive evaluation of *n* would go deeper than *max_depth*."""
    return n > max_depth
