"""trisum — validated, overflow-aware summation of 1 + 2 + ... + n.

Three equivalent strategies (iterative, closed-form, recursive) share one
validator, one error taxonomy, and two pre-flight risk detectors.
"""

from __future__ import annotations

from trisum.domain.constants import CONSTANTS, MAX_RECURSION_DEPTH, MAX_SAFE_SUM_INPUT
from trisum.domain.risk import overflow_risk, stack_overflow_risk
from trisum.domain.strategies import (
    demonstrate_all_methods,
    expected_sum,
    generate_test_values,
    sum_formula,
    sum_iterative,
    sum_recursive,
)
from trisum.domain.types import (
    ErrorKind,
    Invalid,
    SumError,
    Valid,
    ValidationOptions,
    ValidationOutcome,
)
from trisum.domain.validation import classify, safe_validate, validate

__version__ = "0.1.0"

__all__ = [
    "CONSTANTS",
    "MAX_RECURSION_DEPTH",
    "MAX_SAFE_SUM_INPUT",
    "ErrorKind",
    "Invalid",
    "SumError",
    "Valid",
    "ValidationOptions",
    "ValidationOutcome",
    "__version__",
    "classify",
    "demonstrate_all_methods",
    "expected_sum",
    "generate_test_values",
    "overflow_risk",
    "safe_validate",
    "stack_overflow_risk",
    "sum_formula",
    "sum_iterative",
    "sum_recursive",
    "validate",
]
