"""SummationService — timed, result-wrapped access to the strategies.

Every method converts SumError into a failed ServiceResult, so callers
branch on ``result.ok`` and ``result.error.code`` rather than catching.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from trisum.config.models import BenchmarkConfig, RecursionConfig, ValidationConfig
from trisum.domain.constants import CONSTANTS
from trisum.domain.risk import overflow_risk, stack_overflow_risk
from trisum.domain.strategies import (
    STRATEGIES,
    SumMethod,
    generate_test_values,
    get_strategy,
    sum_recursive,
)
from trisum.domain.types import ErrorKind, Invalid, SumError, ValidationOptions
from trisum.domain.validation import classify, validate
from trisum.services.result import ServiceError, ServiceResult, error_result

logger = logging.getLogger(__name__)


class SummationService:
    """Run, compare, benchmark, and pre-check summations.

    Usage::

        svc = SummationService()
        result = svc.compute(100, method="formula")
        assert result.data["value"] == 5050
    """

    def __init__(
        self,
        *,
        validation: ValidationConfig | None = None,
        benchmark: BenchmarkConfig | None = None,
        recursion: RecursionConfig | None = None,
    ) -> None:
        self._validation = validation or ValidationConfig()
        self._benchmark = benchmark or BenchmarkConfig()
        self._recursion = recursion or RecursionConfig()

    def _run(self, method: SumMethod, n: Any) -> int:
        if method is SumMethod.RECURSIVE:
            return sum_recursive(n, max_depth=self._recursion.max_depth)
        return get_strategy(method)(n)

    # ── sum ──────────────────────────────────────────────────────────

    def compute(self, n: Any, method: SumMethod | str = SumMethod.FORMULA) -> ServiceResult:
        """Compute 1 + ... + n with a single strategy."""
        op = "sum"
        chosen = SumMethod(method)
        start = time.perf_counter()
        try:
            value = self._run(chosen, n)
        except SumError as exc:
            logger.debug("sum failed: method=%s kind=%s", chosen, exc.kind)
            return error_result(op, exc, method=chosen.value)
        elapsed_ms = (time.perf_counter() - start) * 1000

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "value": value,
                "input": n,
                "method": chosen.value,
                "validated": True,
                "execution_time_ms": round(elapsed_ms, 4),
            },
        )

    # ── compare ──────────────────────────────────────────────────────

    def compare(self, n: Any) -> ServiceResult:
        """Run every strategy on *n* and report whether they agree.

        A strategy that fails contributes its error kind instead of a
        value; ``agree`` only considers the strategies that succeeded.
        """
        results: dict[str, dict[str, Any]] = {}
        values: set[int] = set()
        warnings: list[str] = []

        for method in STRATEGIES:
            try:
                value = self._run(method, n)
            except SumError as exc:
                results[method.value] = {"ok": False, "kind": exc.kind.value, "message": exc.message}
                warnings.append(f"{method.value}: {exc.message}")
                continue
            results[method.value] = {"ok": True, "value": value}
            values.add(value)

        if not values:
            # The closed form has no depth limit, so its kind is the canonical one.
            return ServiceResult(
                ok=False,
                op="compare",
                error=ServiceError(
                    code=results[SumMethod.FORMULA.value]["kind"],
                    message=f"No strategy accepted input {n!r}",
                    detail={"input": repr(n), "methods": results},
                ),
            )

        return ServiceResult(
            ok=True,
            op="compare",
            data={"input": n, "methods": results, "agree": len(values) == 1},
            warnings=warnings,
        )

    # ── benchmark ────────────────────────────────────────────────────

    def benchmark(
        self,
        n: Any,
        method: SumMethod | str = SumMethod.FORMULA,
        iterations: int | None = None,
    ) -> ServiceResult:
        """Time *iterations* runs of one strategy on *n*."""
        op = "benchmark"
        chosen = SumMethod(method)
        runs = self._benchmark.iterations if iterations is None else iterations
        if runs < 1:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=ErrorKind.INVALID_INPUT.value,
                    message=f"Iterations must be at least 1, received {runs}",
                    detail={"iterations": runs},
                ),
            )

        # Fail fast on inputs the strategy rejects.
        try:
            value = self._run(chosen, n)
        except SumError as exc:
            return error_result(op, exc, method=chosen.value)

        start = time.perf_counter()
        for _ in range(runs):
            self._run(chosen, n)
        total_ms = (time.perf_counter() - start) * 1000
        logger.debug("benchmark: method=%s n=%r runs=%d total_ms=%.3f", chosen, n, runs, total_ms)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": n,
                "method": chosen.value,
                "value": value,
                "iterations": runs,
                "total_time_ms": round(total_ms, 4),
                "average_time_ms": round(total_ms / runs, 6),
            },
        )

    # ── validate ─────────────────────────────────────────────────────

    def check_input(
        self,
        raw: Any,
        *,
        strict: bool | None = None,
        allow_negative: bool | None = None,
    ) -> ServiceResult:
        """Non-throwing pre-flight check of a raw input.

        Unset flags fall back to the ``[validation]`` config section.
        An invalid input is still ``ok=True``: the check itself succeeded.
        """
        options = ValidationOptions(
            strict=self._validation.strict if strict is None else strict,
            allow_negative=(
                self._validation.allow_negative if allow_negative is None else allow_negative
            ),
            max_input=CONSTANTS.max_safe_sum_input,
        )
        outcome = validate(raw, options)

        if isinstance(outcome, Invalid):
            return ServiceResult(
                ok=True,
                op="validate",
                data={
                    "input": repr(raw),
                    "valid": False,
                    "message": outcome.message,
                    "kind": classify(raw, outcome.message).value,
                },
            )

        normalized = outcome.normalized_value
        return ServiceResult(
            ok=True,
            op="validate",
            data={
                "input": repr(raw),
                "valid": True,
                "normalized_value": normalized,
                "overflow_risk": overflow_risk(normalized),
                "stack_overflow_risk": stack_overflow_risk(
                    normalized, self._recursion.max_depth
                ),
            },
        )

    # ── test values ──────────────────────────────────────────────────

    def test_values(self, *, include_edge_cases: bool = True) -> ServiceResult:
        values = generate_test_values(include_edge_cases)
        return ServiceResult(
            ok=True,
            op="test_values",
            data={"values": values, "count": len(values)},
        )
