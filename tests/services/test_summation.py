"""Tests for SummationService."""

import math

import pytest

from trisum.config.models import BenchmarkConfig, RecursionConfig, ValidationConfig
from trisum.services.summation import SummationService


class TestCompute:
    @pytest.mark.parametrize("method", ["iterative", "formula", "recursive"])
    def test_success(self, service: SummationService, method: str) -> None:
        result = service.compute(100, method=method)
        assert result.ok is True
        assert result.op == "sum"
        assert result.data["value"] == 5050
        assert result.data["input"] == 100
        assert result.data["method"] == method
        assert result.data["validated"] is True
        assert result.data["execution_time_ms"] >= 0

    def test_default_method_is_formula(self, service: SummationService) -> None:
        assert service.compute(5).data["method"] == "formula"

    def test_negative_is_zero(self, service: SummationService) -> None:
        assert service.compute(-7, method="iterative").data["value"] == 0

    def test_invalid_input(self, service: SummationService) -> None:
        result = service.compute("abc")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
        assert result.error.message == "Input must be a number, received str"
        assert result.error.detail == {"input": "'abc'", "method": "formula"}

    def test_stack_overflow(self, service: SummationService) -> None:
        result = service.compute(50000, method="recursive")
        assert result.error is not None
        assert result.error.code == "STACK_OVERFLOW"

    def test_overflow(self, service: SummationService) -> None:
        result = service.compute(2**53 - 1, method="iterative")
        assert result.error is not None
        assert result.error.code == "OVERFLOW_RISK"

    def test_unknown_method(self, service: SummationService) -> None:
        with pytest.raises(ValueError):
            service.compute(5, method="bogus")

    def test_configured_depth(self) -> None:
        svc = SummationService(recursion=RecursionConfig(max_depth=10))
        assert svc.compute(10, method="recursive").data["value"] == 55
        result = svc.compute(11, method="recursive")
        assert result.error is not None
        assert result.error.code == "STACK_OVERFLOW"


class TestCompare:
    def test_all_agree(self, service: SummationService) -> None:
        result = service.compare(10)
        assert result.ok is True
        assert result.op == "compare"
        assert result.data["agree"] is True
        assert result.data["methods"] == {
            "iterative": {"ok": True, "value": 55},
            "formula": {"ok": True, "value": 55},
            "recursive": {"ok": True, "value": 55},
        }
        assert result.warnings == []

    def test_recursive_refuses_large_input(self, service: SummationService) -> None:
        result = service.compare(6000)
        assert result.ok is True
        assert result.data["agree"] is True
        recursive = result.data["methods"]["recursive"]
        assert recursive["ok"] is False
        assert recursive["kind"] == "STACK_OVERFLOW"
        assert result.data["methods"]["formula"]["value"] == 18003000
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith("recursive:")

    def test_all_fail(self, service: SummationService) -> None:
        result = service.compare("x")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
        assert set(result.error.detail["methods"]) == {"iterative", "formula", "recursive"}

    def test_all_fail_uses_formula_kind(self, service: SummationService) -> None:
        result = service.compare(6000.5)
        assert result.error is not None
        assert result.error.code == "NON_INTEGER"
        assert result.error.detail["methods"]["recursive"]["kind"] == "STACK_OVERFLOW"


class TestBenchmark:
    def test_explicit_iterations(self, service: SummationService) -> None:
        result = service.benchmark(100, method="iterative", iterations=5)
        assert result.ok is True
        assert result.op == "benchmark"
        assert result.data["iterations"] == 5
        assert result.data["value"] == 5050
        assert result.data["method"] == "iterative"
        assert result.data["average_time_ms"] >= 0

    def test_iterations_from_config(self) -> None:
        svc = SummationService(benchmark=BenchmarkConfig(iterations=3))
        assert svc.benchmark(10).data["iterations"] == 3

    @pytest.mark.parametrize("iterations", [0, -4])
    def test_rejects_non_positive_iterations(
        self, service: SummationService, iterations: int
    ) -> None:
        result = service.benchmark(10, iterations=iterations)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"

    def test_invalid_input(self, service: SummationService) -> None:
        result = service.benchmark(math.nan, iterations=2)
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"


class TestCheckInput:
    def test_valid(self, service: SummationService) -> None:
        result = service.check_input(42)
        assert result.ok is True
        assert result.op == "validate"
        assert result.data == {
            "input": "42",
            "valid": True,
            "normalized_value": 42,
            "overflow_risk": False,
            "stack_overflow_risk": False,
        }

    def test_non_integer_strict(self, service: SummationService) -> None:
        result = service.check_input(3.14)
        assert result.ok is True
        assert result.data["valid"] is False
        assert result.data["message"] == "Input must be an integer"
        assert result.data["kind"] == "NON_INTEGER"

    def test_non_strict_rounds(self, service: SummationService) -> None:
        result = service.check_input(3.6, strict=False)
        assert result.data["normalized_value"] == 4

    def test_negative(self, service: SummationService) -> None:
        assert service.check_input(-3).data["kind"] == "NEGATIVE_INPUT"
        assert service.check_input(-3, allow_negative=True).data["normalized_value"] == -3

    def test_flags_stack_risk(self, service: SummationService) -> None:
        result = service.check_input(6000)
        assert result.data["stack_overflow_risk"] is True
        assert result.data["overflow_risk"] is False

    def test_above_limit(self, service: SummationService) -> None:
        result = service.check_input(200_000_000)
        assert result.data["valid"] is False
        assert result.data["kind"] == "OVERFLOW_RISK"

    def test_config_defaults(self) -> None:
        svc = SummationService(validation=ValidationConfig(strict=False, allow_negative=True))
        assert svc.check_input(2.5).data["normalized_value"] == 3
        assert svc.check_input(-1).data["valid"] is True

    def test_explicit_flag_overrides_config(self) -> None:
        svc = SummationService(validation=ValidationConfig(strict=False))
        assert svc.check_input(2.5, strict=True).data["valid"] is False


class TestTestValues:
    def test_with_edge_cases(self, service: SummationService) -> None:
        result = service.test_values()
        assert result.data["values"][0] == 0
        assert result.data["count"] == 10

    def test_without_edge_cases(self, service: SummationService) -> None:
        result = service.test_values(include_edge_cases=False)
        assert result.data["values"] == [1, 2, 3, 5, 10, 100, 1000]
        assert result.data["count"] == 7
