"""Per-call overhead of precheck checks versus hand-written guards."""
from __future__ import annotations

import precheck

from .utils import BenchmarkResult, compare


def _expect(exc_type, fn):
    """Wrap ``fn`` so the expected failure is swallowed by the timing loop."""

    def run():
        try:
            fn()
        except exc_type:
            pass

    return run


def benchmark_check(calls: int = 1000, runs: int = 10) -> list[BenchmarkResult]:
    """Benchmark the predicate primitive on its passing and failing paths."""
    error = ValueError("violated")

    def reference_pass():
        if False:
            raise error

    def reference_fail():
        if True:
            raise error

    return [
        compare(
            "check (pass)",
            lambda: precheck.check(lambda: False, error),
            reference_pass,
            calls,
            runs,
        ),
        compare(
            "check (fail)",
            _expect(ValueError, lambda: precheck.check(lambda: True, error)),
            _expect(ValueError, reference_fail),
            calls,
            runs,
        ),
    ]


def benchmark_null(calls: int = 1000, runs: int = 10) -> list[BenchmarkResult]:
    """Benchmark not_null with a parameter name and with an exception."""
    value = object()
    error = LookupError("missing")

    def reference():
        if value is None:
            raise ValueError("[user] cannot be Null.")

    return [
        compare(
            "not_null (name)",
            lambda: precheck.not_null(value, "user"),
            reference,
            calls,
            runs,
        ),
        compare(
            "not_null (exception)",
            lambda: precheck.not_null(value, error),
            reference,
            calls,
            runs,
        ),
    ]


def benchmark_text(calls: int = 1000, runs: int = 10) -> list[BenchmarkResult]:
    """Benchmark the blank and empty text checks."""
    text = "  a title  "

    def reference_blank():
        if text is None or not text.strip():
            raise ValueError("[title] cannot be Null, empty or white-space.")

    def reference_empty():
        if not text:
            raise ValueError("[title] cannot be Null or empty.")

    return [
        compare(
            "not_null_or_blank",
            lambda: precheck.not_null_or_blank(text, "title"),
            reference_blank,
            calls,
            runs,
        ),
        compare(
            "not_null_or_empty",
            lambda: precheck.not_null_or_empty(text, "title"),
            reference_empty,
            calls,
            runs,
        ),
    ]


def benchmark_bounds(calls: int = 1000, runs: int = 10) -> list[BenchmarkResult]:
    """Benchmark the lower and upper bound checks."""
    count = 7

    def reference_lower():
        if count < 5:
            raise ValueError("[count] is out of range.")

    def reference_upper():
        if count > 10:
            raise ValueError("[count] is out of range.")

    return [
        compare(
            "not_less_than",
            lambda: precheck.not_less_than(count, 5, "count"),
            reference_lower,
            calls,
            runs,
        ),
        compare(
            "not_greater_than",
            lambda: precheck.not_greater_than(count, 10, "count"),
            reference_upper,
            calls,
            runs,
        ),
    ]


SUITES = {
    "check": benchmark_check,
    "null": benchmark_null,
    "text": benchmark_text,
    "bounds": benchmark_bounds,
}
