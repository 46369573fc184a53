"""Benchmarking suite for precheck."""
from .bench_checks import (
    benchmark_bounds,
    benchmark_check,
    benchmark_null,
    benchmark_text,
)
from .run import format_results, main, run_all
from .utils import BenchmarkResult, compare, time_function

__all__ = [
    # Data classes
    "BenchmarkResult",
    # Utilities
    "time_function",
    "compare",
    "format_results",
    # Check benchmarks
    "benchmark_check",
    "benchmark_null",
    "benchmark_text",
    "benchmark_bounds",
    # CLI
    "run_all",
    "main",
]
