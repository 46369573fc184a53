"""Shared utilities for benchmarking."""
from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""

    name: str
    guard_time_us: float
    reference_time_us: float
    overhead: float  # guard time / hand-written reference time


def time_function(
    fn: Callable, calls: int = 1000, warmup: int = 3, runs: int = 10
) -> float:
    """
    Time a function with warmup runs, return median time per call in us.

    Parameters
    ----------
    fn : Callable
        Zero-argument function to time.
    calls : int, default=1000
        Number of calls per timed run. Guard calls are too fast to time
        individually.
    warmup : int, default=3
        Number of warmup runs before timing.
    runs : int, default=10
        Number of timed runs.

    Returns
    -------
    float
        Median execution time per call in microseconds.
    """
    import numpy as np

    for _ in range(warmup):
        for _ in range(calls):
            fn()

    times = []
    for _ in range(runs):
        start = time.perf_counter()
        for _ in range(calls):
            fn()
        times.append((time.perf_counter() - start) * 1e6 / calls)

    return float(np.median(times))


def compare(
    name: str,
    guarded: Callable,
    reference: Callable,
    calls: int = 1000,
    runs: int = 10,
) -> BenchmarkResult:
    """
    Time a guarded call against its hand-written equivalent.

    Parameters
    ----------
    name : str
        Benchmark label.
    guarded : Callable
        Zero-argument function calling a precheck check.
    reference : Callable
        Zero-argument function with the equivalent ``if ...: raise ...``.
    calls : int, default=1000
        Calls per timed run.
    runs : int, default=10
        Number of timed runs.

    Returns
    -------
    BenchmarkResult
    """
    guard_time = time_function(guarded, calls=calls, runs=runs)
    reference_time = time_function(reference, calls=calls, runs=runs)
    overhead = guard_time / reference_time if reference_time > 0 else 0.0
    return BenchmarkResult(
        name=name,
        guard_time_us=guard_time,
        reference_time_us=reference_time,
        overhead=overhead,
    )
