"""
Benchmark CLI for precheck.

This module provides the benchmark command-line tool for measuring the
per-call cost of each check against the equivalent hand-written
``if ...: raise ...`` block. It is not installed with the package; run it
from a source checkout with `python -m benchmarks.run`.

Usage:
    python -m benchmarks.run                # Run all benchmarks
    python -m benchmarks.run --suite text   # Run only the text checks
    python -m benchmarks.run --calls 10000  # More calls per timed run
    python -m benchmarks.run --output json  # Machine-readable output
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from .utils import BenchmarkResult


def format_results(results: list[BenchmarkResult]) -> str:
    """
    Format benchmark results as a table.

    Parameters
    ----------
    results : list[BenchmarkResult]
        Benchmark results to format.

    Returns
    -------
    str
        Formatted table string.
    """
    lines = []
    lines.append("=" * 72)
    lines.append(
        f"{'Benchmark':<32} {'Guard (us)':<12} {'Ref (us)':<12} {'Overhead':<10}"
    )
    lines.append("-" * 72)

    for r in results:
        overhead_str = f"{r.overhead:.2f}x" if r.overhead > 0 else "N/A"
        lines.append(
            f"{r.name:<32} {r.guard_time_us:<12.3f} "
            f"{r.reference_time_us:<12.3f} {overhead_str:<10}"
        )

    lines.append("=" * 72)
    return "\n".join(lines)


def format_results_json(results: list[BenchmarkResult]) -> str:
    """Format benchmark results as JSON."""
    return json.dumps([asdict(r) for r in results], indent=2)


def format_results_markdown(results: list[BenchmarkResult]) -> str:
    """Format benchmark results as markdown table."""
    lines = []
    lines.append("| Benchmark | Guard (us) | Ref (us) | Overhead |")
    lines.append("|-----------|------------|----------|----------|")

    for r in results:
        overhead_str = f"{r.overhead:.2f}x" if r.overhead > 0 else "N/A"
        lines.append(
            f"| {r.name} | {r.guard_time_us:.3f} | "
            f"{r.reference_time_us:.3f} | {overhead_str} |"
        )

    return "\n".join(lines)


def format_results_csv(results: list[BenchmarkResult]) -> str:
    """Format benchmark results as CSV."""
    lines = []
    lines.append("name,guard_time_us,reference_time_us,overhead")

    for r in results:
        lines.append(
            f"{r.name},{r.guard_time_us:.6f},{r.reference_time_us:.6f},"
            f"{r.overhead:.4f}"
        )

    return "\n".join(lines)


FORMATTERS = {
    "json": format_results_json,
    "markdown": format_results_markdown,
    "csv": format_results_csv,
}


def run_all(
    suites: list[str] | None = None,
    calls: int = 1000,
    runs: int = 10,
    verbose: bool = True,
) -> list[BenchmarkResult]:
    """
    Run benchmark suites.

    Parameters
    ----------
    suites : list[str], optional
        Suite names to run. Default: every suite.
    calls : int, default=1000
        Calls per timed run.
    runs : int, default=10
        Number of timed runs.
    verbose : bool, default=True
        If True, print a table per suite and a summary.

    Returns
    -------
    list[BenchmarkResult]
        All benchmark results.
    """
    from .bench_checks import SUITES

    if suites is None:
        suites = list(SUITES)

    all_results = []
    for suite in suites:
        results = SUITES[suite](calls=calls, runs=runs)
        all_results.extend(results)
        if verbose:
            print(f"\n[{suite}]")
            print(format_results(results))

    if verbose:
        print("\n[Summary]")
        overheads = [r.overhead for r in all_results if r.overhead > 0]
        if overheads:
            print(f"Average overhead: {sum(overheads) / len(overheads):.2f}x")
            print(f"Min overhead: {min(overheads):.2f}x")
            print(f"Max overhead: {max(overheads):.2f}x")

    return all_results


def main(args: list[str] | None = None) -> int:
    """
    CLI entry point.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments. Uses sys.argv if None.

    Returns
    -------
    int
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(
        description="precheck overhead benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m benchmarks.run                    # Run all benchmarks
  python -m benchmarks.run --suite bounds     # Run only the bound checks
  python -m benchmarks.run --output markdown  # Markdown table
        """,
    )
    parser.add_argument(
        "--suite",
        choices=["all", "check", "null", "text", "bounds"],
        default="all",
        help="Benchmark suite to run (default: all)",
    )
    parser.add_argument(
        "--calls",
        type=int,
        default=1000,
        help="Calls per timed run (default: 1000)",
    )
    parser.add_argument(
        "--runs", type=int, default=10, help="Timed runs (default: 10)"
    )
    parser.add_argument(
        "--output",
        choices=["table", "json", "markdown", "csv"],
        default="table",
        help="Output format (default: table)",
    )

    opts = parser.parse_args(args)
    if opts.calls <= 0 or opts.runs <= 0:
        parser.error("--calls and --runs must be positive")

    suites = None if opts.suite == "all" else [opts.suite]

    try:
        results = run_all(
            suites,
            calls=opts.calls,
            runs=opts.runs,
            verbose=opts.output == "table",
        )
    except ImportError as e:
        print(f"\nError: Missing dependency - {e}")
        print("Install benchmark dependencies with: pip install -e .[bench]")
        return 1

    if opts.output in FORMATTERS:
        print(FORMATTERS[opts.output](results))

    return 0


if __name__ == "__main__":
    sys.exit(main())
