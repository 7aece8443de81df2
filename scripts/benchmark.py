#!/usr/bin/env python3
"""Benchmark script for shapebind performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from collections.abc import Callable
from pathlib import Path

from shapebind.domain.model.pointer import Opaque, Ptr


class CounterTable:
    add: Callable[[Ptr[Opaque], int], int]
    sub: Callable[[Ptr[Opaque], int], int] | None


class CounterShape:
    ptr: Ptr[Opaque]
    vtable: CounterTable


class Counter:
    def __init__(self, value: int) -> None:
        self.value = value

    def add(self, v: int) -> int:
        return self.value + v


def benchmark_import_time() -> float:
    """Measure import time of shapebind package."""
    start = time.perf_counter()
    import shapebind  # noqa: F401

    return time.perf_counter() - start


def benchmark_uncached_checks() -> float:
    """Measure shape validation and matching without the verdict cache."""
    from shapebind.domain.matcher import match_implementation

    start = time.perf_counter()
    for _ in range(1000):
        match_implementation(CounterShape, Counter)
    return time.perf_counter() - start


def benchmark_bind() -> float:
    """Measure bind with a warm verdict cache."""
    from shapebind.presentation.api import bind

    counter = Counter(1)
    start = time.perf_counter()
    for _ in range(10000):
        bind(CounterShape, Ptr(counter))
    return time.perf_counter() - start


def benchmark_dispatch() -> float:
    """Measure calls through a bound method table."""
    from shapebind.presentation.api import bind

    bound = bind(CounterShape, Ptr(Counter(1)))
    start = time.perf_counter()
    for i in range(100000):
        bound.vtable.add(bound.ptr, i)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run shapebind benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    benchmarks = [
        ("Import Time", benchmark_import_time),
        ("Uncached Checks (1k iterations)", benchmark_uncached_checks),
        ("Cached Bind (10k iterations)", benchmark_bind),
        ("Dispatch (100k calls)", benchmark_dispatch),
    ]
    results = [{"name": name, "unit": "seconds", "value": run()} for name, run in benchmarks]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
