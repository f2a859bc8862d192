#!/usr/bin/env python3
"""Benchmark script comparing the three filtering access patterns.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from params_filter import ParamsFilter, filter_params, make_matcher

REQUIRED = ["name", "email"]
ACCEPTED = ["phone", "address", "city", "state", "zip"]
EXCLUDED = ["ssn", "license", "card_number"]

RECORD = {
    "name": "BVA",
    "email": "me@here.com",
    "phone": "427-555-9949",
    "city": "Los Angeles",
    "state": "CA",
    "zip": "",
    "surf": "Up",
    "ssn": "111-3245-90",
}


def benchmark_one_shot(iterations: int) -> float:
    """Measure filter_params() with rules passed per call."""
    start = time.perf_counter()
    for _ in range(iterations):
        filter_params(RECORD, REQUIRED, ACCEPTED, EXCLUDED)
    return time.perf_counter() - start


def benchmark_reusable(iterations: int) -> float:
    """Measure ParamsFilter.apply() with stored rules."""
    flt = ParamsFilter({"required": REQUIRED, "accepted": ACCEPTED, "excluded": EXCLUDED})
    start = time.perf_counter()
    for _ in range(iterations):
        flt.apply(RECORD)
    return time.perf_counter() - start


def benchmark_matcher(iterations: int) -> float:
    """Measure precompiled matcher calls."""
    match = make_matcher(REQUIRED, ACCEPTED, EXCLUDED)
    start = time.perf_counter()
    for _ in range(iterations):
        match(RECORD)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run params_filter benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=100_000,
        help="Calls per access pattern",
    )
    args = parser.parse_args()

    benchmarks = [
        ("One-shot filter_params", benchmark_one_shot),
        ("Reusable ParamsFilter.apply", benchmark_reusable),
        ("Precompiled matcher", benchmark_matcher),
    ]
    results = [
        {
            "name": f"{name} ({args.iterations} calls)",
            "unit": "seconds",
            "value": func(args.iterations),
        }
        for name, func in benchmarks
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
