"""Simple micro-benchmark for the closed-form dial simulator vs click-by-click.

Run with something like:

    uv run benchmarks/bench_dial.py

This is intentionally minimal and not a rigorous benchmark suite.
"""

from __future__ import annotations

import time

from advent_of_code.dial import brute_force_simulate, simulate
from advent_of_code.verify_correctness import generate_instructions


def bench(label: str, func, instructions) -> None:
    start = time.perf_counter()
    tallies = func(instructions)
    duration = time.perf_counter() - start
    print(f"{label:24s} n={len(instructions):8d}  {duration:8.4f}s  {tallies}")


def main() -> None:
    n = 100_000
    instructions = generate_instructions(count=n, max_magnitude=1_000)

    bench("Closed form", simulate, instructions)
    bench("Click by click (NumPy)", brute_force_simulate, instructions)


if __name__ == "__main__":  # pragma: no cover
    main()
