"""Simple micro-benchmark for the day 1 dial simulator.

Run with something like:

    uv run benchmarks/bench_dial.py

This is intentionally minimal and not a rigorous benchmark suite.
"""

from __future__ import annotations

import random
import time

from advent_of_code import Direction, Instruction, solve
from advent_of_code.log import setup_logging

SEED = 42


def random_instructions(n: int) -> list[Instruction]:
    random.seed(SEED)
    return [
        Instruction(random.choice(list(Direction)), random.randint(0, 1000))
        for _ in range(n)
    ]


def bench(label: str, n: int) -> None:
    instructions = random_instructions(n)
    start = time.perf_counter()
    counter = solve(instructions)
    duration = time.perf_counter() - start
    print(
        f"{label:24s} n={n:8d}  {duration:8.4f}s  "
        f"landed={counter.landed_on_zero_count} crossed={counter.crossed_zero_count}"
    )


def main() -> None:
    setup_logging("WARNING")  # silence the per-rotation trace
    for n in (1_000, 100_000):
        bench("ZeroCounter", n)


if __name__ == "__main__":  # pragma: no cover
    main()
