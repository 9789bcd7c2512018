"""Time prime generation across bit sizes and dump the rejection counters.

Shows how many candidates each filter stage discards, which is handy when
tuning the small-prime table or the number of Miller-Rabin rounds.

Example:
    python scripts/bench_generation.py --bits 256 512 1024 --count 5 --kind safe
    MODPRIME_GENERATION_TRIALS=8 python scripts/bench_generation.py --bits 2048
"""
from __future__ import annotations

import argparse
import statistics
import sys
import time
from pathlib import Path

# Ensure the project root is importable when executed directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prometheus_client import REGISTRY, generate_latest

from modprime.generate import random_prime, random_safe_prime
from modprime.random_source import SeededRandomSource


def _bench(kind: str, nbits: int, count: int, seed: int | None) -> list[float]:
    generate = random_safe_prime if kind == "safe" else random_prime
    rng = None if seed is None else SeededRandomSource(seed + nbits)
    timings: list[float] = []
    for _ in range(count):
        t0 = time.perf_counter()
        generate(nbits, rng)
        timings.append((time.perf_counter() - t0) * 1000)
    return timings


def _rejection_lines() -> str:
    text = generate_latest(REGISTRY).decode()
    return "\n".join(
        line for line in text.splitlines() if line.startswith("modprime_") and not line.startswith("#")
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark modprime generators")
    parser.add_argument("--bits", type=int, nargs="+", default=[256, 512, 1024])
    parser.add_argument("--count", type=int, default=3, help="Primes generated per bit size")
    parser.add_argument("--kind", choices=("safe", "prime"), default="prime")
    parser.add_argument("--seed", type=int, default=None, help="Deterministic byte source seed")
    args = parser.parse_args()

    if args.count <= 0:
        parser.error("--count must be positive")

    for nbits in args.bits:
        timings = _bench(args.kind, nbits, args.count, args.seed)
        print(
            f"{args.kind:>5} {nbits:>5} bits: mean={statistics.mean(timings):.1f} ms "
            f"min={min(timings):.1f} ms max={max(timings):.1f} ms"
        )

    print()
    print(_rejection_lines())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
