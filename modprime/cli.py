"""Command-line driver: generate one prime, time it, print it in decimal.

Example:
    modprime --bits 2048 --kind safe
    python -m modprime --bits 512 --kind prime --seed 7
"""
from __future__ import annotations

import argparse
import sys
import time
import uuid
from typing import Sequence

from .config import settings
from .generate import random_prime, random_safe_prime
from .logging_utils import configure_logging, get_logger, log_context
from .primality import is_prime
from .random_source import RandomSource, SeededRandomSource


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modprime", description=__doc__.splitlines()[0])
    parser.add_argument(
        "--bits",
        type=int,
        default=settings.default_bits,
        help=f"Bit length of the generated prime (default {settings.default_bits})",
    )
    parser.add_argument(
        "--kind",
        choices=("safe", "prime"),
        default="safe",
        help="'safe' for p = 2q + 1 with q prime, 'prime' for any prime",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Use a deterministic byte source (reproducible, NOT secure)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level, json_output=settings.log_json, stream=sys.stderr)

    rng: RandomSource | None = None if args.seed is None else SeededRandomSource(args.seed)
    generate = random_safe_prime if args.kind == "safe" else random_prime

    with log_context(run_id=uuid.uuid4().hex, kind=args.kind, nbits=args.bits):
        log = get_logger(__name__)
        if args.seed is not None:
            log.warning("Using a seeded byte source; output is reproducible and unsuitable for keys")

        begin = time.perf_counter()
        try:
            p = generate(args.bits, rng)
        except ValueError as exc:
            log.error("Generation refused", extra={"error": str(exc)})
            print(f"error: {exc}", file=sys.stderr)
            return 2
        elapsed_ms = (time.perf_counter() - begin) * 1000

        if args.kind == "safe" and not is_prime(p >> 1, rng=rng):
            log.error("Sophie Germain half failed verification")
            return 1

        log.info("Generated prime", extra={"elapsed_ms": round(elapsed_ms, 3)})
        print(f"Prime = {p}")
        print(f"Time = {int(elapsed_ms)} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
