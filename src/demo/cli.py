"""CLI entry point: ``python -m src.demo`` / ``densemat-demo``."""

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from src.demo.config import (
    DEFAULT_ENTRY_HIGH,
    DEFAULT_ENTRY_LOW,
    DEFAULT_SIZE,
    DET_METHODS,
    DemoConfig,
)
from src.demo.runner import run_demo

logger = logging.getLogger("densemat.demo.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="densemat-demo",
        description="Generate random dense matrices and print det, sum and product.",
    )
    parser.add_argument("--rows", type=int, default=DEFAULT_SIZE, help="Row count")
    parser.add_argument("--cols", type=int, default=DEFAULT_SIZE, help="Column count")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for a reproducible run"
    )
    parser.add_argument(
        "--low", type=float, default=DEFAULT_ENTRY_LOW, help="Lower entry bound (inclusive)"
    )
    parser.add_argument(
        "--high", type=float, default=DEFAULT_ENTRY_HIGH, help="Upper entry bound (exclusive)"
    )
    parser.add_argument(
        "--extended",
        action="store_true",
        help="Also print a second matrix, the sum and the product",
    )
    parser.add_argument(
        "--method",
        choices=DET_METHODS,
        default="cofactor",
        help="Determinant algorithm",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = DemoConfig(
            rows=args.rows,
            cols=args.cols,
            low=args.low,
            high=args.high,
            seed=args.seed,
            extended=args.extended,
            method=args.method,
        )
    except ValueError as e:
        logger.error("Invalid arguments: %s", e)
        return 2

    rng = random.Random(config.seed)
    report = run_demo(config, rng, sys.stdout)
    return 0 if report.ok else 2


if __name__ == "__main__":
    sys.exit(main())
