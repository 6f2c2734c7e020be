# main.py

"""
Command-line entry point for texrand.

Typical usage:

    # First 10 samples of the default generator
    python main.py --mode sample

    # 16-element permutation from the portable generator
    python main.py --mode perm --algorithm portable --seed 7 -n 16

    # Compare all generators over 100k samples and keep the table
    python main.py --mode stats --save stats.csv

This script wires together:
    - config (defaults, output paths),
    - utils.rng.make_rng (generator selection),
    - analysis.uniformity (diagnostics and CSV output),
    - utils.logging_utils (console / file logging).
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from analysis.uniformity import compare_generators, draw_samples, save_table
from config import (
    DEFAULT_ALGORITHM,
    N_SAMPLES_DEFAULT,
    N_SAMPLES_STATS,
    OUTPUT_DIR,
    PERM_BATCH_SIZE,
    RANDOM_SEED,
)
from utils.logging_utils import configure_root_logger, get_logger
from utils.rng import ALGORITHMS, make_rng


logger = get_logger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Deterministic random samples and permutations")

    parser.add_argument(
        "--mode",
        choices=["sample", "perm", "stats"],
        default="sample",
        help="What to produce (default: sample)",
    )

    parser.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default=DEFAULT_ALGORITHM,
        help=f"Generator to use (default from config.py: {DEFAULT_ALGORITHM!r})",
    )

    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=RANDOM_SEED,
        help=f"Seed, decimal or 0x-prefixed hex (default: {RANDOM_SEED})",
    )

    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=None,
        help=f"Samples to draw / permutation length (default: {N_SAMPLES_DEFAULT}; "
             f"{N_SAMPLES_STATS} in stats mode)",
    )

    parser.add_argument(
        "--precision",
        choices=["double", "single"],
        default="double",
        help="Sample buffer precision in sample mode (single = float32)",
    )

    parser.add_argument(
        "--batch-size",
        type=int,
        default=PERM_BATCH_SIZE,
        help=f"Samples drawn per batch while permuting (default: {PERM_BATCH_SIZE})",
    )

    parser.add_argument(
        "--save",
        type=Path,
        default=None,
        help=f"Also write the result as CSV (relative paths go under "
             f"{OUTPUT_DIR.name}/)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level.",
    )

    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write the log to logs/texrand.log.",
    )

    return parser.parse_args(argv)


def _resolve_output(path: Path) -> Path:
    """Relative --save paths land in OUTPUT_DIR."""
    return path if path.is_absolute() else OUTPUT_DIR / path


def _run_sample(args: argparse.Namespace, count: int) -> pd.DataFrame:
    rng = make_rng(args.algorithm, args.seed)
    dtype = np.float32 if args.precision == "single" else np.float64
    samples = draw_samples(rng, count, dtype=dtype)

    for value in samples:
        print(repr(float(value)))

    return pd.DataFrame({"sample": samples}).rename_axis("draw")


def _run_perm(args: argparse.Namespace, count: int) -> pd.DataFrame:
    rng = make_rng(args.algorithm, args.seed)
    order = rng.perm(count, batch_size=args.batch_size)

    print(" ".join(str(int(v)) for v in order))

    return pd.DataFrame({"value": order}).rename_axis("position")


def _run_stats(args: argparse.Namespace, count: int) -> pd.DataFrame:
    table = compare_generators(args.seed, count)
    with pd.option_context("display.float_format", "{:.6f}".format):
        print(table.to_string())
    return table


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)

    configure_root_logger(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_to_file=args.log_file,
    )

    count = args.count
    if count is None:
        count = N_SAMPLES_STATS if args.mode == "stats" else N_SAMPLES_DEFAULT
    if count < 0:
        raise SystemExit(f"--count must be non-negative, got {count}")

    logger.info("Mode: %s, algorithm: %s, seed: %d, count: %d",
                args.mode, args.algorithm, args.seed, count)

    try:
        if args.mode == "sample":
            table = _run_sample(args, count)
        elif args.mode == "perm":
            table = _run_perm(args, count)
        else:
            table = _run_stats(args, count)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if args.save is not None:
        out_path = _resolve_output(args.save)
        save_table(table, out_path)
        logger.info("Saved %s output to %s", args.mode, out_path)


if __name__ == "__main__":
    main()
