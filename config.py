# config.py

"""
Global configuration for the texrand project.

This module centralizes:
  - filesystem paths (CSV output, logs),
  - the default seed and generator algorithm,
  - permutation batching and diagnostics knobs.

Other modules import their defaults from here, but every function that
uses one also takes it as an argument, so callers never *have* to touch
this file.
"""

from __future__ import annotations

from pathlib import Path


# -------------------------------------------------------------------
# Core paths
# -------------------------------------------------------------------

# Root of the project (directory containing main.py, config.py, etc.)
PROJECT_ROOT: Path = Path(__file__).resolve().parent

# Where the CLI writes CSV tables when --save is given a relative path
OUTPUT_DIR: Path = PROJECT_ROOT / "output"

# Directory for logs (only used when file logging is switched on)
LOGS_DIR: Path = PROJECT_ROOT / "logs"


# -------------------------------------------------------------------
# Generator defaults
# -------------------------------------------------------------------

# Seed used when a generator is built without an explicit one
RANDOM_SEED: int = 1

# One of "shuffle", "multiprime", "portable" (see utils.rng.ALGORITHMS)
DEFAULT_ALGORITHM: str = "shuffle"

# How many samples the permutation engine pulls per eval_batch call.
# Any value >= 1 gives the same permutation; this only trades call
# overhead against buffer size.
PERM_BATCH_SIZE: int = 20


# -------------------------------------------------------------------
# CLI / diagnostics settings
# -------------------------------------------------------------------

# Samples printed by `main.py --mode sample` when -n is not given
N_SAMPLES_DEFAULT: int = 10

# Samples per generator for `main.py --mode stats`
N_SAMPLES_STATS: int = 100000

# Equal-width bins for the chi-square uniformity statistic
N_BINS: int = 10
