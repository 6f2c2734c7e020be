# analysis/uniformity.py

"""
Quick statistical checks for the generators.

None of this is needed to *use* a generator; it is tooling for eyeballing
how a given algorithm/seed behaves:

    - summarize_samples:            mean / variance / range / lag-1
                                    correlation / chi-square over bins,
    - compare_generators:           one summary row per algorithm,
    - permutation_position_counts:  how often value v lands at position p.

For a uniform stream the mean is ~0.5, the variance ~1/12, the lag-1
correlation ~0, and the chi-square statistic is around n_bins - 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from config import N_BINS, PERM_BATCH_SIZE
from core_types import Seed
from generators.base import RandGen
from utils.logging_utils import get_logger
from utils.rng import ALGORITHMS, make_rng


logger = get_logger(__name__)


def draw_samples(rng: RandGen, n: int, dtype: Any = np.float64) -> np.ndarray:
    """Pull n samples from `rng` into a fresh array of the given dtype."""
    out = np.empty(max(n, 0), dtype=dtype)
    rng.eval_batch(n, out)
    return out


def _lag1_correlation(x: np.ndarray) -> float:
    """
    Pearson correlation between x[t] and x[t+1].

    Returns 0.0 when there are fewer than two samples or either side is
    constant.
    """
    if x.size < 2:
        return 0.0
    head, tail = x[:-1], x[1:]
    if np.std(head) == 0.0 or np.std(tail) == 0.0:
        return 0.0
    return float(np.corrcoef(head, tail)[0, 1])


def summarize_samples(samples: Sequence[float], n_bins: int = N_BINS) -> Dict[str, float]:
    """
    Summary statistics of a sample stream.

    Args:
        samples:
            Values in [0, 1] (float32 buffers may contain 1.0).
        n_bins:
            Number of equal-width bins on [0, 1] for the chi-square statistic.

    Returns:
        dict with keys: count, mean, variance, min, max, lag1_corr, chi_square.
    """
    x = np.asarray(samples, dtype=np.float64)
    if x.size == 0:
        raise ValueError("Cannot summarize an empty sample stream")
    if n_bins < 1:
        raise ValueError(f"n_bins must be >= 1, got {n_bins}")

    counts, _ = np.histogram(x, bins=n_bins, range=(0.0, 1.0))
    expected = x.size / n_bins
    chi_square = float(((counts - expected) ** 2 / expected).sum())

    return {
        "count": float(x.size),
        "mean": float(np.mean(x)),
        "variance": float(np.var(x)),
        "min": float(np.min(x)),
        "max": float(np.max(x)),
        "lag1_corr": _lag1_correlation(x),
        "chi_square": chi_square,
    }


def compare_generators(
    seed: Seed,
    n_samples: int,
    algorithms: Optional[List[str]] = None,
    n_bins: int = N_BINS,
) -> pd.DataFrame:
    """
    Summarize `n_samples` draws from each algorithm seeded with `seed`.

    Returns:
        DataFrame indexed by algorithm name, one column per summary key.
    """
    names = algorithms if algorithms is not None else list(ALGORITHMS)

    rows = []
    for name in names:
        rng = make_rng(name, seed)
        summary = summarize_samples(draw_samples(rng, n_samples), n_bins=n_bins)
        summary["algorithm"] = name
        rows.append(summary)
        logger.debug("%s: mean=%.6f chi2=%.3f", name, summary["mean"], summary["chi_square"])

    columns = ["algorithm", "count", "mean", "variance", "min", "max", "lag1_corr", "chi_square"]
    return pd.DataFrame(rows, columns=columns).set_index("algorithm")


def permutation_position_counts(
    rng: RandGen,
    length: int,
    n_perms: int,
    batch_size: int = PERM_BATCH_SIZE,
) -> pd.DataFrame:
    """
    Count where each value ends up over `n_perms` permutations.

    Entry [p, v] is the number of permutations with out[p] == v. For a
    uniform shuffle every entry is close to n_perms / length.
    """
    if n_perms < 1:
        raise ValueError(f"n_perms must be >= 1, got {n_perms}")

    size = max(length, 0)
    counts = np.zeros((size, size), dtype=np.int64)
    positions = np.arange(size)
    buf = np.empty(size, dtype=np.int64)

    for _ in range(n_perms):
        rng.perm(length, buf, batch_size=batch_size)
        counts[positions, buf] += 1

    logger.debug("Counted %d permutations of length %d", n_perms, length)

    df = pd.DataFrame(counts, index=positions, columns=positions)
    df.index.name = "position"
    df.columns.name = "value"
    return df


def save_table(df: pd.DataFrame, path: Path) -> None:
    """Write `df` as CSV, creating the parent directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path)
