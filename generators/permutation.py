# generators/permutation.py

"""
Random permutations driven by any generator.

random_permutation() fills a buffer with 0, 1, ..., length-1 and then walks
it from the back, swapping element i with a random element k in [0, i]
(a Fisher-Yates shuffle). The uniform samples come from the generator's
eval_batch in chunks of up to `batch_size`, so a long permutation costs
a handful of batched calls instead of one call per element.

The chunking never changes which sample is used by which step: exactly
length - 1 samples are consumed in order, so the permutation for a given
seed is the same for every batch_size >= 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, MutableSequence, Optional

import numpy as np

from config import PERM_BATCH_SIZE
from utils.logging_utils import get_logger

if TYPE_CHECKING:
    from .base import RandGen


logger = get_logger(__name__)


def random_permutation(
    rng: "RandGen",
    length: int,
    out: Optional[MutableSequence[Any]] = None,
    batch_size: int = PERM_BATCH_SIZE,
) -> MutableSequence[Any]:
    """
    Fill out[0:length] with a random permutation of 0..length-1.

    Args:
        rng:
            Any generator exposing eval_batch(n, out).
        length:
            Size of the permutation. length <= 1 draws no samples.
        out:
            Mutable integer sequence of length >= length. If None an int64
            numpy array is allocated.
        batch_size:
            Maximum samples pulled per eval_batch call (>= 1).

    Returns:
        The buffer holding the permutation.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")

    if out is None:
        out = np.empty(max(length, 0), dtype=np.int64)

    for j in range(length):
        out[j] = j

    # Samples are stored in single precision, like the float buffer of the
    # reference routine; (i + 1) * R is then taken in float32 as well.
    chunk = np.empty(batch_size, dtype=np.float32)
    remaining = length - 1  # samples still to be generated
    available = 0           # samples in the current chunk
    pos = 0                 # next unused sample in the chunk

    for i in range(length - 1, 0, -1):
        if pos == available:
            available = min(remaining, batch_size)
            rng.eval_batch(available, chunk)
            remaining -= available
            pos = 0

        k = int(np.float32(i + 1) * chunk[pos])
        pos += 1

        # k == i is a no-op swap; k == i + 1 can only happen when the
        # sample rounded up to 1.0 and is ignored too.
        if k < i:
            out[i], out[k] = out[k], out[i]

    logger.debug("Built permutation of length %d (batch_size=%d)", length, batch_size)
    return out
