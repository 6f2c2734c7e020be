# generators/base.py

"""
Common contract shared by every generator algorithm.

A generator is seeded with an integer and then driven by either

    - eval():              one sample in [0, 1), or
    - eval_batch(n, out):  n consecutive samples written into out[0:n].

Both paths advance the same state, so for a given seed

    [g.eval() for _ in range(n)]

and

    g.eval_batch(n, buf)

produce the same values (bit for bit, once stored into the same kind of
buffer). Random permutations of 0..n-1 are built on top of eval_batch by
generators.permutation and exposed here as perm().

Instances carry private mutable state and no locking. Use one instance per
thread, or guard a shared one yourself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, MutableSequence, Optional

import numpy as np

from config import PERM_BATCH_SIZE, RANDOM_SEED
from core_types import Sample, Seed
from .permutation import random_permutation


class RandGen(ABC):
    """
    Base class for the interchangeable pseudo-random generators.

    Subclasses implement seed(), eval() and _fill(); the public batched
    entry point handles the optional output allocation.
    """

    # Registry key used by utils.rng.make_rng
    name: str = ""

    def __init__(self, seed: Seed = RANDOM_SEED) -> None:
        self.seed(seed)

    @abstractmethod
    def seed(self, value: Seed) -> None:
        """Reinitialize all state from `value`. Any integer is accepted."""

    @abstractmethod
    def eval(self) -> Sample:
        """Return one sample in [0, 1) and advance the state by one step."""

    @abstractmethod
    def _fill(self, n: int, out: MutableSequence[Any]) -> None:
        """Write n (> 0) samples into out[0:n]."""

    def eval_batch(
        self,
        n: int,
        out: Optional[MutableSequence[Any]] = None,
    ) -> MutableSequence[Any]:
        """
        Write n consecutive samples into out[0:n] and return out.

        Args:
            n:
                Number of samples. n <= 0 leaves the state untouched.
            out:
                Any mutable sequence of length >= n (list, numpy array).
                A numpy float32 buffer stores single-precision samples.
                If None, a float64 array of length max(n, 0) is allocated.

        Returns:
            The buffer that was written.
        """
        if out is None:
            out = np.empty(max(n, 0), dtype=np.float64)
        if n > 0:
            self._fill(n, out)
        return out

    def perm(
        self,
        length: int,
        out: Optional[MutableSequence[Any]] = None,
        batch_size: int = PERM_BATCH_SIZE,
    ) -> MutableSequence[Any]:
        """Fill out[0:length] with a random permutation of 0..length-1."""
        return random_permutation(self, length, out=out, batch_size=batch_size)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self.state!r})"
