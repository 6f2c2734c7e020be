# generators/portable.py

"""
Portable multiplicative congruential generator.

From "A More Portable Fortran Random Number Generator" by Linus Schrage,
ACM Transactions on Mathematical Software 5(2), June 1979, pp. 132-138.

This is the "minimal standard" generator

    ix <- (16807 * ix) mod (2**31 - 1)

evaluated with Schrage's split of ix into 16-bit halves, so no intermediate
ever needs more than 31 bits. Python ints cannot overflow, but the split is
kept step for step so the output matches the 32-bit reference exactly.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from core_types import PortableState, Sample, Seed
from utils.logging_utils import get_logger
from .base import RandGen


logger = get_logger(__name__)


A3: int = 16807
P3: int = 2147483647  # 2**31 - 1, a Mersenne prime

# Just under 1 / P3, so (P3 - 1) * SCALE < 1.
SCALE: float = 4.656612875e-10


def _step(ix: int) -> int:
    """One (A3 * ix) mod P3 update via Schrage's decomposition."""
    xhi = ix >> 16
    xalo = (ix & 0xFFFF) * A3
    leftlo = xalo >> 16
    fhi = xhi * A3 + leftlo
    k = fhi >> 15
    ix = (((xalo - (leftlo << 16)) - P3) + ((fhi - (k << 15)) << 16)) + k
    if ix < 0:
        ix += P3
    return ix


class PortableRand(RandGen):
    """Schrage's portable 'minimal standard' generator."""

    name = "portable"

    def seed(self, value: Seed) -> None:
        self.state = PortableState(ix=abs(int(value)))
        logger.debug("Seeded %s with %d", self.name, value)

    def eval(self) -> Sample:
        st = self.state
        st.ix = _step(st.ix)
        return st.ix * SCALE

    def _fill(self, n: int, out: MutableSequence[Any]) -> None:
        # _step inlined; this loop is the hot path of random_permutation.
        ix = self.state.ix
        for pos in range(n):
            xhi = ix >> 16
            xalo = (ix & 0xFFFF) * A3
            leftlo = xalo >> 16
            fhi = xhi * A3 + leftlo
            k = fhi >> 15
            ix = (((xalo - (leftlo << 16)) - P3) + ((fhi - (k << 15)) << 16)) + k
            if ix < 0:
                ix += P3
            out[pos] = ix * SCALE
        self.state.ix = ix
