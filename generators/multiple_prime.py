# generators/multiple_prime.py

"""
Multiple-prime random number generator.

From "The Multiple Prime Random Number Generator" by Alexander Haas,
ACM Transactions on Mathematical Software 13(4), December 1987, pp. 368-381.

Three counters m, i, j step through residues of different moduli with
their own periods; each output mixes them into the previous value r:

    r <- ((r * m + i + j) mod 100000) // 10

so r is always in [0, 9999] and the sample is r / 9999 (slightly less).
"""

from __future__ import annotations

from typing import Any, MutableSequence

from core_types import MultiplePrimeState, Sample, Seed
from utils.logging_utils import get_logger
from .base import RandGen


logger = get_logger(__name__)


SCALE: float = 1.00010001e-4


class MultiplePrimeRand(RandGen):
    """Haas' multiple-prime generator."""

    name = "multiprime"

    def seed(self, value: Seed) -> None:
        s = int(value)
        st = MultiplePrimeState(r=abs(s), m=abs(s * 7), i=abs(s * 11), j=abs(s * 13))
        if st.m < 100:
            st.m += 100
        if st.i < 10000:
            st.i += 10000
        if st.j < 128000:
            st.j += 128000
        self.state = st
        logger.debug("Seeded %s with %d", self.name, s)

    def eval(self) -> Sample:
        st = self.state
        st.m += 7
        if st.m >= 9973:
            st.m -= 9871
        st.i += 1907
        if st.i >= 99991:
            st.i -= 89989
        st.j += 73939
        if st.j >= 224729:
            st.j -= 96233
        st.r = ((st.r * st.m + st.i + st.j) % 100000) // 10
        return st.r * SCALE

    def _fill(self, n: int, out: MutableSequence[Any]) -> None:
        st = self.state
        r, m, i, j = st.r, st.m, st.i, st.j
        for k in range(n):
            m += 7
            if m >= 9973:
                m -= 9871
            i += 1907
            if i >= 99991:
                i -= 89989
            j += 73939
            if j >= 224729:
                j -= 96233
            r = ((r * m + i + j) % 100000) // 10
            out[k] = r * SCALE
        st.r, st.m, st.i, st.j = r, m, i, j
