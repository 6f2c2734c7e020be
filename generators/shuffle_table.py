# generators/shuffle_table.py

"""
Shuffled-table linear congruential generator.

From "Numerical Recipes" (Press, Flannery, Teukolsky, Vetterling), p. 197.

A plain LCG

    seed <- (IA * seed + IC) mod M1

has strong serial correlation. Here its outputs are parked in a 97-slot
table; each call reads the slot picked by the *previous* output and refills
that slot with the next LCG value, which breaks the correlation up.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from core_types import SHUFFLE_TABLE_SIZE, Sample, Seed, ShuffleTableState
from utils.logging_utils import get_logger
from .base import RandGen


logger = get_logger(__name__)


M1: int = 714025
IA: int = 1366
IC: int = 150889

# Slightly above 1 / M1, but (M1 - 1) * RM is still < 1.
RM: float = 1.400512e-6


def _slot(index: int) -> int:
    """Map the last output to a 0-based table slot (1..97 in the reference)."""
    offset = 1 + (SHUFFLE_TABLE_SIZE * index) // M1
    if offset > SHUFFLE_TABLE_SIZE:
        offset = SHUFFLE_TABLE_SIZE
    if offset < 1:
        offset = 1
    return offset - 1


class ShuffleTableRand(RandGen):
    """Numerical Recipes LCG with a 97-entry shuffle table."""

    name = "shuffle"

    def seed(self, value: Seed) -> None:
        t = (IC + abs(int(value)) + 1) % M1
        shuffle = []
        for _ in range(SHUFFLE_TABLE_SIZE):
            t = (IA * t + IC) % M1
            shuffle.append(abs(t))
        t = (IA * t + IC) % M1
        self.state = ShuffleTableState(shuffle=shuffle, seed=abs(t), index=abs(t))
        logger.debug("Seeded %s with %d", self.name, value)

    def eval(self) -> Sample:
        st = self.state
        slot = _slot(st.index)
        st.index = st.shuffle[slot]
        st.seed = (IA * st.seed + IC) % M1
        st.shuffle[slot] = st.seed
        return st.index * RM

    def _fill(self, n: int, out: MutableSequence[Any]) -> None:
        st = self.state
        shuffle = st.shuffle
        seed = st.seed
        index = st.index
        for k in range(n):
            slot = _slot(index)
            index = shuffle[slot]
            seed = (IA * seed + IC) % M1
            shuffle[slot] = seed
            out[k] = index * RM
        st.seed = seed
        st.index = index
