# core_types.py

"""
Shared type definitions and generator state records for texrand.

This module is intentionally small and dependency-free so it can be imported
from anywhere (generators/, utils/, analysis/, etc.) without risk of
circular imports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


# ---------- Basic aliases ----------

# Any integer; generators take the absolute value where they need to.
Seed = int

# A float in [0, 1).
Sample = float

# Number of slots in the shuffle table of the shuffled-table generator.
SHUFFLE_TABLE_SIZE: int = 97


# ---------- Generator state ----------


@dataclass
class ShuffleTableState:
    """
    Mutable state of the shuffled-table LCG.

    The reference table is 1-based (slots 1..97); here slot k lives at
    shuffle[k - 1]. Every stored value is in [0, 714025).
    """

    shuffle: List[int] = field(default_factory=lambda: [0] * SHUFFLE_TABLE_SIZE)

    # Running LCG value used to refill the slot that was just read
    seed: int = 0

    # Last value read from the table; picks the next slot
    index: int = 0


@dataclass
class MultiplePrimeState:
    """
    Mutable state of the multiple-prime generator.

    After seeding: m >= 100, i >= 10000, j >= 128000.
    """

    r: int = 0
    m: int = 0
    i: int = 0
    j: int = 0


@dataclass
class PortableState:
    """
    Mutable state of the portable (Schrage) multiplicative generator.

    ix stays in [0, 2**31 - 1) once seeded with |seed| < 2**31.
    """

    ix: int = 0
