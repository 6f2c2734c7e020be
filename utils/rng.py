# utils/rng.py

"""
Generator selection.

All three algorithms share the RandGen contract, so callers pick one by
name and never import a concrete class:

    from utils.rng import make_rng

    rng = make_rng("portable", seed=1234)
    x = rng.eval()
    order = rng.perm(16)

The same (algorithm, seed) pair always yields the same stream.
"""

from __future__ import annotations

from typing import Dict, Type

from config import DEFAULT_ALGORITHM, RANDOM_SEED
from core_types import Seed
from generators.base import RandGen
from generators.multiple_prime import MultiplePrimeRand
from generators.portable import PortableRand
from generators.shuffle_table import ShuffleTableRand
from utils.logging_utils import get_logger


logger = get_logger(__name__)


ALGORITHMS: Dict[str, Type[RandGen]] = {
    cls.name: cls for cls in (ShuffleTableRand, MultiplePrimeRand, PortableRand)
}


def make_rng(algorithm: str = DEFAULT_ALGORITHM, seed: Seed = RANDOM_SEED) -> RandGen:
    """
    Create a freshly seeded generator.

    Args:
        algorithm:
            Registry name: "shuffle", "multiprime" or "portable".
        seed:
            Any integer; negative values behave like their absolute value.

    Returns:
        A RandGen instance owned by the caller.
    """
    try:
        cls = ALGORITHMS[algorithm]
    except KeyError:
        choices = ", ".join(sorted(ALGORITHMS))
        raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of: {choices}") from None

    logger.debug("Creating %s generator with seed %d", algorithm, int(seed))
    return cls(int(seed))
