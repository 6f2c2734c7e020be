"""Generator selection through utils.rng."""

import pytest

from config import DEFAULT_ALGORITHM
from generators.multiple_prime import MultiplePrimeRand
from generators.portable import SCALE, PortableRand
from generators.shuffle_table import ShuffleTableRand
from utils.rng import ALGORITHMS, make_rng


def test_registry_lists_all_algorithms():
    assert ALGORITHMS == {
        "shuffle": ShuffleTableRand,
        "multiprime": MultiplePrimeRand,
        "portable": PortableRand,
    }


def test_default_algorithm_is_registered():
    assert isinstance(make_rng(), ALGORITHMS[DEFAULT_ALGORITHM])


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_make_rng_matches_direct_construction(name):
    via_factory = make_rng(name, 314)
    direct = ALGORITHMS[name](314)

    assert [via_factory.eval() for _ in range(10)] == [direct.eval() for _ in range(10)]


def test_make_rng_seeds_instance():
    assert make_rng("portable", 1).eval() == 16807 * SCALE


def test_instances_do_not_share_state():
    a = make_rng("shuffle", 5)
    b = make_rng("shuffle", 5)
    a.eval_batch(100)

    assert b.eval() == make_rng("shuffle", 5).eval()


def test_unknown_algorithm_rejected():
    with pytest.raises(ValueError, match="multiprime"):
        make_rng("mersenne", 1)
