"""Permutation engine: validity, determinism, batching and boundary behaviour."""

from typing import Any, MutableSequence

import numpy as np
import pytest

from generators.base import RandGen
from generators.multiple_prime import MultiplePrimeRand
from generators.permutation import random_permutation
from generators.portable import PortableRand
from generators.shuffle_table import ShuffleTableRand


GENERATORS = [ShuffleTableRand, MultiplePrimeRand, PortableRand]


class ConstantRand(RandGen):
    """Always returns the same value; counts how many samples were drawn."""

    name = "constant"

    def __init__(self, value: float) -> None:
        self.value = value
        self.draws = 0
        super().__init__(0)

    def seed(self, value: int) -> None:
        self.state = self.value

    def eval(self) -> float:
        self.draws += 1
        return self.value

    def _fill(self, n: int, out: MutableSequence[Any]) -> None:
        for k in range(n):
            out[k] = self.value
        self.draws += n


def _reference_perm(rng, length):
    """One sample per step, no batching."""
    out = list(range(length))
    for i in range(length - 1, 0, -1):
        k = int(np.float32(i + 1) * np.float32(rng.eval()))
        if k < i:
            out[i], out[k] = out[k], out[i]
    return out


def test_golden_permutation_multiprime_seed_one():
    assert list(MultiplePrimeRand(1).perm(5)) == [4, 1, 3, 2, 0]


@pytest.mark.parametrize("cls", GENERATORS)
@pytest.mark.parametrize("length", [0, 1, 2, 3, 20, 21, 41, 100])
def test_permutation_is_a_bijection(cls, length):
    out = cls(8).perm(length)

    assert sorted(int(v) for v in out) == list(range(length))


@pytest.mark.parametrize("cls", GENERATORS)
def test_permutation_is_deterministic(cls):
    a = cls(555).perm(64)
    b = cls(555).perm(64)

    assert np.array_equal(a, b)


@pytest.mark.parametrize("cls", GENERATORS)
@pytest.mark.parametrize("batch_size", [1, 2, 7, 20, 1000])
def test_batch_size_does_not_change_permutation(cls, batch_size):
    baseline = cls(4321).perm(57, batch_size=20)
    other = cls(4321).perm(57, batch_size=batch_size)

    assert np.array_equal(baseline, other)


@pytest.mark.parametrize("cls", GENERATORS)
def test_matches_unbatched_reference(cls):
    got = cls(17).perm(33)

    assert list(got) == _reference_perm(cls(17), 33)


@pytest.mark.parametrize("cls", GENERATORS)
def test_consumes_exactly_length_minus_one_samples(cls):
    g = cls(9)
    g.perm(25)

    fresh = cls(9)
    fresh.eval_batch(24)

    assert g.eval() == fresh.eval()


@pytest.mark.parametrize("length", [0, 1])
def test_trivial_lengths_draw_nothing(length):
    rng = ConstantRand(0.5)
    out = random_permutation(rng, length)

    assert list(out) == list(range(length))
    assert rng.draws == 0


def test_negative_length_leaves_buffer_alone():
    rng = ConstantRand(0.5)
    buf = [7, 7, 7]

    random_permutation(rng, -4, out=buf)

    assert buf == [7, 7, 7]
    assert rng.draws == 0


def test_writes_into_caller_buffer_prefix():
    buf = [-1] * 6
    result = PortableRand(3).perm(4, out=buf)

    assert result is buf
    assert sorted(buf[:4]) == [0, 1, 2, 3]
    assert buf[4:] == [-1, -1]


def test_zero_samples_rotate_through_front():
    rng = ConstantRand(0.0)

    assert list(random_permutation(rng, 4)) == [1, 2, 3, 0]
    assert rng.draws == 3


def test_sample_of_one_is_ignored():
    # k == i + 1 must never swap
    rng = ConstantRand(1.0)

    assert list(random_permutation(rng, 6)) == [0, 1, 2, 3, 4, 5]


def test_batch_size_must_be_positive():
    with pytest.raises(ValueError):
        random_permutation(ConstantRand(0.5), 5, batch_size=0)
