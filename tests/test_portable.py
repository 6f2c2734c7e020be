"""Schrage's portable generator against the minimal-standard sequence."""

from generators.portable import A3, P3, SCALE, PortableRand, _step


def test_golden_vector_seed_one():
    g = PortableRand(1)
    got = [g.eval() for _ in range(5)]
    expected = [ix * SCALE for ix in (16807, 282475249, 1622650073, 984943658, 1144108930)]

    assert got == expected
    assert g.state.ix == 1144108930


def test_ten_thousandth_state_from_seed_one():
    # Park & Miller's published check value for the minimal standard
    g = PortableRand(1)
    g.eval_batch(10000)

    assert g.state.ix == 1043618065


def test_schrage_step_matches_direct_modulus():
    for ix in (1, 2, 16807, 65535, 65536, 123456789, P3 - 2, P3 - 1):
        assert _step(ix) == (A3 * ix) % P3


def test_zero_seed_is_a_fixed_point():
    g = PortableRand(0)

    assert [g.eval() for _ in range(3)] == [0.0, 0.0, 0.0]


def test_largest_state_maps_below_one():
    assert (P3 - 1) * SCALE < 1.0
