import math

import pytest

from game.arena.vector import Vec2


def test_in_place_ops_chain_and_mutate_receiver():
    v = Vec2(1, 2)
    out = v.add(Vec2(3, 4)).scale(2).sub(Vec2(1, 1))
    assert out is v
    assert (v.x, v.y) == (7.0, 11.0)


def test_subtract_returns_new_vector():
    a = Vec2(5, 5)
    b = Vec2(2, 1)
    d = Vec2.subtract(a, b)
    assert (d.x, d.y) == (3.0, 4.0)
    assert d.length() == pytest.approx(5.0)
    assert (a.x, a.y) == (5.0, 5.0)


@pytest.mark.parametrize("x,y", [(3, 4), (-0.001, 0.0), (1e6, -2e6), (0.5, 0.5)])
def test_normalize_gives_unit_length(x, y):
    assert Vec2(x, y).normalize().length() == pytest.approx(1.0)


def test_normalize_zero_vector_stays_zero():
    v = Vec2().normalize()
    assert (v.x, v.y) == (0.0, 0.0)


def test_copy_is_independent():
    a = Vec2(1, 1)
    b = a.copy()
    b.add(Vec2(1, 0))
    assert a == Vec2(1, 1)
    assert b == Vec2(2, 1)


def test_rotated_quarter_turn():
    r = Vec2(1, 0).rotated(math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


def test_dot():
    assert Vec2(1, 2).dot(Vec2(3, -1)) == pytest.approx(1.0)
