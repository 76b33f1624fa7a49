import numpy as np
import pytest

from ordstats import interpolate


@pytest.mark.parametrize(
    "q, n, lower, higher, fraction",
    [
        (0.0, 5, 0, 0, 0.0),
        (1.0, 5, 4, 4, 0.0),
        (0.5, 5, 2, 2, 0.0),
        (0.5, 4, 1, 2, 0.5),
        (0.25, 4, 0, 1, 0.75),
        (0.1, 1, 0, 0, 0.0),
    ],
)
def test_ranks(q, n, lower, higher, fraction):
    assert interpolate.lower_rank(q, n) == lower
    assert interpolate.higher_rank(q, n) == higher
    assert np.isclose(interpolate.fraction(q, n), fraction)


def test_lerp():
    assert interpolate.lerp(1.0, 3.0, 0.0) == 1.0
    assert interpolate.lerp(1.0, 3.0, 1.0) == 3.0
    assert interpolate.lerp(1.0, 3.0, 0.25) == 1.5
    assert interpolate.lerp(1.0, 3.0, 0.75) == 2.5


def test_lerp_formula(rng):
    a = rng.random(1000)
    b = a + rng.random(1000)
    t = 0.3
    assert np.array_equal(interpolate.lerp(a, b, t), a + t * (b - a))


def test_lerp_monotonic():
    t = np.linspace(0.0, 1.0, 101)
    values = [interpolate.lerp(0.1, 0.7, ti) for ti in t]
    assert (np.diff(values) >= 0.0).all()


def test_lerp_arrays():
    a = np.array([0.0, 1.0, -2.0])
    b = np.array([2.0, 1.0, 2.0])
    actual = interpolate.lerp(a, b, 0.5)
    assert np.array_equal(actual, [1.0, 1.0, 0.0])


def test_midpoint(rng):
    assert interpolate.midpoint(1.0, 2.0) == 1.5
    assert interpolate.midpoint(np.inf, np.inf) == np.inf
    actual = interpolate.midpoint(np.array([0.0, 2.0]), np.array([1.0, 2.0]))
    assert np.array_equal(actual, [0.5, 2.0])
    a = rng.random(1000)
    b = rng.random(1000)
    assert np.array_equal(interpolate.midpoint(a, b), (a + b) / 2)


def value_at_factory(values):
    def value_at(rank):
        return values[rank]

    return value_at


@pytest.mark.parametrize(
    "method, expected",
    [
        ("lower", 20.0),
        ("higher", 30.0),
        ("nearest", 30.0),
        ("linear", 25.0),
        ("midpoint", 25.0),
    ],
)
def test_combine_halfway(method, expected):
    values = np.array([10.0, 20.0, 30.0, 40.0])
    interpolation = interpolate.get_interpolation(method)
    value_at = value_at_factory(values)
    assert interpolation.combine(value_at, 0.5, 4) == expected


@pytest.mark.parametrize("method", interpolate.INTERPOLATION_METHODS.keys())
def test_combine_bounds(method):
    values = np.array([10.0, 20.0, 30.0, 40.0])
    interpolation = interpolate.get_interpolation(method)
    value_at = value_at_factory(values)
    assert interpolation.combine(value_at, 0.0, 4) == 10.0
    assert interpolation.combine(value_at, 1.0, 4) == 40.0
    assert set(interpolation.ranks(0.0, 4)) == {0}
    assert set(interpolation.ranks(1.0, 4)) == {3}


def test_nearest():
    interpolation = interpolate.get_interpolation("nearest")
    assert interpolation.ranks(0.3, 4) == (1,)
    assert interpolation.ranks(0.2, 4) == (1,)
    assert interpolation.ranks(0.1, 4) == (0,)


def test_arithmetic():
    assert not interpolate.get_interpolation("lower").arithmetic
    assert not interpolate.get_interpolation("higher").arithmetic
    assert not interpolate.get_interpolation("nearest").arithmetic
    assert interpolate.get_interpolation("linear").arithmetic
    assert interpolate.get_interpolation("midpoint").arithmetic


def test_get_interpolation_errors():
    with pytest.raises(TypeError, match="method must be a string"):
        interpolate.get_interpolation(1)
    with pytest.raises(ValueError, match="Invalid interpolation method: cubic"):
        interpolate.get_interpolation("cubic")
