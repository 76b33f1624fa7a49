import math

import numpy as np
import pytest

from tests.fixtures.fixture_engines import patterns


@pytest.mark.parametrize("m", [1, 2, 3, 7, 8, 16, 33, 100])
def test_select_many(engine, rng, m):
    values = rng.random(200)
    ranks = np.sort(rng.choice(values.size, size=m, replace=False)).astype(np.intp)
    A = values.copy()
    out = np.empty(m)
    peak = engine.select_many(A, ranks, out)

    expected = np.sort(values)[ranks]
    assert np.array_equal(out, expected)
    assert np.array_equal(A[ranks], expected)
    assert np.array_equal(np.sort(A), np.sort(values))
    assert 1 <= peak <= math.floor(math.log2(m)) + 1


def test_select_many_equals_select(engine):
    ranks = np.array([0, 10, 49, 50, 98, 99], dtype=np.intp)
    for values in patterns(100).values():
        A = values.copy()
        out = np.empty(ranks.size)
        engine.select_many(A, ranks, out)
        for rank, value in zip(ranks, out):
            B = values.copy()
            assert value == engine.select(B, rank, 0, B.size)


def test_select_many_partitions_around_ranks(engine, rng):
    values = rng.random(100)
    ranks = np.array([20, 40, 60, 80], dtype=np.intp)
    A = values.copy()
    out = np.empty(ranks.size)
    engine.select_many(A, ranks, out)
    for k in ranks:
        assert (A[:k] <= A[k]).all()
        assert (A[k + 1 :] >= A[k]).all()


def test_select_many_all_ranks(engine, rng):
    values = rng.random(64)
    ranks = np.arange(64, dtype=np.intp)
    A = values.copy()
    out = np.empty(64)
    peak = engine.select_many(A, ranks, out)
    assert np.array_equal(out, np.sort(values))
    # With every rank selected, the array is sorted.
    assert np.array_equal(A, np.sort(values))
    assert peak <= 7


def test_select_many_empty(engine):
    A = np.array([3.0, 1.0, 2.0])
    ranks = np.array([], dtype=np.intp)
    out = np.empty(0)
    assert engine.select_many(A, ranks, out) == 0
    assert np.array_equal(A, [3.0, 1.0, 2.0])


def test_select_many_lanes(engine, rng):
    lanes = rng.random((5, 30))
    values = lanes.copy()
    ranks = np.array([0, 14, 29], dtype=np.intp)
    out = np.empty((5, 3))
    peak = engine.select_many_lanes(lanes, ranks, out)
    expected = np.sort(values, axis=1)[:, ranks]
    assert np.array_equal(out, expected)
    assert peak == 2
