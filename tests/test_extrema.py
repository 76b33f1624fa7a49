import numpy as np
import pytest

import ordstats
from ordstats.errors import EmptyInputError, UndefinedOrderError


def test_argmin_argmax():
    a = np.array([3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 9.0])
    assert ordstats.argmin(a) == 1
    assert ordstats.argmax(a) == 5
    assert ordstats.min(a) == 1.0
    assert ordstats.max(a) == 9.0
    # Nothing is reordered.
    assert np.array_equal(a, [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 9.0])


def test_skipnan():
    a = np.array([np.nan, 5.0, np.nan, -1.0, 7.0])
    assert ordstats.argmin_skipnan(a) == 3
    assert ordstats.argmax_skipnan(a) == 4
    assert ordstats.min_skipnan(a) == -1.0
    assert ordstats.max_skipnan(a) == 7.0


def test_skipnan_infinity():
    a = np.array([np.nan, np.inf, -np.inf])
    assert ordstats.argmin_skipnan(a) == 2
    assert ordstats.argmax_skipnan(a) == 1


def test_strict_nan_raises():
    a = np.array([1.0, np.nan])
    with pytest.raises(UndefinedOrderError, match="argmin_skipnan"):
        ordstats.argmin(a)
    with pytest.raises(UndefinedOrderError, match="argmax_skipnan"):
        ordstats.argmax(a)
    with pytest.raises(UndefinedOrderError):
        ordstats.min(a)


def test_all_nan_raises():
    a = np.array([np.nan, np.nan])
    with pytest.raises(EmptyInputError, match="no orderable values"):
        ordstats.argmin_skipnan(a)
    with pytest.raises(EmptyInputError):
        ordstats.max_skipnan(a)


def test_empty_raises():
    with pytest.raises(EmptyInputError, match="empty array"):
        ordstats.argmin(np.array([]))
    with pytest.raises(EmptyInputError):
        ordstats.max_skipnan([])


def test_array_like():
    assert ordstats.argmax([1, 3, 2]) == 1
    assert ordstats.min([4, 2, 8]) == 2


def test_scalar():
    assert ordstats.min(np.array(3.0)) == 3.0
    assert ordstats.argmin(np.array(3.0)) == 0


def test_nd_without_axis():
    a = np.array([[4.0, 2.0], [1.0, 3.0]])
    assert ordstats.argmin(a) == (1, 0)
    assert ordstats.argmax(a) == (0, 0)
    assert ordstats.min(a) == 1.0
    assert ordstats.max(a) == 4.0


def test_axis():
    a = np.array(
        [
            [4.0, np.nan, 1.0],
            [2.0, 6.0, np.nan],
        ]
    )
    assert np.array_equal(ordstats.argmin_skipnan(a, axis=1), [2, 0])
    assert np.array_equal(ordstats.argmax_skipnan(a, axis=1), [0, 1])
    assert np.array_equal(ordstats.argmin_skipnan(a, axis=0), [1, 1, 0])
    assert np.array_equal(ordstats.min_skipnan(a, axis=1), [1.0, 2.0])
    assert np.array_equal(ordstats.max_skipnan(a, axis=0), [4.0, 6.0, 1.0])


def test_axis_all_nan_lane():
    a = np.array([[1.0, 2.0], [np.nan, np.nan]])
    with pytest.raises(EmptyInputError, match="along axis 1"):
        ordstats.argmin_skipnan(a, axis=1)


def test_axis_matches_numpy(rng):
    a = rng.random((3, 4, 5))
    for axis in range(3):
        assert np.array_equal(ordstats.argmin(a, axis=axis), np.argmin(a, axis=axis))
        assert np.array_equal(ordstats.argmax(a, axis=axis), np.argmax(a, axis=axis))
        assert np.array_equal(ordstats.min(a, axis=axis), np.min(a, axis=axis))
        assert np.array_equal(ordstats.max(a, axis=axis), np.max(a, axis=axis))


def test_first_occurrence_wins():
    a = np.array([2, 1, 1, 3, 3])
    assert ordstats.argmin(a) == 1
    assert ordstats.argmax(a) == 3


def test_strings_and_datetimes():
    a = np.array(["kiwi", "apple", "pear"])
    assert ordstats.argmin(a) == 1
    assert ordstats.max(a) == "pear"
    t = np.array(["2000-01-02", "NaT", "2000-01-01"], dtype="datetime64[D]")
    assert ordstats.argmin_skipnan(t) == 2
    assert ordstats.max_skipnan(t) == np.datetime64("2000-01-02")
    with pytest.raises(UndefinedOrderError):
        ordstats.argmin(t)


def test_argmin_skipnan_example():
    a = np.array([3.0, np.nan, 1.0])
    assert ordstats.argmin_skipnan(a) == 2
    assert ordstats.argmax_skipnan(a) == 0
