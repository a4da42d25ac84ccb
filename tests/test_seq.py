import math

import pytest

from chartcore.seq import Seq, value_sequence


def test_each_passes_index_and_value():
    seen = []
    Seq([1, 2, 3, 4]).each(lambda i, v: seen.append((i, v)))
    assert seen == [(0, 1.0), (1, 2.0), (2, 3.0), (3, 4.0)]
    assert all(i == v - 1 for i, v in seen)


def test_map_keeps_length_and_applies_function():
    indices = []

    def double(i, v):
        indices.append(i == v - 1)
        return v * 2

    mapped = Seq([1, 2, 3, 4]).map(double)
    assert len(mapped) == 4
    assert all(indices)
    assert mapped.values() == [2.0, 4.0, 6.0, 8.0]


def test_fold_left():
    assert Seq([1, 2, 3, 4]).fold_left(lambda _, vp, v: vp + v) == 10
    assert Seq([10, 3, 2, 1]).fold_left(lambda _, vp, v: vp - v) == 4


def test_fold_right():
    assert Seq([1, 2, 3, 4]).fold_right(lambda _, vp, v: vp + v) == 10
    assert Seq([10, 3, 2, 1]).fold_right(lambda _, vp, v: vp - v) == -14


def test_folds_of_empty_and_single():
    assert Seq([]).fold_left(lambda _, a, b: a + b) == 0
    assert Seq([7]).fold_right(lambda _, a, b: a + b) == 7


def test_sum():
    assert Seq([1, 2, 3, 4]).sum() == 10


def test_average():
    assert Seq([1, 2, 3, 4]).average() == 2.5
    assert Seq([1, 2, 3, 4, 5]).average() == 3


def test_variance():
    assert Seq([1, 2, 3, 4, 5]).variance() == 2


def test_std_dev_is_root_of_variance():
    values = Seq([1, 2, 3, 4, 5])
    assert values.std_dev() == pytest.approx(math.sqrt(2))


def test_normalize():
    normalized = value_sequence(1, 2, 3, 4, 5).normalize().values()
    assert len(normalized) == 5
    assert normalized[0] == 0
    assert normalized[1] == 0.25
    assert normalized[4] == 1


def test_normalize_constant_values_is_nan():
    normalized = Seq([3, 3, 3]).normalize().values()
    assert [str(v) for v in normalized] == ["nan", "nan", "nan"]


def test_min_max():
    s = Seq([4, -2, 9, 1])
    assert s.min() == -2
    assert s.max() == 9
    assert s.min_max() == (-2, 9)


def test_empty_aggregates_are_zero():
    empty = Seq([])
    assert empty.min() == 0
    assert empty.max() == 0
    assert empty.min_max() == (0, 0)
    assert empty.average() == 0
    assert empty.variance() == 0
    assert empty.median() == 0
    assert empty.values() == []


def test_sort_and_reverse():
    s = Seq([3, 1, 2])
    assert s.sort().values() == [1.0, 2.0, 3.0]
    assert s.reverse().values() == [2.0, 1.0, 3.0]
    assert s.values() == [3.0, 1.0, 2.0]


def test_median():
    assert Seq([5, 1, 3]).median() == 3
    assert Seq([4, 1, 3, 2]).median() == 2.5


def test_percentile():
    s = Seq(range(1, 11))
    assert s.percentile(0.5) == 5.5
    assert s.percentile(0.25) == 4


def test_percentile_out_of_range_raises():
    with pytest.raises(ValueError):
        Seq([1, 2, 3]).percentile(1.5)


def test_percentile_zero_has_no_lower_neighbour():
    with pytest.raises(IndexError):
        Seq([1, 2, 3]).percentile(0.0)


def test_get_value_out_of_range_raises():
    with pytest.raises(IndexError):
        Seq([1, 2]).get_value(-1)