import random

from chartcore.random_sequence import RandomSeq, random_values, random_values_with_max
from chartcore.seq import Seq


def test_default_length_is_max_int32():
    assert len(RandomSeq()) == 2147483647


def test_random_values_count_and_bounds():
    values = random_values(50)
    assert len(values) == 50
    assert all(0.0 <= v < 1.0 for v in values)


def test_random_values_with_max_bounds():
    values = random_values_with_max(40, 25.0)
    assert len(values) == 40
    assert all(0.0 <= v < 25.0 for v in values)


def test_min_and_max_bounds():
    seq = RandomSeq(length=100, minimum=10.0, maximum=20.0)
    assert all(10.0 <= v < 20.0 for v in Seq(seq).values())


def test_swapped_bounds_use_absolute_delta():
    seq = RandomSeq(length=100, minimum=20.0, maximum=10.0)
    assert all(20.0 <= v < 30.0 for v in Seq(seq).values())


def test_minimum_only_adds_unit_interval():
    seq = RandomSeq(length=100, minimum=5.0)
    assert all(5.0 <= v < 6.0 for v in Seq(seq).values())


def test_same_seed_gives_same_values():
    a = Seq(RandomSeq(length=10, rng=random.Random(42))).values()
    b = Seq(RandomSeq(length=10, rng=random.Random(42))).values()
    assert a == b
    assert len(set(a)) > 1


def test_empty_length_gives_no_values():
    assert random_values(0) == []