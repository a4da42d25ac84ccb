import math

import pytest

from chartcore.logarithmic_range import LogarithmicRange


def _fmt(value):
    return f"{value:.2f}"


def _decades_range(descending=False):
    values = [1, 10, 100, 1000, 10000, 100000, 1000000]
    return LogarithmicRange(minimum=min(values), maximum=max(values), domain=1000, descending=descending)


def test_translate():
    r = _decades_range()
    assert r.translate(0) == 0
    assert r.translate(1) == 0
    assert r.translate(10) == 160
    assert r.translate(1000) == 500
    assert r.translate(1000000) == 1000


def test_translate_descending_mirrors_ascending():
    ascending = _decades_range()
    descending = _decades_range(descending=True)
    for value in (10, 1000, 1000000):
        assert descending.translate(value) == 1000 - ascending.translate(value)
    assert descending.translate(0.5) == 0


def test_translate_requires_delta_above_one():
    r = LogarithmicRange(minimum=5, maximum=5, domain=100)
    with pytest.raises(ValueError):
        r.translate(10)


def test_get_ticks():
    values = [35, 512, 1525122]
    r = LogarithmicRange(minimum=min(values), maximum=max(values), domain=1000)
    ticks = r.get_ticks(_fmt)
    assert len(ticks) == 7
    assert ticks[0][0] == 10
    assert ticks[1][0] == 100
    assert ticks[6][0] == 10000000


def test_get_ticks_from_high():
    values = [1412, 352144, 1525122]
    r = LogarithmicRange(minimum=min(values), maximum=max(values))
    ticks = r.get_ticks(_fmt)
    assert len(ticks) == 5
    assert ticks[0][0] == 1000.0
    assert ticks[1][0] == 10000.0
    assert ticks[4][0] == 10000000.0


def test_get_ticks_labels_come_from_formatter():
    r = LogarithmicRange(minimum=35, maximum=1525122)
    ticks = r.get_ticks(_fmt)
    assert [label for _, label in ticks] == [_fmt(value) for value, _ in ticks]


def test_get_ticks_ascending_powers_of_ten():
    r = LogarithmicRange(minimum=3, maximum=42000)
    values = [value for value, _ in r.get_ticks(_fmt)]
    assert values == sorted(values)
    assert all(math.log10(v).is_integer() for v in values)


def test_is_zero():
    assert LogarithmicRange().is_zero()
    assert LogarithmicRange(minimum=math.nan, maximum=math.nan).is_zero()
    assert not LogarithmicRange(domain=10).is_zero()
    assert not LogarithmicRange(maximum=2).is_zero()


def test_delta():
    assert LogarithmicRange(minimum=2, maximum=10).delta == 8


def test_str():
    assert str(_decades_range()) == "LogarithmicRange [1.00,1000000.00] => 1000"