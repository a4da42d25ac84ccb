import pytest

from chartcore.linear_sequence import linear_range
from chartcore.percent_change_series import PercentChangeSeries, Series


class Continuous:
    def __init__(self, xs, ys, name=""):
        self.name = name
        self.style = None
        self.y_axis = None
        self.xs = list(xs)
        self.ys = list(ys)

    def __len__(self):
        return len(self.xs)

    def get_values(self, index):
        return self.xs[index], self.ys[index]

    def get_first_values(self):
        return self.xs[0], self.ys[0]

    def get_last_values(self):
        return self.xs[-1], self.ys[-1]

    def validate(self):
        if len(self.xs) == 0:
            raise ValueError("continuous series must have xvalues set")


def test_percentage_difference_series():
    cs = Continuous(linear_range(1.0, 10.0), linear_range(1.0, 10.0))
    pcs = PercentChangeSeries(name="Test Series", inner_series=cs)

    assert pcs.name == "Test Series"
    assert len(pcs) == 10
    assert pcs.get_values(0) == (1.0, 0)
    assert pcs.get_values(9) == (10.0, 9.0)
    assert pcs.get_last_values() == (10.0, 9.0)


def test_first_values_pass_through():
    cs = Continuous(linear_range(1.0, 10.0), linear_range(1.0, 10.0))
    pcs = PercentChangeSeries(inner_series=cs)
    assert pcs.get_first_values() == (1.0, 1.0)


def test_zero_first_value_gives_zero_change():
    cs = Continuous([1.0, 2.0, 3.0], [0.0, 5.0, 7.0])
    pcs = PercentChangeSeries(inner_series=cs)
    assert [pcs.get_values(i)[1] for i in range(len(pcs))] == [0.0, 0.0, 0.0]


def test_validate_delegates_to_inner_series():
    pcs = PercentChangeSeries(inner_series=Continuous([], []))
    with pytest.raises(ValueError, match="xvalues"):
        pcs.validate()


def test_missing_inner_series_raises():
    pcs = PercentChangeSeries(name="orphan")
    with pytest.raises(ValueError):
        pcs.validate()
    with pytest.raises(ValueError):
        pcs.get_values(0)


def test_satisfies_series_protocol():
    pcs = PercentChangeSeries(
        name="p", inner_series=Continuous(linear_range(1.0, 3.0), linear_range(1.0, 3.0))
    )
    assert isinstance(pcs, Series)
    assert pcs.get_values(2) == (3.0, 2.0)