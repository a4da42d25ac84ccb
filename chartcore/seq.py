"""A wrapper over value providers with common aggregate operations."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Iterator, Protocol, runtime_checkable

from chartcore.mathutil import round_places


@runtime_checkable
class Sequence(Protocol):
    """Anything with a length that yields a value per index."""

    def __len__(self) -> int: ...

    def get_value(self, index: int) -> float: ...


class _ArraySource:
    """A fixed list of values exposed as a sequence."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(v) for v in values]

    def __len__(self) -> int:
        return len(self._values)

    def get_value(self, index: int) -> float:
        if index < 0 or index >= len(self._values):
            raise IndexError(f"index {index} out of range")
        return self._values[index]


def _f64i(value: float) -> int:
    return int(round_places(value, 0))


class Seq:
    """Aggregate operations over a value provider or a plain list of numbers."""

    __slots__ = ("_provider",)

    def __init__(self, provider: Sequence | Iterable[float]) -> None:
        if isinstance(provider, Seq):
            provider = provider._provider
        elif not isinstance(provider, Sequence):
            provider = _ArraySource(provider)
        self._provider = provider

    def __len__(self) -> int:
        return len(self._provider)

    def __iter__(self) -> Iterator[float]:
        for index in range(len(self)):
            yield self.get_value(index)

    def __repr__(self) -> str:
        return f"Seq({self.values()!r})"

    def get_value(self, index: int) -> float:
        return self._provider.get_value(index)

    def values(self) -> list[float]:
        """All values as a list."""
        return list(self)

    def each(self, fn: Callable[[int, float], None]) -> None:
        """Call ``fn(index, value)`` for every value."""
        for index, value in enumerate(self):
            fn(index, value)

    def map(self, fn: Callable[[int, float], float]) -> "Seq":
        """A new sequence of ``fn(index, value)`` results."""
        return Seq([fn(index, value) for index, value in enumerate(self)])

    def fold_left(self, fn: Callable[[int, float, float], float]) -> float:
        """Collapse left to right with ``fn(index, accumulated, value)``."""
        length = len(self)
        if length == 0:
            return 0.0
        acc = self.get_value(0)
        for index in range(1, length):
            acc = fn(index, acc, self.get_value(index))
        return acc

    def fold_right(self, fn: Callable[[int, float, float], float]) -> float:
        """Collapse right to left with ``fn(index, accumulated, value)``."""
        length = len(self)
        if length == 0:
            return 0.0
        acc = self.get_value(length - 1)
        for index in range(length - 2, -1, -1):
            acc = fn(index, acc, self.get_value(index))
        return acc

    def min(self) -> float:
        """Smallest value, or zero when empty."""
        return min(self, default=0.0)

    def max(self) -> float:
        """Largest value, or zero when empty."""
        return max(self, default=0.0)

    def min_max(self) -> tuple[float, float]:
        """(smallest, largest) in one pass, or (0, 0) when empty."""
        values = self.values()
        if not values:
            return 0.0, 0.0
        return min(values), max(values)

    def sort(self) -> "Seq":
        """A new sequence sorted ascending."""
        if len(self) == 0:
            return self
        return Seq(sorted(self.values()))

    def reverse(self) -> "Seq":
        """A new sequence in reverse order."""
        if len(self) == 0:
            return self
        return Seq(self.values()[::-1])

    def median(self) -> float:
        """The middle value of the sorted sequence, or zero when empty."""
        ordered = sorted(self.values())
        length = len(ordered)
        if length == 0:
            return 0.0
        half = length // 2
        if length % 2 == 0:
            return (ordered[half - 1] + ordered[half]) / 2
        return ordered[half]

    def sum(self) -> float:
        total = 0.0
        for value in self:
            total += value
        return total

    def average(self) -> float:
        """Arithmetic mean, or zero when empty."""
        length = len(self)
        if length == 0:
            return 0.0
        return self.sum() / length

    def variance(self) -> float:
        """Population variance, or zero when empty."""
        length = len(self)
        if length == 0:
            return 0.0
        m = self.average()
        total = 0.0
        for value in self:
            total += (value - m) * (value - m)
        return total / length

    def std_dev(self) -> float:
        """Population standard deviation, or zero when empty."""
        if len(self) == 0:
            return 0.0
        return math.pow(self.variance(), 0.5)

    def percentile(self, percent: float) -> float:
        """Relative standing for ``percent`` in the interval [0, 1]."""
        length = len(self)
        if length == 0:
            return 0.0
        if percent < 0 or percent > 1.0:
            raise ValueError("percent out of range [0.0, 1.0)")
        ordered = self.sort()
        index = percent * length
        i = _f64i(index)
        if index == float(int(index)):
            return (ordered.get_value(i - 1) + ordered.get_value(i)) / 2.0
        return ordered.get_value(i)

    def normalize(self) -> "Seq":
        """Map every value onto the interval [0, 1]."""
        low, high = self.min_max()
        delta = high - low
        if delta == 0:
            return Seq([math.nan] * len(self))
        return Seq([(value - low) / delta for value in self])


def value_sequence(*args: float) -> Seq:
    """A sequence over the given values."""
    return Seq(args)