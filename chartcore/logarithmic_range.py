"""Value ranges and the logarithmic range used by log-scale axes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Range(Protocol):
    """A span of values mapped onto a pixel domain."""

    minimum: float
    maximum: float
    domain: int
    descending: bool

    @property
    def delta(self) -> float: ...

    def is_zero(self) -> bool: ...

    def translate(self, value: float) -> int: ...


def _unset(value: float) -> bool:
    return value == 0 or math.isnan(value)


def _exponent(value: float, rounding: Callable[[float], float]) -> int:
    if value <= 0 or math.isnan(value):
        return 0
    return int(max(0.0, rounding(math.log10(value))))


@dataclass
class LogarithmicRange:
    """A range whose values are placed on a base-10 logarithmic scale."""

    minimum: float = 0.0
    maximum: float = 0.0
    domain: int = 0
    descending: bool = False

    def is_zero(self) -> bool:
        """Whether the range has been set at all."""
        return _unset(self.minimum) and _unset(self.maximum) and self.domain == 0

    @property
    def delta(self) -> float:
        """The difference between maximum and minimum."""
        return self.maximum - self.minimum

    def __str__(self) -> str:
        return f"LogarithmicRange [{self.minimum:.2f},{self.maximum:.2f}] => {self.domain}"

    def translate(self, value: float) -> int:
        """Map a value into the domain; values below one map to zero."""
        if value < 1:
            return 0
        delta = self.delta
        if not delta > 1:
            raise ValueError(f"logarithmic range needs a delta above 1, got {delta}")
        normalized = max(value - self.minimum, 1.0)
        ratio = math.log10(normalized) / math.log10(delta)
        scaled = math.ceil(ratio * float(self.domain))
        if self.descending:
            return self.domain - scaled
        return scaled

    def get_ticks(self, formatter: Callable[[float], str]) -> list[tuple[float, str]]:
        """(value, label) pairs at each power of ten spanning the range.

        Starts one power at or below the minimum and ends one at or above
        the maximum; only positive values are supported.
        """
        start = _exponent(self.minimum, math.floor)
        end = _exponent(self.maximum, math.ceil)
        ticks = []
        for exponent in range(start, end + 1):
            value = math.pow(10, exponent)
            ticks.append((value, formatter(value)))
        return ticks