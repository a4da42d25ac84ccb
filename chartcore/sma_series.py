"""A simple moving average over another series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD = 16


class _ValuesProvider(Protocol):
    def __len__(self) -> int: ...

    def get_values(self, index: int) -> tuple[float, float]: ...


@dataclass
class SMASeries:
    """The mean of each value and the ``period`` values before it.

    A ``period`` of zero means the default period.
    """

    name: str = ""
    style: Any = None
    y_axis: Any = None
    period: int = 0
    inner_series: Optional[_ValuesProvider] = None

    def __len__(self) -> int:
        return len(self._inner())

    def get_period(self, default: Optional[int] = None) -> int:
        """The window size, falling back to ``default`` or the package default."""
        if self.period == 0:
            if default is not None:
                return default
            return DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD
        return self.period

    def get_values(self, index: int) -> tuple[float, float]:
        if self.inner_series is None or len(self.inner_series) == 0:
            return 0.0, 0.0
        x, _ = self.inner_series.get_values(index)
        return x, self._average(index)

    def get_first_values(self) -> tuple[float, float]:
        return self.get_values(0)

    def get_last_values(self) -> tuple[float, float]:
        if self.inner_series is None or len(self.inner_series) == 0:
            return 0.0, 0.0
        return self.get_values(len(self.inner_series) - 1)

    def validate(self) -> None:
        """Raise ValueError if the series cannot be drawn."""
        if self.inner_series is None:
            raise ValueError("sma series requires InnerSeries to be set")

    def _inner(self) -> _ValuesProvider:
        self.validate()
        assert self.inner_series is not None
        return self.inner_series

    def _average(self, index: int) -> float:
        inner = self._inner()
        floor = max(0, index - self.get_period())
        ys = [inner.get_values(i)[1] for i in range(index, floor - 1, -1)]
        total = 0.0
        for y in ys:
            total += y
        return total / len(ys)