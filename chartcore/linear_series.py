"""A series plotting a line from given coefficients over fixed x values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol


class _CoefficientProvider(Protocol):
    def coefficients(self) -> tuple[float, float, float, float]: ...


@dataclass
class LinearSeries:
    """Plots y = m*x + b for each of ``x_values``, with coefficients from ``inner_series``."""

    name: str = ""
    style: Any = None
    y_axis: Any = None
    x_values: list[float] = field(default_factory=list)
    inner_series: Optional[_CoefficientProvider] = None

    _m: float = field(default=0.0, init=False, repr=False)
    _b: float = field(default=0.0, init=False, repr=False)
    _stdev: float = field(default=0.0, init=False, repr=False)
    _avg: float = field(default=0.0, init=False, repr=False)

    def __len__(self) -> int:
        return len(self.x_values)

    def end_index(self) -> int:
        return len(self.x_values) - 1

    def get_values(self, index: int) -> tuple[float, float]:
        if self.inner_series is None or not self.x_values:
            return 0.0, 0.0
        if self.is_zero():
            self._compute_coefficients()
        x = self.x_values[index]
        return x, self._m * self._normalize(x) + self._b

    def get_first_values(self) -> tuple[float, float]:
        if self.inner_series is None or not self.x_values:
            return 0.0, 0.0
        return self.get_values(0)

    def get_last_values(self) -> tuple[float, float]:
        if self.inner_series is None or not self.x_values:
            return 0.0, 0.0
        return self.get_values(self.end_index())

    def validate(self) -> None:
        """Raise ValueError if the series cannot be drawn."""
        if self.inner_series is None:
            raise ValueError("linear regression series requires InnerSeries to be set")

    def is_zero(self) -> bool:
        """Whether the coefficients are still unset."""
        return self._m == 0 and self._b == 0

    def _compute_coefficients(self) -> None:
        assert self.inner_series is not None
        self._m, self._b, self._stdev, self._avg = self.inner_series.coefficients()

    def _normalize(self, xvalue: float) -> float:
        if self._avg > 0 and self._stdev > 0:
            return (xvalue - self._avg) / self._stdev
        return xvalue