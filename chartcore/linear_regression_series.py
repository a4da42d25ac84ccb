"""A series plotting the linear regression over a window of another series."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from chartcore.seq import Seq


class _ValuesProvider(Protocol):
    def __len__(self) -> int: ...

    def get_values(self, index: int) -> tuple[float, float]: ...


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass
class LinearRegressionSeries:
    """The least-squares line through a window of ``inner_series``.

    A ``limit`` of zero means the whole inner series.
    """

    name: str = ""
    style: Any = None
    y_axis: Any = None
    limit: int = 0
    offset: int = 0
    inner_series: Optional[_ValuesProvider] = None

    _m: float = field(default=0.0, init=False, repr=False)
    _b: float = field(default=0.0, init=False, repr=False)
    _avgx: float = field(default=0.0, init=False, repr=False)
    _stddevx: float = field(default=0.0, init=False, repr=False)

    def coefficients(self) -> tuple[float, float, float, float]:
        """Return (m, b, stdev, avg) of the fitted line over normalised x."""
        if self.is_zero():
            self._compute_coefficients()
        return self._m, self._b, self._stddevx, self._avgx

    def __len__(self) -> int:
        return min(self.effective_limit(), len(self._inner()) - self.offset)

    def effective_limit(self) -> int:
        """The window size, defaulting to the inner series length."""
        if self.limit == 0:
            return len(self._inner())
        return self.limit

    def end_index(self) -> int:
        """The last inner index the window reaches."""
        window_end = self.offset + self.effective_limit()
        return min(window_end, len(self._inner()) - 1)

    def get_values(self, index: int) -> tuple[float, float]:
        if self.inner_series is None or len(self.inner_series) == 0:
            return 0.0, 0.0
        if self.is_zero():
            self._compute_coefficients()
        effective_index = min(index + self.offset, len(self.inner_series))
        x, _ = self.inner_series.get_values(effective_index)
        return x, self._apply(x)

    def get_first_values(self) -> tuple[float, float]:
        if self.inner_series is None or len(self.inner_series) == 0:
            return 0.0, 0.0
        if self.is_zero():
            self._compute_coefficients()
        x, _ = self.inner_series.get_values(0)
        return x, self._apply(x)

    def get_last_values(self) -> tuple[float, float]:
        if self.inner_series is None or len(self.inner_series) == 0:
            return 0.0, 0.0
        if self.is_zero():
            self._compute_coefficients()
        x, _ = self.inner_series.get_values(self.end_index())
        return x, self._apply(x)

    def validate(self) -> None:
        """Raise ValueError if the series cannot be drawn."""
        if self.inner_series is None:
            raise ValueError("linear regression series requires InnerSeries to be set")

    def is_zero(self) -> bool:
        """Whether the coefficients are still unset."""
        return self._m == 0 and self._b == 0

    def _inner(self) -> _ValuesProvider:
        if self.inner_series is None:
            raise ValueError("linear regression series requires InnerSeries to be set")
        return self.inner_series

    def _normalize(self, xvalue: float) -> float:
        return _divide(xvalue - self._avgx, self._stddevx)

    def _apply(self, x: float) -> float:
        return self._m * self._normalize(x) + self._b

    def _compute_coefficients(self) -> None:
        inner = self._inner()
        start = self.offset
        end = self.end_index()
        p = float(end - start)

        points = [inner.get_values(index) for index in range(start, end)]
        xseq = Seq([x for x, _ in points])
        self._avgx = xseq.average()
        self._stddevx = xseq.std_dev()

        sumx = sumy = sumxx = sumxy = 0.0
        for x, y in points:
            nx = self._normalize(x)
            sumx += nx
            sumy += y
            sumxx += nx * nx
            sumxy += nx * y

        self._m = _divide(p * sumxy - sumx * sumy, p * sumxx - sumx * sumx)
        self._b = _divide(sumy, p) - _divide(self._m * sumx, p)