"""A series plotting a polynomial regression over a window of another series."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from chartcore.regression import poly


class _ValuesProvider(Protocol):
    def __len__(self) -> int: ...

    def get_values(self, index: int) -> tuple[float, float]: ...


@dataclass
class PolynomialRegressionSeries:
    """The least-squares polynomial of ``degree`` through a window of ``inner_series``.

    A ``limit`` of zero means the whole inner series.
    """

    name: str = ""
    style: Any = None
    y_axis: Any = None
    limit: int = 0
    offset: int = 0
    degree: int = 0
    inner_series: Optional[_ValuesProvider] = None

    _coeffs: Optional[list[float]] = field(default=None, init=False, repr=False)

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

    def validate(self) -> None:
        """Raise ValueError if the series cannot be drawn."""
        if self.inner_series is None:
            raise ValueError("linear regression series requires InnerSeries to be set")
        end = self.end_index()
        length = len(self.inner_series)
        if end >= length:
            raise ValueError(
                f"invalid window; inner series has length {length} but end index is {end}"
            )

    def get_values(self, index: int) -> tuple[float, float]:
        if self.inner_series is None or len(self.inner_series) == 0:
            return 0.0, 0.0
        self._ensure_coefficients()
        effective_index = min(index + self.offset, len(self.inner_series))
        x, _ = self.inner_series.get_values(effective_index)
        return x, self._apply(x)

    def get_first_values(self) -> tuple[float, float]:
        if self.inner_series is None or len(self.inner_series) == 0:
            return 0.0, 0.0
        self._ensure_coefficients()
        x, _ = self.inner_series.get_values(0)
        return x, self._apply(x)

    def get_last_values(self) -> tuple[float, float]:
        if self.inner_series is None or len(self.inner_series) == 0:
            return 0.0, 0.0
        self._ensure_coefficients()
        x, _ = self.inner_series.get_values(self.end_index())
        return x, self._apply(x)

    def _inner(self) -> _ValuesProvider:
        if self.inner_series is None:
            raise ValueError("linear regression series requires InnerSeries to be set")
        return self.inner_series

    def _ensure_coefficients(self) -> None:
        if self._coeffs is None:
            inner = self._inner()
            points = [inner.get_values(i) for i in range(self.offset, self.end_index())]
            self._coeffs = poly([x for x, _ in points], [y for _, y in points], self.degree)

    def _apply(self, v: float) -> float:
        assert self._coeffs is not None
        return sum(coeff * math.pow(v, float(power)) for power, coeff in enumerate(self._coeffs))