"""The series protocol and a series of percentage change from the first value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from chartcore.mathutil import percent_difference


@runtime_checkable
class Series(Protocol):
    """A named, styled set of values drawn against a y axis."""

    name: str
    style: Any
    y_axis: Any

    def validate(self) -> None: ...


class _PercentChangeSource(Protocol):
    def __len__(self) -> int: ...

    def get_values(self, index: int) -> tuple[float, float]: ...

    def get_first_values(self) -> tuple[float, float]: ...

    def get_last_values(self) -> tuple[float, float]: ...

    def validate(self) -> None: ...


@dataclass
class PercentChangeSeries:
    """Each y of ``inner_series`` as a fractional change from its first y."""

    name: str = ""
    style: Any = None
    y_axis: Any = None
    inner_series: Optional[_PercentChangeSource] = None

    def __len__(self) -> int:
        return len(self._inner())

    def get_first_values(self) -> tuple[float, float]:
        """The first values of the inner series, unchanged."""
        return self._inner().get_first_values()

    def get_values(self, index: int) -> tuple[float, float]:
        inner = self._inner()
        _, first_y = inner.get_first_values()
        x, y = inner.get_values(index)
        return x, percent_difference(first_y, y)

    def get_last_values(self) -> tuple[float, float]:
        inner = self._inner()
        _, first_y = inner.get_first_values()
        x, y = inner.get_last_values()
        return x, percent_difference(first_y, y)

    def validate(self) -> None:
        """Raise ValueError if the series or its inner series cannot be drawn."""
        self._inner().validate()

    def _inner(self) -> _PercentChangeSource:
        if self.inner_series is None:
            raise ValueError("percent change series requires InnerSeries to be set")
        return self.inner_series