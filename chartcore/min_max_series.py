"""Series drawing a horizontal line at the minimum or maximum of another series."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol

_MAX_FLOAT = sys.float_info.max


class _ValuesProvider(Protocol):
    def __len__(self) -> int: ...

    def get_values(self, index: int) -> tuple[float, float]: ...


def _extreme(
    inner: _ValuesProvider, start: float, better: Callable[[float, float], bool]
) -> float:
    result = start
    for index in range(len(inner)):
        _, y = inner.get_values(index)
        if better(y, result):
            result = y
    return result


def _require_inner(inner: Optional[_ValuesProvider], label: str) -> _ValuesProvider:
    if inner is None:
        raise ValueError(f"{label} requires InnerSeries to be set")
    return inner


@dataclass
class MinSeries:
    """A horizontal line at the smallest y value of ``inner_series``."""

    name: str = ""
    style: Any = None
    y_axis: Any = None
    inner_series: Optional[_ValuesProvider] = None

    _min_value: Optional[float] = field(default=None, init=False, repr=False)

    def __len__(self) -> int:
        return len(_require_inner(self.inner_series, "min series"))

    def get_values(self, index: int) -> tuple[float, float]:
        """The inner x at ``index`` paired with the smallest y of the inner series."""
        inner = _require_inner(self.inner_series, "min series")
        if self._min_value is None:
            self._min_value = _extreme(inner, _MAX_FLOAT, lambda y, best: y < best)
        x, _ = inner.get_values(index)
        return x, self._min_value

    def validate(self) -> None:
        """Raise ValueError if the series cannot be drawn."""
        _require_inner(self.inner_series, "min series")


@dataclass
class MaxSeries:
    """A horizontal line at the largest y value of ``inner_series``."""

    name: str = ""
    style: Any = None
    y_axis: Any = None
    inner_series: Optional[_ValuesProvider] = None

    _max_value: Optional[float] = field(default=None, init=False, repr=False)

    def __len__(self) -> int:
        return len(_require_inner(self.inner_series, "max series"))

    def get_values(self, index: int) -> tuple[float, float]:
        """The inner x at ``index`` paired with the largest y of the inner series."""
        inner = _require_inner(self.inner_series, "max series")
        if self._max_value is None:
            self._max_value = _extreme(inner, -_MAX_FLOAT, lambda y, best: y > best)
        x, _ = inner.get_values(index)
        return x, self._max_value

    def validate(self) -> None:
        """Raise ValueError if the series cannot be drawn."""
        _require_inner(self.inner_series, "max series")