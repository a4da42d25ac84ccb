"""Fixed linear coefficients for the form y = m*x + b."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class _CoefficientProvider(Protocol):
    def coefficients(self) -> tuple[float, float, float, float]: ...


@dataclass(frozen=True)
class LinearCoefficientSet:
    """Slope ``m``, intercept ``b`` and the x normalisation terms."""

    m: float = 0.0
    b: float = 0.0
    std_dev: float = 0.0
    avg: float = 0.0

    def coefficients(self) -> tuple[float, float, float, float]:
        """Return (m, b, std_dev, avg)."""
        return self.m, self.b, self.std_dev, self.avg


def linear_coefficients(m: float, b: float) -> LinearCoefficientSet:
    """A coefficient set with no x normalisation."""
    return LinearCoefficientSet(m=m, b=b)


def normalized_linear_coefficients(
    m: float, b: float, stdev: float, avg: float
) -> LinearCoefficientSet:
    """A coefficient set whose x values are normalised by ``avg`` and ``stdev``."""
    return LinearCoefficientSet(m=m, b=b, std_dev=stdev, avg=avg)