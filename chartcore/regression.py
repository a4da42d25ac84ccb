"""Least-squares polynomial regression."""

from __future__ import annotations

from typing import Sequence

from chartcore.matrix import Matrix, zero


class PolyLengthMismatchError(ValueError):
    """Raised when the x and y inputs differ in length."""

    def __init__(self, message: str = "polynomial array inputs must be the same length") -> None:
        super().__init__(message)


def poly(xvalues: Sequence[float], yvalues: Sequence[float], degree: int) -> list[float]:
    """Coefficients c[0..degree] of the polynomial that best fits the points."""
    if len(xvalues) != len(yvalues):
        raise PolyLengthMismatchError()

    m = len(yvalues)
    n = degree + 1
    y = Matrix(m, 1, yvalues)
    x = zero(m, n)

    for i, xv in enumerate(xvalues):
        power = 1.0
        for j in range(n):
            x.set(i, j, power)
            power *= xv

    q, r = x.qr()
    qty = q.transpose().times(y)

    coefficients = [0.0] * n
    for i in reversed(range(n)):
        value = qty.get(i, 0)
        for j in range(i + 1, n):
            value -= coefficients[j] * r.get(i, j)
        coefficients[i] = value / r.get(i, i)
    return coefficients