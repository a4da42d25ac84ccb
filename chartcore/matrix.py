"""Dense two-dimensional float matrices and the operations the chart code needs."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable, Iterator, Sequence

DEFAULT_EPSILON = 0.000001


class DimensionMismatchError(ValueError):
    """Raised when the shapes of two operands do not fit together."""

    def __init__(self, message: str = "dimension mismatch") -> None:
        super().__init__(message)


class SingularValueError(ValueError):
    """Raised when a matrix cannot be inverted."""

    def __init__(self, message: str = "singular value") -> None:
        super().__init__(message)


def _format_float(value: float) -> str:
    """Shortest plain decimal form of a float, without an exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


class Matrix:
    """A row-major dense matrix of floats."""

    __slots__ = ("_elements", "_stride", "_epsilon")

    def __init__(self, rows: int, cols: int, values: Iterable[float] | None = None) -> None:
        elements = [0.0] * (rows * cols)
        if values is not None:
            given = [float(v) for v in values][: rows * cols]
            elements[: len(given)] = given
        self._elements = elements
        self._stride = cols
        self._epsilon = DEFAULT_EPSILON

    @classmethod
    def _wrap(cls, stride: int, epsilon: float, elements: list[float]) -> "Matrix":
        matrix = cls.__new__(cls)
        matrix._elements = elements
        matrix._stride = stride
        matrix._epsilon = epsilon
        return matrix

    def __str__(self) -> str:
        rows, cols = self.size()
        return "".join(
            "".join(_format_float(self.get(row, col)) + " " for col in range(cols)) + "\n"
            for row in range(rows)
        )

    def __repr__(self) -> str:
        rows, cols = self.size()
        return f"Matrix({rows}, {cols}, {self._elements!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._stride == other._stride and self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self.set(row, col, value)

    @property
    def epsilon(self) -> float:
        """The precision used for math operations."""
        return self._epsilon

    def with_epsilon(self, epsilon: float) -> "Matrix":
        """Set the epsilon and return the matrix."""
        self._epsilon = epsilon
        return self

    def each(self) -> Iterator[tuple[int, int, float]]:
        """Yield (row, col, value) for every element in row-major order."""
        rows, cols = self.size()
        for row in range(rows):
            for col in range(cols):
                yield row, col, self.get(row, col)

    def round(self) -> "Matrix":
        """Round every value to the matrix precision, in place; returns the matrix.

        Values are kept at full float precision.
        """
        self._elements = [math.nextafter(v, v) for v in self._elements]
        return self

    def arrays(self) -> list[list[float]]:
        """The matrix as a list of row lists."""
        rows, cols = self.size()
        return [[self.get(row, col) for col in range(cols)] for row in range(rows)]

    def size(self) -> tuple[int, int]:
        """Return (rows, cols)."""
        return len(self._elements) // self._stride, self._stride

    def is_square(self) -> bool:
        return self._stride == len(self._elements) // self._stride

    def is_symmetric(self) -> bool:
        rows, cols = self.size()
        if rows != cols:
            return False
        return all(
            self.get(i, j) == self.get(j, i) for i in range(rows) for j in range(i)
        )

    def get(self, row: int, col: int) -> float:
        return self._elements[self._stride * row + col]

    def set(self, row: int, col: int, value: float) -> None:
        self._elements[self._stride * row + col] = float(value)

    def col(self, col: int) -> list[float]:
        """A column as a list."""
        rows, _ = self.size()
        return [self.get(row, col) for row in range(rows)]

    def row(self, row: int) -> list[float]:
        """A row as a list."""
        _, cols = self.size()
        return [self.get(row, col) for col in range(cols)]

    def sub_matrix(self, i: int, j: int, rows: int, cols: int) -> "Matrix":
        """A matrix over the elements starting at (i, j), keeping the outer stride."""
        start = i * self._stride + j
        end = start + (rows - 1) * self._stride + cols
        return Matrix._wrap(self._stride, self._epsilon, self._elements[start:end])

    def scale_row(self, row: int, scale: float) -> None:
        """Multiply the elements from the start of ``row`` up to the first stride."""
        start = row * self._stride
        self._elements[start : self._stride] = [
            v * scale for v in self._elements[start : self._stride]
        ]

    def _scale_add_row(self, dest: int, source: int, factor: float) -> None:
        d0 = dest * self._stride
        s0 = source * self._stride
        for col in range(self._stride):
            self._elements[d0 + col] += factor * self._elements[s0 + col]

    def swap_rows(self, i: int, j: int) -> None:
        for col in range(self._stride):
            vi, vj = self.get(i, col), self.get(j, col)
            self.set(i, col, vj)
            self.set(j, col, vi)

    def augment(self, other: "Matrix") -> "Matrix":
        """Concatenate ``other`` to the right of this matrix."""
        mr, mc = self.size()
        m2r, m2c = other.size()
        if mr != m2r:
            raise DimensionMismatchError()
        result = zero(mr, mc + m2c)
        for row in range(mr):
            for col in range(mc):
                result.set(row, col, self.get(row, col))
            for col in range(m2c):
                result.set(row, mc + col, other.get(row, col))
        return result

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._stride, self._epsilon, list(self._elements))

    def diagonal_vector(self) -> list[float]:
        rows, cols = self.size()
        return [self.get(index, index) for index in range(min(rows, cols))]

    def diagonal(self) -> "Matrix":
        rows, cols = self.size()
        rank = min(rows, cols)
        result = Matrix(rank, rank)
        for index in range(rank):
            result.set(index, index, self.get(index, index))
        return result

    def lower(self) -> "Matrix":
        """A copy with every element below the diagonal set to zero."""
        rows, cols = self.size()
        result = Matrix(rows, cols)
        for row in range(rows):
            for col in range(row, cols):
                result.set(row, col, self.get(row, col))
        return result

    def upper(self) -> "Matrix":
        """A copy holding only the elements strictly below the diagonal."""
        rows, cols = self.size()
        result = Matrix(rows, cols)
        for row in range(rows):
            for col in range(min(row, cols)):
                result.set(row, col, self.get(row, col))
        return result

    def multiply(self, other: "Matrix") -> "Matrix":
        """Matrix product, keeping this matrix's epsilon."""
        if self._stride * other._stride != len(other._elements):
            raise DimensionMismatchError()
        inner = self._stride
        cols = other._stride
        rows = len(self._elements) // inner
        a, b = self._elements, other._elements
        elements = [
            sum(a[r * inner + k] * b[k * cols + c] for k in range(inner))
            for r in range(rows)
            for c in range(cols)
        ]
        return Matrix._wrap(cols, self._epsilon, elements)

    def pivotize(self) -> "Matrix":
        """The permutation matrix that moves the largest column values onto the diagonal."""
        n = self._stride
        pv = list(range(n))
        for j in range(n):
            row = j
            best = self._elements[j * n + j]
            for i in range(j, n):
                value = self._elements[i * n + j]
                if value > best:
                    best = value
                    row = i
            if j != row:
                pv[row], pv[j] = pv[j], pv[row]
        p = zero(n, n)
        for r, c in enumerate(pv):
            p._elements[r * n + c] = 1.0
        return p

    def times(self, other: "Matrix") -> "Matrix":
        """Matrix product of this matrix and ``other``."""
        mr, mc = self.size()
        m2r, m2c = other.size()
        if mc != m2r:
            raise DimensionMismatchError(f"cannot multiply ({mr}x{mc}) and ({m2r}x{m2c})")
        result = zero(mr, m2c)
        for i in range(mr):
            row_a = self._elements[i * self._stride : i * self._stride + self._stride]
            for k, a in enumerate(row_a):
                row_b = other._elements[k * other._stride : k * other._stride + other._stride]
                for j, b in enumerate(row_b):
                    result._elements[i * result._stride + j] += a * b
        return result

    def lu(self) -> tuple["Matrix", "Matrix", "Matrix"]:
        """LU decomposition with pivoting; returns (l, u, p) with l*u == p*m."""
        n = self._stride
        lower_m = zero(n, n)
        upper_m = zero(n, n)
        p = self.pivotize()
        pm = p.multiply(self)
        total_rows = len(pm._elements) // n
        for j in range(n):
            lower_m.set(j, j, 1.0)
            for i in range(j + 1):
                acc = sum(upper_m.get(k, j) * lower_m.get(i, k) for k in range(i))
                upper_m.set(i, j, pm.get(i, j) - acc)
            for i in range(j, total_rows):
                acc = sum(upper_m.get(k, j) * lower_m.get(i, k) for k in range(j))
                lower_m.set(i, j, (pm.get(i, j) - acc) / upper_m.get(j, j))
        return lower_m, upper_m, p

    def qr(self) -> tuple["Matrix", "Matrix"]:
        """Householder QR decomposition; returns (q, r)."""
        rows, cols = self.size()
        qr = self.copy()
        q = Matrix(rows, cols)
        r = Matrix(rows, cols)

        for k in range(cols):
            norm = 0.0
            for i in range(k, rows):
                norm = math.hypot(norm, qr.get(i, k))
            if norm != 0:
                if qr.get(k, k) < 0:
                    norm = -norm
                for i in range(k, rows):
                    qr.set(i, k, qr.get(i, k) / norm)
                qr.set(k, k, qr.get(k, k) + 1.0)
                for j in range(k + 1, cols):
                    s = sum(qr.get(i, k) * qr.get(i, j) for i in range(k, rows))
                    s = -s / qr.get(k, k)
                    for i in range(k, rows):
                        qr.set(i, j, qr.get(i, j) + s * qr.get(i, k))
                        if i < j:
                            r.set(i, j, qr.get(i, j))
            r.set(k, k, -norm)

        for k in reversed(range(cols)):
            q.set(k, k, 1.0)
            for j in range(k, cols):
                if qr.get(k, k) != 0:
                    s = sum(qr.get(i, k) * q.get(i, j) for i in range(k, rows))
                    s = -s / qr.get(k, k)
                    for i in range(k, rows):
                        q.set(i, j, q.get(i, j) + s * qr.get(i, k))

        return q.round(), r.round()

    def transpose(self) -> "Matrix":
        rows, cols = self.size()
        result = zero(cols, rows)
        for i in range(rows):
            for j in range(cols):
                result.set(j, i, self.get(i, j))
        return result

    def inverse(self) -> "Matrix":
        """Gauss-Jordan inverse of a symmetric matrix."""
        if not self.is_symmetric():
            raise DimensionMismatchError()
        rows, cols = self.size()
        aug = self.augment(eye(rows))
        for i in range(rows):
            j = i
            for k in range(i, rows):
                if abs(aug.get(k, i)) > abs(aug.get(j, i)):
                    j = k
            if j != i:
                aug.swap_rows(i, j)
            if aug.get(i, i) == 0:
                raise SingularValueError()
            aug.scale_row(i, 1.0 / aug.get(i, i))
            for k in range(rows):
                if k != i:
                    aug._scale_add_row(k, i, -aug.get(k, i))
        return aug.sub_matrix(0, cols, rows, cols)


def identity(order: int) -> Matrix:
    """The identity matrix of a given order."""
    m = Matrix(order, order)
    for i in range(order):
        m.set(i, i, 1.0)
    return m


def zero(rows: int, cols: int) -> Matrix:
    """A zero-filled matrix."""
    return Matrix(rows, cols)


def ones(rows: int, cols: int) -> Matrix:
    """A matrix filled with ones."""
    return Matrix(rows, cols, [1.0] * (rows * cols))


def eye(n: int) -> Matrix:
    """The n by n identity matrix."""
    m = zero(n, n)
    for i in range(0, n * n, n + 1):
        m._elements[i] = 1.0
    return m


def from_arrays(arrays: Sequence[Sequence[float]]) -> Matrix:
    """Build a matrix from row lists; the first row fixes the column count."""
    if not arrays:
        raise ValueError("at least one row is required")
    cols = len(arrays[0])
    m = Matrix(len(arrays), cols)
    for row, values in enumerate(arrays):
        for col in range(cols):
            m.set(row, col, values[col])
    return m


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two equally long vectors."""
    if len(a) != len(b):
        raise DimensionMismatchError()
    return sum(x * y for x, y in zip(a, b))