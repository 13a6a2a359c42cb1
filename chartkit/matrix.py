"""Dense row-major matrices of floats and a few vector helpers."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

DEFAULT_EPSILON = 0.000001

Vector = List[float]


class DimensionMismatchError(ValueError):
    """Raised when the shapes of two operands do not fit together."""

    def __init__(self, message: str = "dimension mismatch") -> None:
        super().__init__(message)


class SingularValueError(ValueError):
    """Raised when a matrix cannot be inverted."""

    def __init__(self, message: str = "singular value") -> None:
        super().__init__(message)


def _format_float(value: float) -> str:
    """Shortest decimal form of a float, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        return "-0"
    return text


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: a zero denominator gives an infinity or NaN."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _round_to_epsilon(value: float, epsilon: float) -> float:
    return math.nextafter(value, value)


class Matrix:
    """A two dimensional dense array of floats stored in row-major order."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int, *args: float) -> None:
        size = rows * cols
        values = [float(v) for v in args[:size]]
        self._stride = cols
        self._elements: List[float] = values + [0.0] * (size - len(values))
        self.epsilon = DEFAULT_EPSILON

    @classmethod
    def _from_elements(
        cls, stride: int, elements: List[float], epsilon: float = DEFAULT_EPSILON
    ) -> "Matrix":
        matrix = cls.__new__(cls)
        matrix._stride = stride
        matrix._elements = elements
        matrix.epsilon = epsilon
        return matrix

    def __str__(self) -> str:
        rows, cols = self.size()
        return "".join(
            "".join(_format_float(self.get(row, col)) + " " for col in range(cols)) + "\n"
            for row in range(rows)
        )

    def __repr__(self) -> str:
        rows, cols = self.size()
        return f"Matrix({rows}x{cols}, {self.arrays()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._stride == other._stride and self._elements == other._elements

    def with_epsilon(self, epsilon: float) -> "Matrix":
        """Set the precision used by rounding and return this matrix."""
        self.epsilon = epsilon
        return self

    def each(self, action: Callable[[int, int, float], None]) -> None:
        """Call ``action(row, col, value)`` for every element, row by row."""
        rows, cols = self.size()
        for row in range(rows):
            for col in range(cols):
                action(row, col, self.get(row, col))

    def round(self) -> "Matrix":
        """Round every element to the matrix epsilon, in place."""
        self._elements = [_round_to_epsilon(v, self.epsilon) for v in self._elements]
        return self

    def arrays(self) -> List[List[float]]:
        """Return the matrix as a list of row lists."""
        rows, cols = self.size()
        return [self.row(row) for row in range(rows)] if cols else [[] for _ in range(rows)]

    def size(self) -> Tuple[int, int]:
        """Return ``(rows, cols)``."""
        if self._stride == 0:
            return 0, 0
        return len(self._elements) // self._stride, self._stride

    def is_square(self) -> bool:
        rows, cols = self.size()
        return rows == cols

    def is_symmetric(self) -> bool:
        rows, cols = self.size()
        if rows != cols:
            return False
        return all(
            self.get(i, j) == self.get(j, i) for i in range(rows) for j in range(i)
        )

    def _index(self, row: int, col: int) -> int:
        index = self._stride * row + col
        if not 0 <= index < len(self._elements):
            raise IndexError(f"element ({row}, {col}) is out of range")
        return index

    def get(self, row: int, col: int) -> float:
        return self._elements[self._index(row, col)]

    def set(self, row: int, col: int, value: float) -> None:
        self._elements[self._index(row, col)] = float(value)

    def col(self, col: int) -> Vector:
        rows, _ = self.size()
        return [self.get(row, col) for row in range(rows)]

    def row(self, row: int) -> Vector:
        _, cols = self.size()
        return [self.get(row, col) for col in range(cols)]

    def sub_matrix(self, i: int, j: int, rows: int, cols: int) -> "Matrix":
        """Return a copy of the ``rows`` x ``cols`` block starting at ``(i, j)``."""
        elements = [
            self.get(row, col) for row in range(i, i + rows) for col in range(j, j + cols)
        ]
        return Matrix._from_elements(cols, elements, self.epsilon)

    def scale_row(self, row: int, scale: float) -> None:
        """Multiply every element of a row by ``scale``, in place."""
        start = self._index(row, 0)
        for index in range(start, start + self._stride):
            self._elements[index] *= scale

    def _scale_add_row(self, destination: int, source: int, factor: float) -> None:
        dest_start = destination * self._stride
        src_start = source * self._stride
        for offset in range(self._stride):
            self._elements[dest_start + offset] += factor * self._elements[src_start + offset]

    def swap_rows(self, i: int, j: int) -> None:
        for col in range(self._stride):
            vi, vj = self.get(i, col), self.get(j, col)
            self.set(i, col, vj)
            self.set(j, col, vi)

    def augment(self, other: "Matrix") -> "Matrix":
        """Concatenate ``other`` to the right of this matrix."""
        rows, cols = self.size()
        other_rows, other_cols = other.size()
        if rows != other_rows:
            raise DimensionMismatchError()
        elements = [
            value
            for row in range(rows)
            for value in self.row(row) + other.row(row)
        ]
        return Matrix._from_elements(cols + other_cols, elements)

    def copy(self) -> "Matrix":
        return Matrix._from_elements(self._stride, list(self._elements), self.epsilon)

    def diagonal_vector(self) -> Vector:
        rows, cols = self.size()
        return [self.get(index, index) for index in range(min(rows, cols))]

    def diagonal(self) -> "Matrix":
        rows, cols = self.size()
        rank = min(rows, cols)
        result = Matrix(rank, rank)
        for index in range(rank):
            result.set(index, index, self.get(index, index))
        return result

    def l(self) -> "Matrix":  # noqa: E743
        """Return a copy with zeros below the diagonal."""
        rows, cols = self.size()
        result = Matrix(rows, cols)
        for row in range(rows):
            for col in range(row, cols):
                result.set(row, col, self.get(row, col))
        return result

    def u(self) -> "Matrix":
        """Return a copy with zeros on and above the diagonal."""
        rows, cols = self.size()
        result = Matrix(rows, cols)
        for row in range(rows):
            for col in range(min(row, cols)):
                result.set(row, col, self.get(row, col))
        return result

    def _product(self, other: "Matrix", rows: int, inner: int, cols: int) -> List[float]:
        return [
            sum(self.get(r, k) * other.get(k, c) for k in range(inner))
            for r in range(rows)
            for c in range(cols)
        ]

    def multiply(self, other: "Matrix") -> "Matrix":
        """Return the matrix product ``self x other``."""
        if self._stride * other._stride != len(other._elements):
            raise DimensionMismatchError()
        rows, _ = self.size()
        elements = self._product(other, rows, self._stride, other._stride)
        return Matrix._from_elements(other._stride, elements, self.epsilon)

    def pivotize(self) -> "Matrix":
        """Return the permutation matrix used to pivot the LU decomposition."""
        n = self._stride
        order = list(range(n))
        for j in range(n):
            row = j
            largest = self._elements[j * (n + 1)]
            for i in range(j, n):
                value = self._elements[i * n + j]
                if value > largest:
                    largest, row = value, i
            if j != row:
                order[row], order[j] = order[j], order[row]
        permutation = zero(n, n)
        for r, c in enumerate(order):
            permutation.set(r, c, 1.0)
        return permutation

    def times(self, other: "Matrix") -> "Matrix":
        """Return the matrix product, checking that the inner sizes agree."""
        rows, cols = self.size()
        other_rows, other_cols = other.size()
        if cols != other_rows:
            raise DimensionMismatchError(
                f"cannot multiply ({rows}x{cols}) and ({other_rows}x{other_cols})"
            )
        return Matrix._from_elements(other_cols, self._product(other, rows, cols, other_cols))

    def lu(self) -> Tuple["Matrix", "Matrix", "Matrix"]:
        """Return ``(l, u, p)`` such that ``p x self == l x u``."""
        n = self._stride
        lower = zero(n, n)
        upper = zero(n, n)
        permutation = self.pivotize()
        pivoted = permutation.multiply(self)
        rows, _ = pivoted.size()
        for j in range(n):
            lower.set(j, j, 1.0)
            for i in range(j + 1):
                total = sum(upper.get(k, j) * lower.get(i, k) for k in range(i))
                upper.set(i, j, pivoted.get(i, j) - total)
            for i in range(j, rows):
                total = sum(upper.get(k, j) * lower.get(i, k) for k in range(j))
                lower.set(i, j, _divide(pivoted.get(i, j) - total, upper.get(j, j)))
        return lower, upper, permutation

    def qr(self) -> Tuple["Matrix", "Matrix"]:
        """Householder QR decomposition; returns ``(q, r)``."""
        rows, cols = self.size()
        work = self.copy()
        q = Matrix(rows, cols)
        r = Matrix(rows, cols)

        for k in range(cols):
            norm = 0.0
            for i in range(k, rows):
                norm = math.hypot(norm, work.get(i, k))
            if norm != 0:
                if work.get(k, k) < 0:
                    norm = -norm
                for i in range(k, rows):
                    work.set(i, k, work.get(i, k) / norm)
                work.set(k, k, work.get(k, k) + 1.0)
                for j in range(k + 1, cols):
                    s = sum(work.get(i, k) * work.get(i, j) for i in range(k, rows))
                    s = -s / work.get(k, k)
                    for i in range(k, rows):
                        work.set(i, j, work.get(i, j) + s * work.get(i, k))
                        if i < j:
                            r.set(i, j, work.get(i, j))
            r.set(k, k, -norm)

        for k in range(cols - 1, -1, -1):
            q.set(k, k, 1.0)
            for j in range(k, cols):
                if work.get(k, k) != 0:
                    s = sum(work.get(i, k) * q.get(i, j) for i in range(k, rows))
                    s = -s / work.get(k, k)
                    for i in range(k, rows):
                        q.set(i, j, q.get(i, j) + s * work.get(i, k))

        return q.round(), r.round()

    def transpose(self) -> "Matrix":
        rows, cols = self.size()
        elements = [self.get(i, j) for j in range(cols) for i in range(rows)]
        return Matrix._from_elements(rows, elements)

    def inverse(self) -> "Matrix":
        """Gauss-Jordan inverse; only symmetric matrices are accepted."""
        if not self.is_symmetric():
            raise DimensionMismatchError()
        rows, cols = self.size()
        aug = self.augment(eye(rows))
        for i in range(rows):
            pivot = max(range(i, rows), key=lambda k: abs(aug.get(k, i)))
            if pivot != i:
                aug.swap_rows(i, pivot)
            if aug.get(i, i) == 0:
                raise SingularValueError()
            aug.scale_row(i, 1.0 / aug.get(i, i))
            for k in range(rows):
                if k != i:
                    aug._scale_add_row(k, i, -aug.get(k, i))
        return aug.sub_matrix(0, cols, rows, cols)


def identity(order: int) -> Matrix:
    """Return the identity matrix of the given order."""
    result = Matrix(order, order)
    for index in range(order):
        result.set(index, index, 1.0)
    return result


def zero(rows: int, cols: int) -> Matrix:
    return Matrix(rows, cols)


def ones(rows: int, cols: int) -> Matrix:
    return Matrix._from_elements(cols, [1.0] * (rows * cols))


def eye(n: int) -> Matrix:
    return identity(n)


def from_arrays(arrays: Sequence[Sequence[float]]) -> Optional[Matrix]:
    """Build a matrix from a list of rows; an empty list gives ``None``."""
    if not arrays:
        return None
    cols = len(arrays[0])
    result = Matrix(len(arrays), cols)
    for row, values in enumerate(arrays):
        for col in range(cols):
            result.set(row, col, values[col])
    return result


def dot_product(v1: Iterable[float], v2: Iterable[float]) -> float:
    """Return the dot product of two equally long vectors."""
    first, second = list(v1), list(v2)
    if len(first) != len(second):
        raise DimensionMismatchError()
    return sum(a * b for a, b in zip(first, second))