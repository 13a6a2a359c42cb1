"""Least-squares polynomial regression."""

from __future__ import annotations

from typing import List, Sequence

from .matrix import Matrix, _divide, zero


class PolyRegressionLengthError(ValueError):
    """Raised when the x and y inputs differ in length."""

    def __init__(
        self, message: str = "polynomial array inputs must be the same length"
    ) -> None:
        super().__init__(message)


def poly(xvalues: Sequence[float], yvalues: Sequence[float], degree: int) -> List[float]:
    """Fit a polynomial of ``degree``; coefficients are returned lowest power first."""
    if len(xvalues) != len(yvalues):
        raise PolyRegressionLengthError()

    m = len(yvalues)
    n = degree + 1
    y = Matrix(m, 1, *yvalues)
    x = zero(m, n)
    for i, xv in enumerate(xvalues):
        power = 1.0
        for j in range(n):
            x.set(i, j, power)
            power *= xv

    q, r = x.qr()
    qty = q.transpose().times(y)

    coefficients = [0.0] * n
    for i in range(n - 1, -1, -1):
        value = qty.get(i, 0)
        for j in range(i + 1, n):
            value -= coefficients[j] * r.get(i, j)
        coefficients[i] = _divide(value, r.get(i, i))
    return coefficients