"""Polynomial regression fitted over a window of an inner series."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from .mathutil import min_int
from .regression import poly


@dataclass
class PolynomialRegressionSeries:
    """Evaluates a least-squares polynomial fitted to the inner series."""

    name: str = ""
    style: Any = None
    y_axis: Any = None
    limit: int = 0
    offset: int = 0
    degree: int = 0
    inner_series: Any = None
    _coeffs: Optional[List[float]] = field(default=None, init=False, repr=False)

    def __len__(self) -> int:
        return min_int(self.get_limit(), len(self.inner_series) - self.get_offset())

    def get_limit(self) -> int:
        """Return the window size; the whole inner series when unset."""
        if self.limit == 0:
            return len(self.inner_series)
        return self.limit

    def get_end_index(self) -> int:
        window_end = self.get_offset() + self.get_limit()
        return min_int(window_end, len(self.inner_series) - 1)

    def get_offset(self) -> int:
        return self.offset

    def validate(self) -> None:
        if self.inner_series is None:
            raise ValueError("linear regression series requires InnerSeries to be set")
        end_index = self.get_end_index()
        if end_index >= len(self.inner_series):
            raise ValueError(
                f"invalid window; inner series has length {len(self.inner_series)} "
                f"but end index is {end_index}"
            )

    def _ready(self) -> bool:
        if self.inner_series is None or len(self.inner_series) == 0:
            return False
        if self._coeffs is None:
            self._coeffs = self._compute_coefficients()
        return True

    def get_values(self, index: int) -> Tuple[float, float]:
        if not self._ready():
            return 0.0, 0.0
        effective = min_int(index + self.get_offset(), len(self.inner_series))
        x, _ = self.inner_series.get_values(effective)
        return x, self._apply(x)

    def get_first_values(self) -> Tuple[float, float]:
        if not self._ready():
            return 0.0, 0.0
        x, _ = self.inner_series.get_values(0)
        return x, self._apply(x)

    def get_last_values(self) -> Tuple[float, float]:
        if not self._ready():
            return 0.0, 0.0
        x, _ = self.inner_series.get_values(self.get_end_index())
        return x, self._apply(x)

    def _apply(self, value: float) -> float:
        total = 0.0
        for power, coeff in enumerate(self._coeffs or []):
            total += coeff * math.pow(value, power)
        return total

    def _compute_coefficients(self) -> List[float]:
        points = [
            self.inner_series.get_values(i)
            for i in range(self.get_offset(), self.get_end_index())
        ]
        return poly([p[0] for p in points], [p[1] for p in points], self.degree)