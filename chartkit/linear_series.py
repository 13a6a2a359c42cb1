"""A straight line evaluated over a set of x values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple


@dataclass
class LinearSeries:
    """Plots ``y = m * x + b`` at each of ``x_values``.

    The coefficients come from ``inner_series.coefficients()``, which returns
    ``(m, b, stdev, avg)``. When both ``avg`` and ``stdev`` are positive, x is
    standardised before the line is applied.
    """

    name: str = ""
    style: Any = None
    y_axis: Any = None
    x_values: List[float] = field(default_factory=list)
    inner_series: Any = None

    _m: float = field(default=0.0, init=False, repr=False)
    _b: float = field(default=0.0, init=False, repr=False)
    _stdev: float = field(default=0.0, init=False, repr=False)
    _avg: float = field(default=0.0, init=False, repr=False)

    def __len__(self) -> int:
        return len(self.x_values)

    def get_end_index(self) -> int:
        return len(self.x_values) - 1

    def _ready(self) -> bool:
        if self.inner_series is None or not self.x_values:
            return False
        if self.is_zero():
            self._m, self._b, self._stdev, self._avg = self.inner_series.coefficients()
        return True

    def get_values(self, index: int) -> Tuple[float, float]:
        if not self._ready():
            return 0.0, 0.0
        x = self.x_values[index]
        return x, self._m * self._normalize(x) + self._b

    def get_first_values(self) -> Tuple[float, float]:
        return self.get_values(0)

    def get_last_values(self) -> Tuple[float, float]:
        return self.get_values(self.get_end_index())

    def validate(self) -> None:
        if self.inner_series is None:
            raise ValueError("linear regression series requires InnerSeries to be set")

    def is_zero(self) -> bool:
        """True while no coefficients have been computed."""
        return self._m == 0 and self._b == 0

    def _normalize(self, x: float) -> float:
        if self._avg > 0 and self._stdev > 0:
            return (x - self._avg) / self._stdev
        return x