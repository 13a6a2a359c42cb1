"""A series of percentage changes relative to the first value of an inner series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from .mathutil import percent_difference


@dataclass
class PercentChangeSeries:
    """Each y value is the fractional change from the inner series' first y value.

    The inner series provides ``__len__``, ``get_values(index)``,
    ``get_first_values()``, ``get_last_values()`` and ``validate()``.
    """

    name: str = ""
    style: Any = None
    y_axis: Any = None
    inner_series: Any = None

    def __len__(self) -> int:
        return len(self.inner_series)

    def get_first_values(self) -> Tuple[float, float]:
        """Return the inner series' first values unchanged."""
        return self.inner_series.get_first_values()

    def get_values(self, index: int) -> Tuple[float, float]:
        """Return the inner x value and the change of y from the first y."""
        _, first_y = self.inner_series.get_first_values()
        x, y = self.inner_series.get_values(index)
        return x, percent_difference(first_y, y)

    def get_last_values(self) -> Tuple[float, float]:
        """Return the last inner x value and the change of the last y from the first y."""
        _, first_y = self.inner_series.get_first_values()
        x, y = self.inner_series.get_last_values()
        return x, percent_difference(first_y, y)

    def validate(self) -> None:
        """Validate the inner series; raises whatever it raises."""
        self.inner_series.validate()