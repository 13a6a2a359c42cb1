"""Simple moving average over an inner series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD = 16


@dataclass
class SMASeries:
    """A series whose values are moving averages of an inner series' values.

    The inner series provides ``__len__`` and ``get_values(index) -> (x, y)``.
    """

    name: str = ""
    style: Any = None
    y_axis: Any = None
    period: int = 0
    inner_series: Any = None

    def __len__(self) -> int:
        return len(self.inner_series)

    def get_period(self, *args: int) -> int:
        """Return the window size, or the given default, or the built-in default."""
        if self.period == 0:
            if args:
                return args[0]
            return DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD
        return self.period

    def _is_empty(self) -> bool:
        return self.inner_series is None or len(self.inner_series) == 0

    def get_values(self, index: int) -> Tuple[float, float]:
        """Return the inner x value and the moving average at ``index``."""
        if self._is_empty():
            return 0.0, 0.0
        x, _ = self.inner_series.get_values(index)
        return x, self._average(index)

    def get_first_values(self) -> Tuple[float, float]:
        return self.get_values(0)

    def get_last_values(self) -> Tuple[float, float]:
        if self._is_empty():
            return 0.0, 0.0
        return self.get_values(len(self.inner_series) - 1)

    def _average(self, index: int) -> float:
        floor = max(0, index - self.get_period())
        window = [self.inner_series.get_values(i)[1] for i in range(index, floor - 1, -1)]
        total = 0.0
        for value in window:
            total += value
        return total / len(window)

    def validate(self) -> None:
        """Raise ``ValueError`` if the series cannot produce values."""
        if self.inner_series is None:
            raise ValueError("sma series requires InnerSeries to be set")