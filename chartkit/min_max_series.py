"""Series that draw a flat line at the minimum or maximum of an inner series."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass
class MinSeries:
    """Every point sits at the smallest y value of the inner series."""

    name: str = ""
    style: Any = None
    y_axis: Any = None
    inner_series: Any = None
    _min_value: Optional[float] = field(default=None, init=False, repr=False)

    def __len__(self) -> int:
        return len(self.inner_series)

    def get_values(self, index: int) -> Tuple[float, float]:
        if self._min_value is None:
            lowest = sys.float_info.max
            for i in range(len(self.inner_series)):
                y = self.inner_series.get_values(i)[1]
                if y < lowest:
                    lowest = y
            self._min_value = lowest
        x, _ = self.inner_series.get_values(index)
        return x, self._min_value

    def validate(self) -> None:
        if self.inner_series is None:
            raise ValueError("min series requires InnerSeries to be set")


@dataclass
class MaxSeries:
    """Every point sits at the largest y value of the inner series."""

    name: str = ""
    style: Any = None
    y_axis: Any = None
    inner_series: Any = None
    _max_value: Optional[float] = field(default=None, init=False, repr=False)

    def __len__(self) -> int:
        return len(self.inner_series)

    def get_values(self, index: int) -> Tuple[float, float]:
        if self._max_value is None:
            highest = -sys.float_info.max
            for i in range(len(self.inner_series)):
                y = self.inner_series.get_values(i)[1]
                if y > highest:
                    highest = y
            self._max_value = highest
        x, _ = self.inner_series.get_values(index)
        return x, self._max_value

    def validate(self) -> None:
        if self.inner_series is None:
            raise ValueError("max series requires InnerSeries to be set")