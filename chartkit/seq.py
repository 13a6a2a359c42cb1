"""Sequences of float values and statistics over them."""

from __future__ import annotations

import math
from typing import Any, Callable, Iterator, List, Sequence, Tuple

from .mathutil import round_places
from .matrix import _divide


class Seq:
    """Wraps a value provider.

    A provider is either an object with ``__len__`` and ``get_value(index)``
    or a plain sequence of numbers.
    """

    def __init__(self, provider: Any) -> None:
        self._provider = provider

    def __len__(self) -> int:
        return len(self._provider)

    def get_value(self, index: int) -> float:
        getter = getattr(self._provider, "get_value", None)
        if getter is not None:
            return float(getter(index))
        return float(self._provider[index])

    def __iter__(self) -> Iterator[float]:
        return (self.get_value(i) for i in range(len(self)))

    def values(self) -> List[float]:
        """Enumerate the sequence into a list."""
        return list(self)

    def each(self, mapfn: Callable[[int, float], None]) -> None:
        """Call ``mapfn(index, value)`` for every value."""
        for index, value in enumerate(self):
            mapfn(index, value)

    def map(self, mapfn: Callable[[int, float], float]) -> "Seq":
        """Return a new sequence of ``mapfn(index, value)`` results."""
        return Seq([mapfn(index, value) for index, value in enumerate(self)])

    def fold_left(self, mapfn: Callable[[int, float, float], float]) -> float:
        """Collapse the sequence from left to right."""
        length = len(self)
        if length == 0:
            return 0.0
        accum = self.get_value(0)
        for index in range(1, length):
            accum = mapfn(index, accum, self.get_value(index))
        return accum

    def fold_right(self, mapfn: Callable[[int, float, float], float]) -> float:
        """Collapse the sequence from right to left."""
        length = len(self)
        if length == 0:
            return 0.0
        accum = self.get_value(length - 1)
        for index in range(length - 2, -1, -1):
            accum = mapfn(index, accum, self.get_value(index))
        return accum

    def min(self) -> float:
        return self.min_max()[0]

    def max(self) -> float:
        return self.min_max()[1]

    def min_max(self) -> Tuple[float, float]:
        """Return ``(min, max)`` in one pass, or ``(0, 0)`` when empty."""
        values = iter(self)
        first = next(values, None)
        if first is None:
            return 0.0, 0.0
        low = high = first
        for value in values:
            if value < low:
                low = value
            if value > high:
                high = value
        return low, high

    def sort(self) -> "Seq":
        """Return the values sorted in ascending order."""
        if len(self) == 0:
            return self
        return Seq(sorted(self.values()))

    def reverse(self) -> "Seq":
        if len(self) == 0:
            return self
        return Seq(self.values()[::-1])

    def median(self) -> float:
        """Return the middle value of the sorted sequence, or 0 when empty."""
        length = len(self)
        if length == 0:
            return 0.0
        ordered = sorted(self.values())
        middle = length // 2
        if length % 2 == 0:
            return (ordered[middle - 1] + ordered[middle]) / 2
        return ordered[middle]

    def sum(self) -> float:
        total = 0.0
        for value in self:
            total += value
        return total

    def average(self) -> float:
        length = len(self)
        if length == 0:
            return 0.0
        return self.sum() / length

    def variance(self) -> float:
        """Population variance."""
        length = len(self)
        if length == 0:
            return 0.0
        m = self.average()
        total = 0.0
        for value in self:
            total += (value - m) * (value - m)
        return total / length

    def std_dev(self) -> float:
        if len(self) == 0:
            return 0.0
        return math.pow(self.variance(), 0.5)

    def percentile(self, percent: float) -> float:
        """Return the value at the relative standing ``percent`` in ``[0, 1]``."""
        length = len(self)
        if length == 0:
            return 0.0
        if percent < 0 or percent > 1.0:
            raise ValueError("percent out of range [0.0, 1.0)")
        ordered = sorted(self.values())
        index = percent * length
        i = int(round_places(index, 0))
        if index.is_integer():
            return (_at(ordered, i - 1) + _at(ordered, i)) / 2.0
        return _at(ordered, i)

    def normalize(self) -> "Seq":
        """Map every value onto the interval ``[0, 1]``."""
        low, high = self.min_max()
        delta = high - low
        return Seq([_divide(value - low, delta) for value in self])


def _at(values: Sequence[float], index: int) -> float:
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range for {len(values)} values")
    return values[index]


def value_sequence(*args: float) -> Seq:
    """Return a sequence over the given values."""
    return Seq([float(v) for v in args])