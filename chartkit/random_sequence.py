"""A sequence of random values."""

from __future__ import annotations

import random
import time
from typing import List, Optional

from .seq import Seq

_MAX_INT32 = 2147483647


class RandomSequence:
    """Generates uniformly distributed random values on demand."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(int(time.time()))
        self.minimum: Optional[float] = None
        self.maximum: Optional[float] = None
        self.length: Optional[int] = None

    def __len__(self) -> int:
        """Number of values to generate; effectively unbounded if unset."""
        return self.length if self.length is not None else _MAX_INT32

    def get_value(self, index: int) -> float:
        """Return a new random value; the index is ignored."""
        if self.minimum is not None and self.maximum is not None:
            delta = abs(self.maximum - self.minimum)
            return self.minimum + self._rng.random() * delta
        if self.maximum is not None:
            return self._rng.random() * self.maximum
        if self.minimum is not None:
            return self.minimum + self._rng.random()
        return self._rng.random()

    def with_len(self, length: int) -> "RandomSequence":
        self.length = length
        return self

    def with_min(self, minimum: float) -> "RandomSequence":
        self.minimum = minimum
        return self

    def with_max(self, maximum: float) -> "RandomSequence":
        self.maximum = maximum
        return self


def random_values(count: int) -> List[float]:
    """Return ``count`` random values in ``[0, 1)``."""
    return Seq(RandomSequence().with_len(count)).values()


def random_values_with_max(count: int, maximum: float) -> List[float]:
    """Return ``count`` random values in ``[0, maximum)``."""
    return Seq(RandomSequence().with_max(maximum).with_len(count)).values()