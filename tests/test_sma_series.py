from dataclasses import dataclass
from typing import List

import pytest

from chartkit.sma_series import SMASeries


@dataclass
class MockValues:
    xs: List[float]
    ys: List[float]

    def __len__(self):
        return min(len(self.xs), len(self.ys))

    def get_values(self, index):
        if index < 0 or index >= len(self):
            raise IndexError(index)
        return self.xs[index], self.ys[index]


def _ascending(n):
    return [float(v) for v in range(1, n + 1)]


def _descending(n):
    return [float(v) for v in range(n, 0, -1)]


def test_get_value():
    mock = MockValues(_ascending(10), _descending(10))
    assert len(mock) == 10
    sma = SMASeries(inner_series=mock, period=10)
    yvalues = [sma.get_values(i)[1] for i in range(len(sma))]
    assert yvalues[:9] == [10.0, 9.5, 9.0, 8.5, 8.0, 7.5, 7.0, 6.5, 6.0]


def test_get_last_value_window_overlap():
    mock = MockValues(_ascending(10), _descending(10))
    sma = SMASeries(inner_series=mock, period=15)
    yvalues = [sma.get_values(i)[1] for i in range(len(sma))]
    lx, ly = sma.get_last_values()
    assert lx == 10.0
    assert ly == 5.5
    assert yvalues[-1] == ly


def test_get_last_value():
    mock = MockValues(_ascending(100), _descending(100))
    assert len(mock) == 100
    sma = SMASeries(inner_series=mock, period=10)
    yvalues = [sma.get_values(i)[1] for i in range(len(sma))]
    lx, ly = sma.get_last_values()
    assert lx == 100.0
    assert ly == 6
    assert yvalues[-1] == ly


def test_first_values_match_index_zero():
    mock = MockValues(_ascending(10), _descending(10))
    sma = SMASeries(inner_series=mock, period=3)
    assert sma.get_first_values() == sma.get_values(0)
    assert sma.get_first_values() == (1.0, 10.0)


def test_get_period_defaults():
    assert SMASeries().get_period() == 16
    assert SMASeries().get_period(4) == 4
    assert SMASeries(period=7).get_period(4) == 7


def test_empty_inner_gives_zero():
    sma = SMASeries(inner_series=MockValues([], []))
    assert sma.get_values(0) == (0.0, 0.0)
    assert sma.get_last_values() == (0.0, 0.0)


def test_validate_requires_inner():
    with pytest.raises(ValueError):
        SMASeries().validate()