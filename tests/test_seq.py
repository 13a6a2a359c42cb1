import math

import pytest

from chartkit.seq import Seq, value_sequence


def test_seq_each():
    seen = []
    value_sequence(1, 2, 3, 4).each(lambda i, v: seen.append((i, v)))
    assert seen == [(0, 1), (1, 2), (2, 3), (3, 4)]
    assert [index for index, _ in seen] == [value - 1 for _, value in seen]


def test_seq_map():
    indices = []

    def double(i, v):
        indices.append(i == v - 1)
        return v * 2

    mapped = value_sequence(1, 2, 3, 4).map(double)
    assert len(mapped) == 4
    assert all(indices)
    assert mapped.values() == [2.0, 4.0, 6.0, 8.0]


def test_seq_fold_left():
    assert value_sequence(1, 2, 3, 4).fold_left(lambda _, vp, v: vp + v) == 10
    assert value_sequence(10, 3, 2, 1).fold_left(lambda _, vp, v: vp - v) == 4


def test_seq_fold_right():
    assert value_sequence(1, 2, 3, 4).fold_right(lambda _, vp, v: vp + v) == 10
    assert value_sequence(10, 3, 2, 1).fold_right(lambda _, vp, v: vp - v) == -14


def test_seq_fold_empty_and_single():
    assert value_sequence().fold_left(lambda _, vp, v: vp + v) == 0
    assert value_sequence(7).fold_right(lambda _, vp, v: vp + v) == 7


def test_seq_sum():
    assert value_sequence(1, 2, 3, 4).sum() == 10


def test_seq_average():
    assert value_sequence(1, 2, 3, 4).average() == 2.5
    assert value_sequence(1, 2, 3, 4, 5).average() == 3


def test_sequence_variance():
    assert value_sequence(1, 2, 3, 4, 5).variance() == 2


def test_sequence_std_dev():
    assert value_sequence(1, 2, 3, 4, 5).std_dev() == pytest.approx(math.sqrt(2))


def test_sequence_normalize():
    normalized = value_sequence(1, 2, 3, 4, 5).normalize().values()
    assert len(normalized) == 5
    assert normalized[0] == 0
    assert normalized[1] == 0.25
    assert normalized[4] == 1


def test_min_max():
    seq = value_sequence(3, -2, 8, 1)
    assert seq.min() == -2
    assert seq.max() == 8
    assert seq.min_max() == (-2, 8)
    assert value_sequence().min_max() == (0, 0)


def test_sort_and_reverse():
    seq = value_sequence(3, 1, 2)
    assert seq.sort().values() == [1, 2, 3]
    assert seq.reverse().values() == [2, 1, 3]
    assert seq.values() == [3, 1, 2]


def test_median():
    assert value_sequence(4, 1, 3, 2).median() == 2.5
    assert value_sequence(3, 1, 2).median() == 2
    assert value_sequence().median() == 0


def test_percentile():
    seq = value_sequence(*range(1, 11))
    assert seq.percentile(0.5) == 5.5
    assert seq.percentile(0.25) == 4


def test_percentile_out_of_range_raises():
    with pytest.raises(ValueError):
        value_sequence(1, 2, 3).percentile(1.5)


def test_percentile_beyond_last_value_raises():
    with pytest.raises(IndexError):
        value_sequence(1, 2, 3).percentile(1.0)


class _Squares:
    def __init__(self, count):
        self.count = count

    def __len__(self):
        return self.count

    def get_value(self, index):
        return index * index


def test_seq_over_provider():
    seq = Seq(_Squares(4))
    assert len(seq) == 4
    assert seq.values() == [0, 1, 4, 9]
    assert seq.sum() == 14