import math

import pytest

from chartkit import mathutil


def test_min_max_of_values():
    assert mathutil.min_max(4.0, -1.0, 7.0, 2.0) == (-1.0, 7.0)


def test_min_max_empty_is_zero():
    assert mathutil.min_max() == (0.0, 0.0)


def test_min_int_and_max_int():
    assert mathutil.min_int(5, 3, 9) == 3
    assert mathutil.max_int(5, 3, 9) == 9
    assert mathutil.min_int() == 0
    assert mathutil.max_int() == 0


def test_abs_int():
    assert mathutil.abs_int(-5) == 5
    assert mathutil.abs_int(5) == 5


def test_degrees_radians_round_trip():
    assert mathutil.degrees_to_radians(180.0) == pytest.approx(math.pi)
    assert mathutil.radians_to_degrees(mathutil.degrees_to_radians(45.0)) == pytest.approx(45.0)


def test_percent_to_radians_full_turn():
    assert mathutil.percent_to_radians(0.5) == pytest.approx(math.pi)


def test_radian_add_wraps_into_one_turn():
    result = mathutil.radian_add(3 * math.pi / 2, math.pi)
    assert result == pytest.approx(math.pi / 2)
    negative = mathutil.radian_add(0.0, -math.pi / 2)
    assert negative == pytest.approx(3 * math.pi / 2)
    assert 0 <= negative <= 2 * math.pi


def test_degrees_to_compass_turns_east_to_north():
    assert mathutil.degrees_to_compass(90.0) == 0.0


def test_degrees_add_wraps():
    result = mathutil.degrees_add(350.0, 20.0)
    assert 0 <= result < 360
    assert result == pytest.approx(350.0 + 20.0 - 360.0)


def test_circle_point_at_zero_angle_is_above_center():
    assert mathutil.circle_point(100, 100, 10.0, 0.0) == (100, 90)


def test_rotate_coordinate_zero_angle_is_identity():
    assert mathutil.rotate_coordinate(3, 4, 8, 9, 0.0) == (8, 9)


def test_rotate_coordinate_half_turn_mirrors():
    assert mathutil.rotate_coordinate(0, 0, 5, 0, math.pi) == (-5, 0)


def test_round_up_and_down():
    assert mathutil.round_up(7.0, 5.0) == 10.0
    assert mathutil.round_down(7.0, 5.0) == 5.0


def test_round_with_tiny_step_returns_value():
    assert mathutil.round_up(7.3, 0.0) == 7.3
    assert mathutil.round_down(7.3, -1.0) == 7.3


def test_normalize_worked_example():
    result = mathutil.normalize(4.0, 3.0, 2.0, 1.0)
    assert result == pytest.approx([0.4, 0.3, 0.2, 0.1], abs=1e-4)
    assert sum(result) <= 1.0


def test_mean_and_sums():
    assert mathutil.mean(1.0, 2.0, 3.0, 4.0) == 2.5
    assert math.isnan(mathutil.mean())
    assert mathutil.sum_values(1.5, 2.5) == 4.0
    assert mathutil.sum_int(1, 2, 3) == 6


def test_mean_int_truncates_toward_zero():
    assert mathutil.mean_int(1, 2) == 1
    assert mathutil.mean_int(-1, -2) == -1


def test_mean_int_of_nothing_raises():
    with pytest.raises(ZeroDivisionError):
        mathutil.mean_int()


def test_percent_difference():
    assert mathutil.percent_difference(0.0, 5.0) == 0.0
    assert mathutil.percent_difference(10.0, 15.0) == 0.5


def test_get_round_to_for_delta():
    assert mathutil.get_round_to_for_delta(1000.0) == pytest.approx(10.0)
    assert mathutil.get_round_to_for_delta(0.0) == 0.0


def test_round_places():
    assert mathutil.round_places(1.2345, 2) == pytest.approx(1.23)
    assert mathutil.round_places(-2.5, 0) == -3.0
    assert mathutil.round_places(float("nan"), 2) == 0.0