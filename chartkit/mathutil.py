"""Numeric helpers shared by the series and chart code."""

from __future__ import annotations

import math
from typing import List, Tuple

from .matrix import _divide

_PI = math.pi
_2PI = 2 * math.pi
_D2R = math.pi / 180.0
_R2D = 180.0 / math.pi
_MIN_ROUND_TO = 0.000000000000001


def _mod(x: float, y: float) -> float:
    """Floating remainder with the sign of ``x``; non-finite input gives NaN."""
    if math.isnan(x) or math.isinf(x) or math.isnan(y) or y == 0:
        return math.nan
    return math.fmod(x, y)


def min_max(*args: float) -> Tuple[float, float]:
    """Return ``(min, max)`` of the values, or ``(0, 0)`` when there are none."""
    if not args:
        return 0.0, 0.0
    low = high = args[0]
    for value in args[1:]:
        if value < low:
            low = value
        if value > high:
            high = value
    return low, high


def min_int(*args: int) -> int:
    """Return the smallest value, or 0 when there are none."""
    if not args:
        return 0
    return min(args)


def max_int(*args: int) -> int:
    """Return the largest value, or 0 when there are none."""
    if not args:
        return 0
    return max(args)


def abs_int(value: int) -> int:
    return -value if value < 0 else value


def degrees_to_radians(degrees: float) -> float:
    return degrees * _D2R


def radians_to_degrees(value: float) -> float:
    """Convert radians to degrees, wrapping at a full turn."""
    return _mod(value, _2PI) * _R2D


def percent_to_radians(pct: float) -> float:
    """Convert a fraction of a full circle to radians."""
    return degrees_to_radians(360.0 * pct)


def radian_add(base: float, delta: float) -> float:
    """Add two angles in radians, wrapping into the range of one turn."""
    value = base + delta
    if value > _2PI:
        return _mod(value, _2PI)
    if value < 0:
        return _mod(_2PI + value, _2PI)
    return value


def degrees_add(base_degrees: float, delta_degrees: float) -> float:
    """Add two angles in degrees, wrapping into the range of one turn."""
    value = base_degrees + delta_degrees
    if value > _2PI:
        return _mod(value, 360.0)
    if value < 0:
        return _mod(360.0 + value, 360.0)
    return value


def degrees_to_compass(deg: float) -> float:
    """Return the angle in compass (clock) orientation."""
    return degrees_add(deg, -90.0)


def circle_point(cx: int, cy: int, radius: float, theta_radians: float) -> Tuple[int, int]:
    """Return the point on a circle around ``(cx, cy)`` at the given angle."""
    x = cx + int(radius * math.sin(theta_radians))
    y = cy - int(radius * math.cos(theta_radians))
    return x, y


def rotate_coordinate(
    cx: int, cy: int, x: int, y: int, theta_radians: float
) -> Tuple[int, int]:
    """Rotate ``(x, y)`` around ``(cx, cy)`` by an angle in radians."""
    dx, dy = float(x - cx), float(y - cy)
    cos_t, sin_t = math.cos(theta_radians), math.sin(theta_radians)
    rotated_x = dx * cos_t - dy * sin_t
    rotated_y = dx * sin_t + dy * cos_t
    return int(rotated_x) + cx, int(rotated_y) + cy


def round_up(value: float, round_to: float) -> float:
    """Round up to a multiple of ``round_to``."""
    if round_to < _MIN_ROUND_TO:
        return value
    quotient = value / round_to
    if not math.isfinite(quotient):
        return quotient * round_to
    return math.ceil(quotient) * round_to


def round_down(value: float, round_to: float) -> float:
    """Round down to a multiple of ``round_to``."""
    if round_to < _MIN_ROUND_TO:
        return value
    quotient = value / round_to
    if not math.isfinite(quotient):
        return quotient * round_to
    return math.floor(quotient) * round_to


def normalize(*args: float) -> List[float]:
    """Scale the values so that they sum to at most 1, rounded down to 4 places."""
    total = sum_values(*args)
    return [round_down(_divide(v, total), 0.0001) for v in args]


def mean(*args: float) -> float:
    """Arithmetic mean; NaN for no values."""
    return _divide(sum_values(*args), float(len(args)))


def mean_int(*args: int) -> int:
    """Integer mean, truncated toward zero."""
    if not args:
        raise ZeroDivisionError("mean of no values")
    total, count = sum_int(*args), len(args)
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def sum_values(*args: float) -> float:
    total = 0.0
    for value in args:
        total += value
    return total


def sum_int(*args: int) -> int:
    return sum(args)


def percent_difference(v1: float, v2: float) -> float:
    """Return ``(v2 - v1) / v1``, or 0 when ``v1`` is 0."""
    if v1 == 0:
        return 0.0
    return (v2 - v1) / v1
    

def get_round_to_for_delta(delta: float) -> float:
    """Return a rounding step suited to a range of the given size."""
    cursor = math.pow(10.0, 10.0)
    while cursor > 0:
        if delta > cursor:
            return cursor / 10.0
        cursor /= 10.0
    return 0.0


def round_places(value: float, places: int) -> float:
    """Round half away from zero to the given number of decimal places."""
    if math.isnan(value):
        return 0.0
    sign = 1.0
    if value < 0:
        sign = -1.0
        value = -value
    try:
        precision = math.pow(10, places)
    except OverflowError:
        precision = math.inf
    digit = value * precision
    if not math.isfinite(digit):
        rounded = digit
    else:
        fraction = math.modf(digit)[0]
        rounded = float(math.ceil(digit) if fraction >= 0.5 else math.floor(digit))
    return _divide(rounded, precision) * sign