"""Descriptive statistics over sequences of ``(x, y)`` points.

Unless stated otherwise the statistics are taken over the Y values,
in the order the points are given.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, List, Mapping, Tuple

Point = Tuple[float, float]


class Axis(Enum):
    """Coordinate a statistic is taken over."""

    X = "x"
    Y = "y"


class DeviationCenter(Enum):
    """Reference value for the average absolute deviation."""

    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"


def _ys(points: Iterable[Point]) -> List[float]:
    return [float(y) for _, y in points]


def _require(values: List[float], minimum: int = 1) -> None:
    if len(values) < minimum:
        raise ValueError(f"at least {minimum} point(s) required, got {len(values)}")


def _divide(a: float, b: float) -> float:
    """Division with IEEE results for a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def arithmetic_mean(points: Iterable[Point]) -> float:
    """Sum of the Y values divided by their count."""
    ys = _ys(points)
    _require(ys)
    return sum(ys) / len(ys)


def geometric_mean(points: Iterable[Point]) -> float:
    """n-th root of the product of the Y values; NaN if undefined."""
    ys = _ys(points)
    _require(ys)
    product = math.prod(ys)
    try:
        return math.pow(product, 1.0 / len(ys))
    except ValueError:
        return math.nan


def harmonic_mean(points: Iterable[Point]) -> float:
    """Count divided by the sum of reciprocals of the Y values."""
    ys = _ys(points)
    _require(ys)
    reciprocal_sum = sum(_divide(1.0, y) for y in ys)
    return _divide(float(len(ys)), reciprocal_sum)


def weighted_mean(points: Iterable[Point], weights: Mapping[int, float]) -> float:
    """Weighted mean of the Y values.

    ``weights`` maps the 1-based position of a point to its weight; a
    position without an entry weighs zero. Returns -1.0 when there are
    more points than weights.
    """
    ys = _ys(points)
    _require(ys)
    total = 0.0
    for index, y in enumerate(ys, start=1):
        if len(weights) < index:
            return -1.0
        total += y * weights.get(index, 0.0)
    return total / len(ys)


def quadratic_mean(points: Iterable[Point]) -> float:
    """Root mean square of the Y values."""
    ys = _ys(points)
    _require(ys)
    return math.sqrt(sum(y * y for y in ys) / len(ys))


def midrange(points: Iterable[Point], axis: Axis = Axis.X) -> float:
    """Half the spread between the largest and smallest value on ``axis``.

    Returns 0.0 for no points.
    """
    values = [float(x if axis is Axis.X else y) for x, y in points]
    if not values:
        return 0.0
    return (max(values) - min(values)) / 2.0


def standard_deviation(points: Iterable[Point]) -> float:
    """Sample standard deviation of the Y values."""
    ys = _ys(points)
    _require(ys, 2)
    mean = sum(ys) / len(ys)
    return math.sqrt(sum((y - mean) ** 2 for y in ys) / (len(ys) - 1))


def average_absolute_deviation(
    points: Iterable[Point],
    center: DeviationCenter = DeviationCenter.MEAN,
    mode: float = 0.0,
) -> float:
    """Mean absolute distance of the Y values from a center.

    With ``DeviationCenter.MODE`` the center is the given ``mode``.
    """
    pts = list(points)
    ys = _ys(pts)
    _require(ys)
    if center is DeviationCenter.MEDIAN:
        reference = median(pts)
    elif center is DeviationCenter.MODE:
        reference = float(mode)
    else:
        reference = sum(ys) / len(ys)
    return sum(abs(y - reference) for y in ys) / len(ys)


def median(points: Iterable[Point]) -> float:
    """Y value of the middle point in the given order (not sorted).

    For an even count the later of the two middle points is used.
    Returns 0.0 for no points.
    """
    ys = _ys(points)
    if not ys:
        return 0.0
    return ys[len(ys) // 2]


def y_sum(points: Iterable[Point]) -> float:
    """Sum of the Y values."""
    return sum(_ys(points))


def x_sum(points: Iterable[Point]) -> float:
    """Sum of the X values."""
    return sum(float(x) for x, _ in points)