"""Sorted X/Y data container with bounds, a drawing cursor and derived views.

Points are kept ordered by X; several points may share an X value and
keep the order they were added in. Derived views (DNL, INL, accumulation,
custom formulas and so on) are returned as lists of ``(x, y)`` tuples
ordered by their first element.
"""

from __future__ import annotations

import math
import time
from bisect import bisect_left, bisect_right
from collections import Counter
from operator import attrgetter
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from gpchart import stats
from gpchart.formula import Formula
from gpchart.minmax import MinMax

Point = Tuple[float, float]

_X = attrgetter("x")


class _Entry:
    __slots__ = ("x", "y", "label")

    def __init__(self, x: float, y: float, label: str = "") -> None:
        self.x = x
        self.y = y
        self.label = label


def _divide(a: float, b: float) -> float:
    """Division with IEEE results for a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _sorted_points(points: Iterable[Point]) -> List[Point]:
    return sorted(((float(x), float(y)) for x, y in points), key=lambda p: p[0])


def integrate(data: Iterable[Point]) -> List[Point]:
    """Replace each Y value with the running sum of Y values so far."""
    total = 0.0
    result = []
    for x, y in data:
        total += y
        result.append((x, total))
    return result


class XYData:
    """X/Y points ordered by X, with bounds and a read cursor."""

    def __init__(self) -> None:
        self._entries: List[_Entry] = []
        self.limits = MinMax()
        self.time_holder_enabled = False
        self.times: List[int] = []
        self._checkpoint = 0
        self._first = True
        self._pos = 0
        self._end: Optional[int] = None
        self.boundary_xmin = -1.0
        self.boundary_xmax = -1.0

    def copy(self) -> "XYData":
        """Copy points, bounds, time setting and checkpoint.

        Labels and recorded times are not copied, and the next push
        restarts the bounds from the pushed point.
        """
        other = XYData()
        other._entries = [_Entry(e.x, e.y) for e in self._entries]
        other.limits = MinMax(
            self.limits.x_min, self.limits.x_max, self.limits.y_min, self.limits.y_max
        )
        other.time_holder_enabled = self.time_holder_enabled
        other._checkpoint = self._checkpoint
        return other

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Point]:
        return ((e.x, e.y) for e in list(self._entries))

    @property
    def points(self) -> List[Point]:
        """All points as a list of ``(x, y)`` tuples."""
        return list(self)

    def is_empty(self) -> bool:
        """True if there are no points."""
        return not self._entries

    def min_x_nonzero(self) -> float:
        """Smallest X whose Y is positive, or 0.0 if there is none."""
        for e in self._entries:
            if e.y > 0:
                return e.x
        return 0.0

    def max_x_nonzero(self) -> float:
        """Largest X whose Y is positive, or -1.0 if there is none."""
        for e in reversed(self._entries):
            if e.y > 0:
                return e.x
        return -1.0

    def use_time_holder(self, hold: bool) -> None:
        """Record the wall-clock time of every pushed point when enabled."""
        self.time_holder_enabled = bool(hold)

    def set_time_holder(self, times: Optional[Iterable[int]]) -> None:
        """Replace the recorded times; ``None`` leaves them unchanged."""
        if times is not None:
            self.times = list(times)

    def last_data(self, amount: int) -> List[Point]:
        """Tail of the data.

        With fewer points than ``amount`` all points are returned.
        Otherwise the last ``amount + 1`` points are returned, and none
        at all when ``amount`` equals the number of points.
        """
        size = len(self._entries)
        if size < amount:
            return list(self)
        start = size - amount - 1
        if start < 0 or start >= size:
            return []
        return [(e.x, e.y) for e in self._entries[start:]]

    def checkpoint(self) -> None:
        """Remember the current number of points as an offset."""
        self._checkpoint = len(self._entries)

    def data_from_checkpoint(self) -> List[Point]:
        """Points after the remembered offset."""
        return [(e.x, e.y) for e in self._entries[self._checkpoint:]]

    def fill_zeros(self, minimum: float, maximum: float, interval: float = 1.0) -> None:
        """Add a zero point at each step in ``[minimum, maximum)`` with no point."""
        if interval <= 0:
            raise ValueError("interval must be positive")
        x = minimum
        while x < maximum:
            index = bisect_left(self._entries, x, key=_X)
            if index == len(self._entries) or self._entries[index].x != x:
                self._entries.insert(index, _Entry(float(x), 0.0))
            x += interval

    def init_zeros(self) -> None:
        """Set every Y value to zero; the cursor ends past the last point."""
        for e in self._entries:
            e.y = 0.0
        self._pos = len(self._entries)

    def set_data(self, data: Optional[Iterable[Point]]) -> None:
        """Replace all points and recompute the bounds.

        Empty or missing data leaves everything unchanged.
        """
        if data is None:
            return
        points = _sorted_points(data)
        if not points:
            return
        self._entries = [_Entry(x, y) for x, y in points]
        x0, y0 = points[0]
        self.limits = MinMax(x0, x0, y0, y0)
        self._first = False
        for x, y in points:
            self.limits.update(x, y)
        self.rewind()

    def push(self, x: float, y: float, label: Optional[str] = None) -> None:
        """Insert one point, optionally labelled, and widen the bounds."""
        x, y = float(x), float(y)
        index = bisect_right(self._entries, x, key=_X)
        self._entries.insert(index, _Entry(x, y, label or ""))
        if self._first:
            self._first = False
            self.limits = MinMax(x, x, y, y)
        else:
            self.limits.update(x, y)
        if self.time_holder_enabled:
            self.times.append(int(time.time()))

    def push_many(self, data: Iterable[Point]) -> None:
        """Insert several points and widen the bounds."""
        for x, y in list(data):
            index = bisect_right(self._entries, float(x), key=_X)
            self._entries.insert(index, _Entry(float(x), float(y)))
            if self._first:
                self._first = False
                self.limits = MinMax(float(x), float(x), float(y), float(y))
            else:
                self.limits.update(float(x), float(y))

    def push_unique(self, x: float, y: float) -> None:
        """Insert a point after removing one existing point with the same X."""
        x = float(x)
        index = bisect_left(self._entries, x, key=_X)
        if index < len(self._entries) and self._entries[index].x == x:
            del self._entries[index]
        self.push(x, y)

    def clear(self) -> None:
        """Remove all points and the checkpoint."""
        self._entries.clear()
        self._checkpoint = 0
        self._first = True
        self.rewind()

    def data_without_zeros(self) -> List[Point]:
        """Points whose Y is not zero."""
        return [(e.x, e.y) for e in self._entries if e.y != 0]

    def data_without_end_zeros(self) -> List[Point]:
        """Points from the first non-zero Y up to, not including, the last one.

        When every Y is zero all points are returned.
        """
        nonzero = [i for i, e in enumerate(self._entries) if e.y != 0]
        if not nonzero:
            return list(self)
        return [(e.x, e.y) for e in self._entries[nonzero[0]:nonzero[-1]]]

    @property
    def _stop(self) -> int:
        size = len(self._entries)
        return size if self._end is None else min(self._end, size)

    def current_bounds(self, xmin: float, xmax: float) -> None:
        """Limit the cursor to the visible X range plus one point each side."""
        self.boundary_xmin = xmin
        self.boundary_xmax = xmax
        size = len(self._entries)
        pos = self._pos
        while pos < size and xmin >= self._entries[pos].x:
            pos += 1
        self._pos = pos
        if pos >= size:
            return
        if pos > 0:
            pos -= 1
            self._pos = pos
        end = pos
        while end < size and xmax >= self._entries[end].x:
            end += 1
        if end < size:
            end += 1
        self._end = end

    def rewind(self) -> None:
        """Move the cursor to the first point and drop any bound limit."""
        self._pos = 0
        self._end = None

    def forward(self) -> None:
        """Move the cursor past the last point."""
        self._pos = len(self._entries)

    def next_xy(self) -> Optional[Point]:
        """Point under the cursor, advancing it; ``None`` at the end."""
        if self._pos < self._stop:
            e = self._entries[self._pos]
            self._pos += 1
            return (e.x, e.y)
        return None

    def next_labeled_xy(self) -> Optional[Tuple[float, float, str]]:
        """Like :meth:`next_xy` with the point's label ("" if none)."""
        if self._pos < self._stop:
            label = self._entries[self._pos].label
            x, y = self.next_xy()
            return (x, y, label)
        return None

    def multiply_y(self, mul: float, offset: float = 0.0) -> None:
        """Set each Y to ``y * mul + offset`` and recompute the Y bounds."""
        self._first = True
        for e in self._entries:
            e.y = e.y * mul + offset
            if self._first:
                self._first = False
                self.limits.y_min = self.limits.y_max = e.y
            self.limits.update_y(e.y)

    def multiply_x(self, mul: float, offset: float = 0.0) -> None:
        """Set each X to ``x * mul + offset``, reorder and recompute X bounds."""
        self._first = True
        entries = []
        for e in self._entries:
            x = e.x * mul + offset
            entries.append(_Entry(x, e.y, e.label))
            if self._first:
                self._first = False
                self.limits.x_min = self.limits.x_max = x
            self.limits.update_x(x)
        entries.sort(key=_X)
        self._entries = entries
        self.rewind()

    def convert_to_time(self) -> None:
        """Replace X values with the recorded times.

        Does nothing unless the time holder is enabled and there is one
        time per point.
        """
        if not self.time_holder_enabled or len(self.times) != len(self._entries):
            return
        points = _sorted_points((t, e.y) for t, e in zip(self.times, self._entries))
        self._entries = [_Entry(x, y) for x, y in points]
        self.rewind()

    def custom(self, x_formula: str, y_formula: str) -> List[Point]:
        """Points mapped through formulas over the variables ``X`` and ``Y``.

        An empty formula keeps that coordinate as it is.
        """
        x_form = Formula(x_formula)
        y_form = Formula(y_formula)
        result = []
        for px, py in self:
            x, y = px, py
            if x_formula:
                x_form.add_variable("X", px)
                x_form.add_variable("Y", py)
                x = float(x_form)
            if y_formula:
                y_form.add_variable("X", px)
                y_form.add_variable("Y", py)
                y = float(y_form)
            result.append((x, y))
        return _sorted_points(result)

    def dnl(
        self,
        arith_mean: bool = False,
        expected: Optional[float] = None,
        expected_vector: Optional[Sequence[float]] = None,
    ) -> List[Point]:
        """Differential non-linearity of the Y values.

        With ``arith_mean`` each Y becomes ``(y - mean) / mean``. With a
        vector each Y becomes ``(y - e) / e`` for its own expected value,
        and an empty list is returned when the vector length differs from
        the data. Otherwise, with ``E`` the given expected value or
        ``ysum / (max_x + 1)``, each Y becomes ``(y / E - 1) / E``.
        """
        if arith_mean and expected_vector is not None:
            raise ValueError("arith_mean and expected_vector cannot be combined")
        if not self._entries:
            return []
        e_value = 0.0
        if arith_mean:
            e_value = stats.arithmetic_mean(self)
        elif expected is not None:
            e_value = float(expected)
        elif expected_vector is None:
            e_value = _divide(stats.y_sum(self), self.limits.x_max + 1)
        elif len(expected_vector) != len(self._entries):
            return []

        result = []
        index = 0
        self.rewind()
        while (point := self.next_xy()) is not None:
            x, y = point
            if expected_vector is not None:
                reference = float(expected_vector[index])
                index += 1
                y = _divide(y - reference, reference)
            elif arith_mean:
                y = _divide(y - e_value, e_value)
            else:
                y = _divide(_divide(y, e_value) - 1, e_value)
            result.append((x, y))
        return _sorted_points(result)

    def inl(
        self,
        arith_mean: bool = False,
        expected: Optional[float] = None,
        expected_vector: Optional[Sequence[float]] = None,
    ) -> List[Point]:
        """Integral non-linearity: the running sum of :meth:`dnl`."""
        return integrate(self.dnl(arith_mean, expected, expected_vector))

    def accumulation(self, in_percent: bool = False) -> List[Point]:
        """How often each Y value occurs, as ``(y, count)`` ordered by Y.

        With ``in_percent`` the count is a percentage of all points.
        """
        counts: Counter = Counter()
        self.rewind()
        while (point := self.next_xy()) is not None:
            counts[point[1]] += 1
        total = sum(counts.values())
        result = []
        for y in sorted(counts):
            value = float(counts[y])
            if in_percent:
                value = value / total * 100.0
            result.append((y, value))
        return result

    def arithmetic_mean(self) -> float:
        """Arithmetic mean of the Y values."""
        return stats.arithmetic_mean(self)

    def median(self) -> float:
        """Y value of the middle point in X order."""
        return stats.median(self)

    def standard_deviation(self) -> float:
        """Sample standard deviation of the Y values."""
        return stats.standard_deviation(self)

    def y_sum(self) -> float:
        """Sum of the Y values."""
        return stats.y_sum(self)