"""X/Y data kept in insertion order, for charts whose X axis is not continuous."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from gpchart.minmax import MinMax

Point = Tuple[float, float]


@dataclass(frozen=True)
class XYPoint:
    """A single X/Y pair."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


class MixedXYData:
    """Points in the order they were given, with bounds and a read cursor.

    Unlike :class:`gpchart.xydata.XYData` the points are not sorted, so a
    line through them may go back and forth along X.
    """

    def __init__(self) -> None:
        self._points: List[XYPoint] = []
        self.limits = MinMax()
        self._pos = 0

    @property
    def points(self) -> List[XYPoint]:
        """All points in insertion order."""
        return list(self._points)

    def set_data(self, data: Iterable[Iterable[float]]) -> None:
        """Replace all points and recompute the bounds.

        With empty data the points are cleared and the bounds are kept.
        """
        points = [XYPoint(float(x), float(y)) for x, y in data]
        self._points = points
        if not points:
            return
        first = points[0]
        self.limits = MinMax(first.x, first.x, first.y, first.y)
        for point in points:
            self.limits.update(point.x, point.y)

    def push(self, x: float, y: float) -> None:
        """Append a point and widen the bounds to include it."""
        point = XYPoint(float(x), float(y))
        self._points.append(point)
        self.limits.update(point.x, point.y)

    def rewind(self) -> None:
        """Move the cursor to the first point."""
        self._pos = 0

    def next_xy(self) -> Optional[Point]:
        """Point under the cursor, advancing it; ``None`` at the end."""
        if self._pos < len(self._points):
            point = self._points[self._pos]
            self._pos += 1
            return (point.x, point.y)
        return None

    def __iter__(self) -> Iterator[Point]:
        return ((p.x, p.y) for p in list(self._points))

    def __len__(self) -> int:
        return len(self._points)