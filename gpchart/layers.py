"""Chart layers: X/Y data together with a label and drawing style."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from gpchart.mixed import MixedXYData
from gpchart.xydata import XYData

Bounds = Tuple[float, float, float, float]


@dataclass
class LayerStyle:
    """How a layer is to be drawn."""

    continuity: bool = False
    visible: bool = True
    show_name: bool = True
    pen: Any = None
    brush: Any = None
    inverted: bool = False
    draw_outside_margins: bool = False
    gradient_background: bool = True
    point_shape: Optional[str] = None


class _XYLayer(XYData):
    def __init__(self, label: str = "") -> None:
        super().__init__()
        self.label = label
        self.style = LayerStyle()

    def _data_bounds(self) -> Bounds:
        limits = self.limits
        return (limits.x_min, limits.x_max, limits.y_min, limits.y_max)


class LineChartLayer(_XYLayer):
    """Line chart over X-sorted data."""

    def __init__(self, label: str = "") -> None:
        super().__init__(label)

    def bounds(self) -> Bounds:
        """``(x_min, x_max, y_min, y_max)`` of the data."""
        return self._data_bounds()


class AreaChartLayer(LineChartLayer):
    """Filled area chart over X-sorted data."""

    def __init__(self, label: str = "") -> None:
        super().__init__(label)


class BarChartLayer(_XYLayer):
    """Vertical bar chart; each bar is ``lsb`` wide along X."""

    def __init__(self, label: str = "") -> None:
        super().__init__(label)
        self.lsb = 1.0

    def bounds(self) -> Bounds:
        """Data bounds with X widened by half a bar on each side."""
        x_min, x_max, y_min, y_max = self._data_bounds()
        half = self.lsb / 2
        return (x_min - half, x_max + half, y_min, y_max)


class YBarChartLayer(_XYLayer):
    """Horizontal bar chart; each bar is ``lsb`` high along Y."""

    def __init__(self, label: str = "") -> None:
        super().__init__(label)
        self.lsb = 1.0

    def bounds(self) -> Bounds:
        """Data bounds with Y widened by half a bar on each side."""
        x_min, x_max, y_min, y_max = self._data_bounds()
        half = self.lsb / 2
        return (x_min, x_max, y_min - half, y_max + half)


class MixedLineChartLayer(MixedXYData):
    """Line chart through points in insertion order."""

    def __init__(self, label: str = "") -> None:
        super().__init__()
        self.label = label
        self.style = LayerStyle()