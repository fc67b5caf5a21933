"""A named data series drawn by line, bar, area and point layers."""

from __future__ import annotations

from typing import Any, List, Tuple

from gpchart.layers import AreaChartLayer, BarChartLayer, LineChartLayer
from gpchart.xydata import XYData

Point = Tuple[float, float]


class Series:
    """Data of one series and the chart layers that show it.

    Data pushed into the series reaches the layers on :meth:`refresh`.
    """

    def __init__(self, label: str) -> None:
        self.label = label
        self._data = XYData()
        self.line_layer = LineChartLayer(label)
        self.bar_layer = BarChartLayer(label)
        self.area_layer = AreaChartLayer(label)
        self.point_layer = LineChartLayer(label)
        self.bar_layer.style.gradient_background = False
        self.point_layer.style.point_shape = "circle"
        self.point_layer.style.continuity = False

    @property
    def layers(self) -> Tuple[LineChartLayer, BarChartLayer, AreaChartLayer, LineChartLayer]:
        """The line, bar, area and point layers."""
        return (self.line_layer, self.bar_layer, self.area_layer, self.point_layer)

    def push(self, x: float, y: float) -> None:
        """Add a point to the series data."""
        self._data.push(x, y)

    def refresh(self) -> None:
        """Copy the series data into every layer.

        Empty data leaves the layers as they are.
        """
        points = self._data.points
        for layer in self.layers:
            layer.set_data(points)

    def is_label(self, label: str) -> bool:
        """True if ``label`` is this series' label."""
        return label == self.label

    def set_continuity(self, continuity: bool) -> None:
        """Set continuity of the line, bar and area layers."""
        for layer in (self.line_layer, self.bar_layer, self.area_layer):
            layer.style.continuity = continuity

    def set_visible(self, show: bool) -> None:
        """Show or hide every layer."""
        for layer in self.layers:
            layer.style.visible = show

    def show_name(self, show: bool) -> None:
        """Show or hide the name on every layer."""
        for layer in self.layers:
            layer.style.show_name = show

    def set_pen(self, pen: Any) -> None:
        """Use ``pen`` on every layer."""
        for layer in self.layers:
            layer.style.pen = pen

    def set_brush(self, brush: Any) -> None:
        """Use ``brush`` on every layer."""
        for layer in self.layers:
            layer.style.brush = brush

    def invert(self, value: bool) -> None:
        """Invert or restore the drawing of every layer."""
        for layer in self.layers:
            layer.style.inverted = value

    def clear(self) -> None:
        """Remove all data from the series."""
        self._data.clear()

    def data(self) -> List[Point]:
        """The series data ordered by X."""
        return self._data.points