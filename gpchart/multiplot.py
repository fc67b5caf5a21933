"""A plot holding several named series drawn with one kind of chart layer."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from gpchart.series import Series

Point = Tuple[float, float]


class ChartKind(Enum):
    """What the chart shows of the data."""

    DEFAULT = "default"
    INL = "inl"
    DNL = "dnl"
    FFT = "fft"
    ACCUMULATION = "accumulation"
    CUSTOM = "custom"


class AxisScale(Enum):
    """How an axis is scaled."""

    DEFAULT = "default"
    DISTANCE = "distance"
    N = "n"
    PROCENT = "procent"
    TIME = "time"
    CUSTOM = "custom"


class PlotType(Enum):
    """Which chart layer of a series the plot shows."""

    BAR = "bar"
    LINE = "line"
    AREA = "area"
    POINT = "point"


@dataclass
class _AxisLayer:
    """A scale ruler along one side of the plot."""

    name: str
    align: str
    ticks: bool = False
    visible: bool = True
    draw_outside_margins: bool = False


class MultiPlotLayer:
    """Several series in one plot, each shown through the layer chosen by type.

    ``layers`` is the draw list: the two axes, then one chart layer per
    added series.
    """

    def __init__(
        self,
        label: str,
        x_label: str,
        y_label: str,
        plot_type: PlotType = PlotType.LINE,
    ) -> None:
        self.label = label
        self.plot_type = plot_type
        self.x_label = x_label
        self.y_label = y_label
        self.x_axis = _AxisLayer(x_label, "bottom")
        self.y_axis = _AxisLayer(y_label, "left")

        self.labels: Dict[ChartKind, str] = {kind: label for kind in ChartKind}
        self.x_labels: Dict[ChartKind, str] = {
            ChartKind.DEFAULT: x_label,
            ChartKind.INL: x_label,
            ChartKind.DNL: x_label,
            ChartKind.FFT: "Frequency",
            ChartKind.ACCUMULATION: "Y",
            ChartKind.CUSTOM: "X",
        }
        self.y_labels: Dict[ChartKind, str] = {
            ChartKind.DEFAULT: y_label,
            ChartKind.INL: "INL",
            ChartKind.DNL: "DNL",
            ChartKind.FFT: "Y",
            ChartKind.ACCUMULATION: "Accumulation",
            ChartKind.CUSTOM: "custom",
        }

        self.layers: List[Any] = [self.x_axis, self.y_axis]
        self.series: List[Series] = []
        self.samplerate = 1.0
        self.fft_length = 64
        self.chart_kind = ChartKind.DEFAULT
        self.x_axis_scale = AxisScale.CUSTOM
        self.y_axis_scale = AxisScale.CUSTOM
        self.custom_x_formula = ""
        self.custom_y_formula = ""
        self.custom_yx_formula = ""
        self.refresh_needed = False

    @property
    def current_labels(self) -> Tuple[str, str, str]:
        """Title, X label and Y label for the current chart kind."""
        kind = self.chart_kind
        return (self.labels[kind], self.x_labels[kind], self.y_labels[kind])

    def set_type(self, plot_type: PlotType) -> None:
        """Choose the layer type used for series added from now on."""
        self.plot_type = plot_type

    def add_series(self, label: str) -> Series:
        """Create a series, add its layer of the plot type and return it."""
        series = Series(label)
        self.series.append(series)
        series.set_continuity(True)
        series.set_visible(True)
        series.show_name(False)
        layer = {
            PlotType.BAR: series.bar_layer,
            PlotType.LINE: series.line_layer,
            PlotType.AREA: series.area_layer,
            PlotType.POINT: series.point_layer,
        }.get(self.plot_type)
        if layer is not None:
            self.layers.append(layer)
        return series

    def find_series(self, label: str) -> Optional[Series]:
        """The first series with ``label``, or ``None``."""
        return next((s for s in self.series if s.is_label(label)), None)

    def series_index(self, label: str) -> int:
        """Index of the first series with ``label``; 0 when there is none."""
        return next(
            (index for index, s in enumerate(self.series) if s.is_label(label)), 0
        )

    def push(self, x: float, y: float, label: str) -> None:
        """Add a point to the named series; unknown names are ignored."""
        series = self.find_series(label)
        if series is not None:
            series.push(x, y)
            self.refresh_needed = True

    def clear(self, label: str) -> None:
        """Remove the data of the named series; unknown names are ignored."""
        series = self.find_series(label)
        if series is not None:
            series.clear()
            self.refresh_needed = True

    def refresh_chart(self) -> None:
        """Copy every series' data into its layers."""
        for series in self.series:
            series.refresh()

    def set_pen(self, pen: Any, label: str) -> None:
        """Use ``pen`` for the named series.

        Raises KeyError if there is no such series.
        """
        series = self.find_series(label)
        if series is None:
            raise KeyError(label)
        series.set_pen(pen)

    def delete_series(self, label: str) -> None:
        """Remove the named series and every layer of the plot."""
        series = self.find_series(label)
        if series is not None:
            self.layers.clear()
            self.series.remove(series)

    def data(self, label: str) -> List[Point]:
        """Data of the named series; empty if there is no such series."""
        series = self.find_series(label)
        if series is None:
            return []
        return series.data()

    def min_y(self) -> float:
        """Smallest Y bound over the line layers of all series.

        The largest float when there are no series.
        """
        result = sys.float_info.max
        for series in self.series:
            value = series.line_layer.bounds()[2]
            if value < result:
                result = value
        return result