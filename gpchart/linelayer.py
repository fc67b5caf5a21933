"""A line plot holding several named series, with per-chart-kind labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set, Tuple

from gpchart.multiplot import AxisScale, ChartKind
from gpchart.series import Series

Point = Tuple[float, float]

# Which axis scales the axis menus offer for each chart kind: (x, y).
_AXIS_MENU: Dict[ChartKind, Dict[AxisScale, Tuple[bool, bool]]] = {
    ChartKind.DEFAULT: {
        AxisScale.DEFAULT: (True, True),
        AxisScale.DISTANCE: (False, False),
        AxisScale.N: (False, False),
        AxisScale.PROCENT: (False, True),
        AxisScale.TIME: (True, False),
        AxisScale.CUSTOM: (True, True),
    },
    ChartKind.DNL: {
        AxisScale.DEFAULT: (True, True),
        AxisScale.DISTANCE: (False, False),
        AxisScale.N: (True, False),
        AxisScale.PROCENT: (False, True),
        AxisScale.TIME: (True, False),
        AxisScale.CUSTOM: (False, False),
    },
    ChartKind.INL: {
        AxisScale.DEFAULT: (True, True),
        AxisScale.DISTANCE: (False, False),
        AxisScale.N: (True, False),
        AxisScale.PROCENT: (False, True),
        AxisScale.TIME: (True, False),
        AxisScale.CUSTOM: (False, False),
    },
    ChartKind.ACCUMULATION: {
        AxisScale.DEFAULT: (True, True),
        AxisScale.DISTANCE: (False, False),
        AxisScale.N: (False, False),
        AxisScale.PROCENT: (True, True),
        AxisScale.TIME: (False, False),
        AxisScale.CUSTOM: (False, False),
    },
}


@dataclass
class _Axis:
    """A scale ruler along one side of the plot."""

    name: str
    align: str
    ticks: bool = True
    visible: bool = True
    draw_outside_margins: bool = False


class LineLayer:
    """Several series in one line plot.

    ``layers`` is the draw list and starts with the two axes; series are
    kept in ``series`` and are not added to the draw list.
    """

    def __init__(self, label: str, x_label: str, y_label: str) -> None:
        self.label = label
        self.x_label = x_label
        self.y_label = y_label
        self.x_axis = _Axis(x_label, "bottom")
        self.y_axis = _Axis(y_label, "left")

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

        self.chart_menu: Set[ChartKind] = set(ChartKind)
        self.axis_menu: Dict[ChartKind, Dict[AxisScale, Tuple[bool, bool]]] = {
            kind: dict(scales) for kind, scales in _AXIS_MENU.items()
        }

        self.layers: List[Any] = [self.x_axis, self.y_axis]
        self.series: List[Series] = []
        self.samplerate = 1.0
        self.fft_length = 64
        self.chart_kind = ChartKind.DEFAULT
        self.x_axis_scale = AxisScale.DEFAULT
        self.y_axis_scale = AxisScale.DEFAULT
        self.custom_x_formula = ""
        self.custom_y_formula = ""
        self.custom_yx_formula = ""
        self.refresh_needed = False

    @property
    def current_labels(self) -> Tuple[str, str, str]:
        """Title, X label and Y label for the current chart kind."""
        kind = self.chart_kind
        return (self.labels[kind], self.x_labels[kind], self.y_labels[kind])

    def set_formula(self, y_formula: str, x_formula: str = "") -> None:
        """Set the custom chart formulas and their axis labels.

        Both stored formulas take the text of ``x_formula``; the Y label
        shows it, and the X label changes only when it is non-empty.
        """
        self.custom_x_formula = x_formula
        self.custom_y_formula = x_formula
        self.y_labels[ChartKind.CUSTOM] = "Y= " + self.custom_y_formula
        if self.custom_x_formula:
            self.x_labels[ChartKind.CUSTOM] = "X= " + self.custom_x_formula

    def add_series(self, label: str) -> Series:
        """Create a continuous, visible, unnamed series and return it."""
        series = Series(label)
        self.series.append(series)
        series.set_continuity(True)
        series.set_visible(True)
        series.show_name(False)
        return series

    def find_series(self, label: str) -> Optional[Series]:
        """The first series with ``label``, or ``None``."""
        return next((s for s in self.series if s.is_label(label)), None)

    def series_index(self, label: str) -> int:
        """Index of the first series with ``label``; the series count if none."""
        return next(
            (index for index, s in enumerate(self.series) if s.is_label(label)),
            len(self.series),
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

    def delete_series(self, label: str) -> None:
        """Drop every layer of the plot if the named series exists.

        The series itself stays in ``series``.
        """
        if self.find_series(label) is not None:
            self.layers.clear()

    def data(self, label: str) -> List[Point]:
        """Data of the named series.

        Raises KeyError if there is no such series.
        """
        series = self.find_series(label)
        if series is None:
            raise KeyError(label)
        return series.data()