import sys

import pytest

from gpchart.multiplot import AxisScale, ChartKind, MultiPlotLayer, PlotType


@pytest.fixture
def plot():
    return MultiPlotLayer("title", "time", "value", PlotType.LINE)


def test_defaults(plot):
    assert plot.samplerate == 1.0
    assert plot.fft_length == 64
    assert plot.chart_kind is ChartKind.DEFAULT
    assert plot.x_axis_scale is AxisScale.CUSTOM
    assert plot.y_axis_scale is AxisScale.CUSTOM
    assert plot.current_labels == ("title", "time", "value")
    assert len(plot.layers) == 2


def test_labels_per_chart_kind(plot):
    assert plot.y_labels[ChartKind.INL] == "INL"
    assert plot.y_labels[ChartKind.DNL] == "DNL"
    assert plot.x_labels[ChartKind.FFT] == "Frequency"
    assert plot.y_labels[ChartKind.ACCUMULATION] == "Accumulation"
    assert plot.x_labels[ChartKind.INL] == "time"
    assert all(v == "title" for v in plot.labels.values())


@pytest.mark.parametrize(
    "plot_type, layer_attr",
    [
        (PlotType.LINE, "line_layer"),
        (PlotType.BAR, "bar_layer"),
        (PlotType.AREA, "area_layer"),
        (PlotType.POINT, "point_layer"),
    ],
)
def test_add_series_adds_layer_of_type(plot_type, layer_attr):
    plot = MultiPlotLayer("t", "x", "y", plot_type)
    series = plot.add_series("a")
    assert plot.layers[-1] is getattr(series, layer_attr)
    assert len(plot.layers) == 3


def test_add_series_style(plot):
    series = plot.add_series("a")
    assert series.line_layer.style.continuity is True
    assert series.line_layer.style.visible is True
    assert series.line_layer.style.show_name is False
    assert series.point_layer.style.continuity is False


def test_set_type_affects_later_series(plot):
    plot.set_type(PlotType.BAR)
    first = plot.add_series("a")
    assert plot.layers[-1] is first.bar_layer
    plot.set_type(PlotType.AREA)
    second = plot.add_series("b")
    assert plot.layers[-1] is second.area_layer
    assert len(plot.layers) == 4


def test_find_series_and_index(plot):
    a = plot.add_series("a")
    b = plot.add_series("b")
    assert plot.find_series("a") is a
    assert plot.find_series("b") is b
    assert plot.find_series("missing") is None
    assert plot.series_index("b") == 1
    assert plot.series_index("missing") == 0


def test_push_and_data_sorted(plot):
    plot.add_series("a")
    plot.push(3, 30, "a")
    plot.push(1, 10, "a")
    assert plot.refresh_needed is True
    assert plot.data("a") == [(1.0, 10.0), (3.0, 30.0)]


def test_push_unknown_series_ignored(plot):
    plot.push(1, 2, "missing")
    assert plot.refresh_needed is False
    assert plot.data("missing") == []


def test_clear(plot):
    plot.add_series("a")
    plot.push(1, 2, "a")
    plot.clear("a")
    assert plot.data("a") == []


def test_refresh_chart_fills_layers(plot):
    series = plot.add_series("a")
    plot.push(1, 5, "a")
    plot.push(2, -4, "a")
    assert series.line_layer.points == []
    plot.refresh_chart()
    assert series.line_layer.points == [(1.0, 5.0), (2.0, -4.0)]
    assert series.bar_layer.points == series.line_layer.points


def test_min_y_without_series(plot):
    assert plot.min_y() == sys.float_info.max


def test_min_y_over_series(plot):
    plot.add_series("a")
    plot.add_series("b")
    plot.push(0, 5, "a")
    plot.push(1, 7, "a")
    plot.push(0, -2, "b")
    plot.push(1, 3, "b")
    plot.refresh_chart()
    assert plot.min_y() == -2.0


def test_set_pen(plot):
    series = plot.add_series("a")
    plot.set_pen("red", "a")
    assert all(layer.style.pen == "red" for layer in series.layers)


def test_set_pen_missing_raises(plot):
    with pytest.raises(KeyError):
        plot.set_pen("red", "missing")


def test_delete_series(plot):
    plot.add_series("a")
    plot.add_series("b")
    plot.delete_series("a")
    assert plot.layers == []
    assert plot.find_series("a") is None
    assert plot.find_series("b") is not None and plot.series_index("b") == 0


def test_delete_missing_series_keeps_layers(plot):
    series = plot.add_series("a")
    plot.delete_series("missing")
    assert len(plot.layers) == 3
    assert plot.layers[-1] is series.line_layer