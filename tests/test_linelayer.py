import pytest
from hypothesis import given, strategies as st

from gpchart.linelayer import LineLayer
from gpchart.multiplot import AxisScale, ChartKind


@pytest.fixture
def plot():
    return LineLayer("Plot", "Time", "Value")


def test_default_labels(plot):
    assert plot.current_labels == ("Plot", "Time", "Value")
    assert plot.y_labels[ChartKind.INL] == "INL"
    assert plot.y_labels[ChartKind.DNL] == "DNL"
    assert plot.x_labels[ChartKind.FFT] == "Frequency"
    assert plot.y_labels[ChartKind.ACCUMULATION] == "Accumulation"
    assert plot.x_labels[ChartKind.CUSTOM] == "X"
    assert plot.y_labels[ChartKind.CUSTOM] == "custom"
    assert all(v == "Plot" for v in plot.labels.values())


def test_defaults(plot):
    assert plot.samplerate == 1.0
    assert plot.fft_length == 64
    assert plot.layers == [plot.x_axis, plot.y_axis]
    assert plot.x_axis.ticks is True
    assert plot.chart_menu == set(ChartKind)


def test_axis_menu_table(plot):
    assert plot.axis_menu[ChartKind.DEFAULT][AxisScale.PROCENT] == (False, True)
    assert plot.axis_menu[ChartKind.DNL][AxisScale.N] == (True, False)
    assert plot.axis_menu[ChartKind.ACCUMULATION][AxisScale.PROCENT] == (True, True)
    assert ChartKind.FFT not in plot.axis_menu


def test_set_formula_uses_x_formula(plot):
    plot.set_formula("sin(X)", "X*2")
    assert plot.custom_x_formula == "X*2"
    assert plot.custom_y_formula == "X*2"
    assert plot.y_labels[ChartKind.CUSTOM] == "Y= X*2"
    assert plot.x_labels[ChartKind.CUSTOM] == "X= X*2"


def test_set_formula_empty_x_keeps_x_label(plot):
    plot.set_formula("sin(X)")
    assert plot.x_labels[ChartKind.CUSTOM] == "X"
    assert plot.y_labels[ChartKind.CUSTOM] == "Y= "


def test_add_and_find_series(plot):
    a = plot.add_series("a")
    b = plot.add_series("b")
    assert plot.find_series("b") is b
    assert plot.find_series("a") is a
    assert plot.find_series("missing") is None
    assert plot.layers == [plot.x_axis, plot.y_axis]
    assert a.line_layer.style.continuity is True
    assert a.line_layer.style.show_name is False


def test_series_index(plot):
    plot.add_series("a")
    plot.add_series("b")
    assert plot.series_index("a") == 0
    assert plot.series_index("b") == 1
    assert plot.series_index("missing") == len(plot.series)


def test_push_and_data(plot):
    plot.add_series("s")
    plot.push(2.0, 5.0, "s")
    plot.push(1.0, 3.0, "s")
    assert plot.data("s") == [(1.0, 3.0), (2.0, 5.0)]
    assert plot.refresh_needed is True


def test_push_unknown_ignored(plot):
    plot.push(1.0, 1.0, "nope")
    assert plot.refresh_needed is False


def test_data_unknown_raises(plot):
    with pytest.raises(KeyError):
        plot.data("nope")


def test_clear(plot):
    plot.add_series("s")
    plot.push(1.0, 2.0, "s")
    plot.clear("s")
    assert plot.data("s") == []


def test_refresh_chart_copies_data(plot):
    series = plot.add_series("s")
    plot.push(1.0, 2.0, "s")
    plot.push(3.0, 4.0, "s")
    plot.refresh_chart()
    for layer in series.layers:
        assert layer.points == [(1.0, 2.0), (3.0, 4.0)]


def test_delete_series_clears_layers_only(plot):
    series = plot.add_series("s")
    plot.delete_series("s")
    assert plot.layers == []
    assert plot.find_series("s") is series


def test_delete_unknown_keeps_layers(plot):
    plot.delete_series("nope")
    assert len(plot.layers) == 2


@given(st.lists(st.tuples(st.floats(-1e6, 1e6), st.floats(-1e6, 1e6)), max_size=20))
def test_data_sorted_by_x(points):
    plot = LineLayer("p", "x", "y")
    plot.add_series("s")
    for x, y in points:
        plot.push(x, y, "s")
    xs = [x for x, _ in plot.data("s")]
    assert xs == sorted(xs)
    assert len(xs) == len(points)