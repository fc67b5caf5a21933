# gpchart

Data models for XY charts. The package provides sorted point containers
that track their bounds, statistics over points, a small infix formula
evaluator, chart layers (line, area, bar, horizontal bar, mixed), named
series, multi-series plot layers and a row-based window layout model.
It keeps data and layout state for a renderer to read.

## Install

```
pip install .
pip install ".[test]"   # adds pytest and hypothesis
```

## Point data: `gpchart.xydata`

```python
from gpchart.xydata import XYData, integrate

data = XYData()
for x, y in [(0, 4), (1, 5), (2, 3), (3, 4)]:
    data.push(x, y)

len(data)                 # 4
data.points               # [(0.0, 4.0), (1.0, 5.0), (2.0, 3.0), (3.0, 4.0)]
data.arithmetic_mean()    # 4.0
data.dnl()                # differential non-linearity per x
data.inl()                # running sum of the DNL
data.accumulation()       # (y, count) for each distinct y value
```

Points stay ordered by x. Several points may share an x value, and
`push_unique` replaces an existing one. The running bounds are kept in
`data.limits`, a `gpchart.minmax.MinMax` with `x_min`, `x_max`, `y_min`
and `y_max`. `multiply_x` and `multiply_y` rescale the values and
recompute the bounds.

A read cursor steps through the data the way a plot layer does. `rewind`
moves it to the start. `next_xy` and `next_labeled_xy` return the next
point, or `None` at the end. `current_bounds(xmin, xmax)` limits the
cursor to a visible x range plus one point on each side.

Other views: `last_data`, `data_from_checkpoint` (after `checkpoint()`),
`data_without_zeros`, `data_without_end_zeros`, `custom(x_formula,
y_formula)`, `fill_zeros` and `init_zeros`. If `use_time_holder(True)` is
set, every `push` records the wall-clock time, and `convert_to_time`
replaces x with those times. `integrate(points)` computes a running sum
of y over any point list.

## Statistics: `gpchart.stats`

These functions take any iterable of `(x, y)` pairs and work on the
y values unless noted: `arithmetic_mean`, `geometric_mean`,
`harmonic_mean`, `weighted_mean`, `quadratic_mean`, `midrange` (over the
axis given by `Axis.X` or `Axis.Y`), `standard_deviation` (sample),
`average_absolute_deviation` (about the center given by
`DeviationCenter.MEAN`, `MEDIAN` or `MODE`), `median` (the middle point
in the order given, not sorted), `y_sum` and `x_sum`. The mean functions
raise `ValueError` when there are no points. `standard_deviation` needs
at least two points.

## Formulas: `gpchart.formula`

```python
from gpchart.formula import Formula

f = Formula("X^2")
f.add_variable("X", 3)
f.calculate()            # 9.0
float(Formula("(2*3)+1"))  # 7.0
```

The operators are `+ - * / ^ %`, the functions `sin cos tan arcsin
arccos arctan`, the infix `min` and `max`, and the postfix `!`. `PI` is
predefined. Variables are substituted as text with six significant
digits, and a number written next to a variable multiplies it (`2X`).

Precedence handling is simple. `+`, `-`, `%`, `min` and `max` are not
reordered against `*` or `/` that come before them, so use parentheses
to group (`(2*X)+1`). `to_postfix` and `evaluate_postfix` expose the two
stages separately.

## Layers, series and plots

`gpchart.layers` has `LineChartLayer`, `AreaChartLayer`, `BarChartLayer`
and `YBarChartLayer`, which are `XYData` with a `label` and a
`LayerStyle`, and `MixedLineChartLayer`, which keeps points in insertion
order (`gpchart.mixed.MixedXYData`). `bounds()` returns
`(x_min, x_max, y_min, y_max)`. The bar layers widen the bounds by half
of `lsb` along their bar axis.

`gpchart.series.Series` holds one named data set together with line,
bar, area and point layers. `refresh()` copies the data into those
layers.

```python
from gpchart.multiplot import MultiPlotLayer, PlotType

plot = MultiPlotLayer("Signals", "time", "value", PlotType.LINE)
plot.add_series("a")
plot.push(0.0, 1.5, "a")
plot.push(1.0, -0.5, "a")
plot.refresh_chart()
plot.min_y()   # -0.5
```

`MultiPlotLayer` adds the layer of the chosen `PlotType` for each series
to its `layers` draw list. It also keeps axis labels for each
`ChartKind`. `gpchart.linelayer.LineLayer` handles series in the same
way. It also stores custom formulas (`set_formula`) and records which
`AxisScale` choices are offered for each chart kind.

`gpchart.sizer.Sizer` models a layout as rows of windows placed side by
side. `realize()` returns the current items for each row.

## What it does not do

This package contains no drawing, windows, menus, printing, screenshots,
clipboard or file export. `ChartKind.FFT` and the axis scale choices are
only labels and settings. No Fourier transform or axis rescaling is
computed.