from hypothesis import given
from hypothesis import strategies as st

from gpchart.minmax import MinMax

finite = st.floats(min_value=-1e9, max_value=1e9, allow_nan=False, allow_infinity=False)


def test_bounds_start_at_zero():
    bounds = MinMax()
    assert (bounds.x_min, bounds.x_max, bounds.y_min, bounds.y_max) == (0.0, 0.0, 0.0, 0.0)


def test_update_widens_from_zero():
    bounds = MinMax()
    bounds.update(5.0, -3.0)
    assert bounds.x_max == 5.0
    assert bounds.x_min == 0.0
    assert bounds.y_min == -3.0
    assert bounds.y_max == 0.0


def test_update_x_leaves_y_alone():
    bounds = MinMax(y_min=-1.0, y_max=1.0)
    bounds.update_x(-7.5)
    assert bounds.x_min == -7.5
    assert (bounds.y_min, bounds.y_max) == (-1.0, 1.0)


def test_update_y_leaves_x_alone():
    bounds = MinMax(x_min=-2.0, x_max=2.0)
    bounds.update_y(9.0)
    assert bounds.y_max == 9.0
    assert (bounds.x_min, bounds.x_max) == (-2.0, 2.0)


def test_update_inside_bounds_changes_nothing():
    bounds = MinMax(x_min=-10.0, x_max=10.0, y_min=-10.0, y_max=10.0)
    bounds.update(1.0, 2.0)
    assert bounds == MinMax(x_min=-10.0, x_max=10.0, y_min=-10.0, y_max=10.0)


@given(st.lists(st.tuples(finite, finite), min_size=1))
def test_bounds_enclose_and_touch_all_points(points):
    first_x, first_y = points[0]
    bounds = MinMax(first_x, first_x, first_y, first_y)
    for x, y in points:
        bounds.update(x, y)
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    assert bounds.x_min == min(xs)
    assert bounds.x_max == max(xs)
    assert bounds.y_min == min(ys)
    assert bounds.y_max == max(ys)