"""Running minimum and maximum of X and Y values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MinMax:
    """Bounds of the X and Y values seen so far.

    All bounds start at zero. Each update only widens them.
    """

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0

    def update(self, x: float, y: float) -> None:
        """Widen both the X and the Y bounds to include the point."""
        self.update_x(x)
        self.update_y(y)

    def update_x(self, x: float) -> None:
        """Widen the X bounds to include ``x``."""
        if self.x_max < x:
            self.x_max = x
        if self.x_min > x:
            self.x_min = x

    def update_y(self, y: float) -> None:
        """Widen the Y bounds to include ``y``."""
        if self.y_max < y:
            self.y_max = y
        if self.y_min > y:
            self.y_min = y