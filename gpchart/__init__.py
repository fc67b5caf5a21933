"""XY chart data models: point containers, statistics, formulas, layers, series and layout."""

__version__ = "0.1.0"