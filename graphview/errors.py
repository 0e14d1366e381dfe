from __future__ import annotations


class GraphViewError(Exception):
    """Base class for chart errors."""


class ChartDataError(GraphViewError, ValueError):
    pass


class SeriesIndexError(GraphViewError, IndexError):
    pass


class ChartStateError(GraphViewError, RuntimeError):
    pass
