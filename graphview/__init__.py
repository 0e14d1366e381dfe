from graphview.api import line_chart, make_series
from graphview.bounds import AxisBounds, compute_bounds, compute_x_bounds, compute_y_bounds, slice_for_viewport
from graphview.chart import Chart, ChartLayout
from graphview.config import ChartConfig, load_chart_config, validate_chart_config
from graphview.errors import ChartDataError, ChartStateError, GraphViewError, SeriesIndexError
from graphview.gestures import DragTracker, PanGesture, ZoomGesture, parse_gesture_event
from graphview.labels import AdaptiveLabelGenerator, FixedLabelGenerator, LabelGenerator
from graphview.mapping import PlotGeometry, map_to_pixels
from graphview.renderers import FilledAreaRenderer, LineRenderer, SeriesRenderer
from graphview.series import DataPoint, Series, SeriesStyle
from graphview.surface import DrawStyle, RecordingSurface, Rect, RenderSurface
from graphview.viewport import Viewport

__all__ = [
    "AdaptiveLabelGenerator",
    "AxisBounds",
    "Chart",
    "ChartConfig",
    "ChartDataError",
    "ChartLayout",
    "ChartStateError",
    "DataPoint",
    "DragTracker",
    "DrawStyle",
    "FilledAreaRenderer",
    "FixedLabelGenerator",
    "GraphViewError",
    "LabelGenerator",
    "LineRenderer",
    "PanGesture",
    "PlotGeometry",
    "RecordingSurface",
    "Rect",
    "RenderSurface",
    "Series",
    "SeriesIndexError",
    "SeriesRenderer",
    "SeriesStyle",
    "Viewport",
    "ZoomGesture",
    "compute_bounds",
    "compute_x_bounds",
    "compute_y_bounds",
    "line_chart",
    "load_chart_config",
    "make_series",
    "map_to_pixels",
    "parse_gesture_event",
    "slice_for_viewport",
    "validate_chart_config",
]
