from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from graphview.bounds import AxisBounds
from graphview.series import DataPoint, point_arrays


Segment = tuple[float, float, float, float]
Polygon = list[tuple[float, float]]

BACKGROUND_SAMPLE_STEP_PX = 3.0


@dataclass(frozen=True)
class PlotGeometry:
    """Pixel placement of the plot area inside the chart."""

    graph_width: float
    graph_height: float
    border: float
    left_offset: float

    @property
    def baseline(self) -> float:
        return self.graph_height + self.border

    @property
    def top(self) -> float:
        return self.border

    @property
    def right(self) -> float:
        return self.left_offset + self.graph_width


def normalize_axis(values: np.ndarray, vmin: float, diff: float) -> np.ndarray:
    """Map values onto [0, 1]; a zero span maps everything to the middle."""

    if diff == 0 or not np.isfinite(diff):
        return np.full(values.shape, 0.5, dtype=np.float64)
    return (values - vmin) / diff


def map_to_pixels(
    points: Sequence[DataPoint],
    geometry: PlotGeometry,
    bounds: AxisBounds,
) -> tuple[np.ndarray, np.ndarray]:
    xs, ys = point_arrays(points)
    norm_x = normalize_axis(xs, bounds.min_x, bounds.diff_x)
    norm_y = normalize_axis(ys, bounds.min_y, bounds.diff_y)
    px = geometry.graph_width * norm_x + geometry.left_offset
    # Pixel rows grow downward.
    py = geometry.border - geometry.graph_height * norm_y + geometry.graph_height
    return px, py


def line_segments(px: np.ndarray, py: np.ndarray) -> list[Segment]:
    if px.size < 2:
        return []
    return [
        (float(x0), float(y0), float(x1), float(y1))
        for x0, y0, x1, y1 in zip(px[:-1].tolist(), py[:-1].tolist(), px[1:].tolist(), py[1:].tolist(), strict=True)
    ]


def area_polygon(px: np.ndarray, py: np.ndarray, baseline: float) -> Polygon:
    """Closed outline under the curve, ending back at the first point."""

    if px.size == 0:
        return []
    outline: Polygon = [(float(x), float(y)) for x, y in zip(px.tolist(), py.tolist(), strict=True)]
    first_x, first_y = outline[0]
    last_x = outline[-1][0]
    outline.append((last_x, float(baseline)))
    outline.append((first_x, float(baseline)))
    outline.append((first_x, first_y))
    return outline


def background_verticals(
    px: np.ndarray,
    py: np.ndarray,
    geometry: PlotGeometry,
    *,
    step_px: float = BACKGROUND_SAMPLE_STEP_PX,
) -> list[Segment]:
    """Vertical strokes from the baseline up to the curve, sampled every ``step_px``.

    Samples within one pixel of the left axis are skipped.
    """

    if step_px <= 0:
        raise ValueError("step_px must be > 0")
    baseline = geometry.baseline
    out: list[Segment] = []
    for i in range(1, px.size):
        x0, y0 = float(px[i - 1]), float(py[i - 1])
        x1, y1 = float(px[i]), float(py[i])
        count = int((x1 - x0) / step_px) + 1
        if count <= 1:
            samples = [(x1, y1)]
        else:
            samples = [
                (x0 + (x1 - x0) * k / (count - 1), y0 + (y1 - y0) * k / (count - 1))
                for k in range(count)
            ]
        for sx, sy in samples:
            if sx - geometry.left_offset > 1:
                out.append((sx, baseline, sx, sy))
    return out
