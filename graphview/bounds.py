from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from graphview.series import DataPoint, Series
from graphview.viewport import Viewport


# Returned when there is no data to scan: min above max signals "no data".
EMPTY_MIN_Y = 2147483647.0
EMPTY_MAX_Y = -2147483648.0


@dataclass(frozen=True)
class AxisBounds:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def diff_x(self) -> float:
        return self.max_x - self.min_x

    @property
    def diff_y(self) -> float:
        return self.max_y - self.min_y

    @property
    def y_degenerate(self) -> bool:
        return self.min_y == self.max_y


def slice_for_viewport(points: Sequence[DataPoint], viewport: Viewport) -> list[DataPoint]:
    """Points visible in the viewport plus one neighbour past each edge.

    The nearest point before the window start and the first point after the
    window end are kept so that segments crossing the edges still render.
    """

    if not viewport.active:
        return list(points)
    start = viewport.start
    end = viewport.start + viewport.size
    out: list[DataPoint] = []
    for point in points:
        if point.x >= start:
            out.append(point)
            if point.x > end:
                break
        elif out:
            out[0] = point
        else:
            out.append(point)
    return out


def compute_x_bounds(
    series: Sequence[Series],
    viewport: Viewport,
    *,
    ignore_viewport: bool = False,
) -> tuple[float, float]:
    if not ignore_viewport and viewport.active:
        return (viewport.start, viewport.start + viewport.size)
    if not series:
        return (0.0, 0.0)
    # Series are sorted by x, so only the end points matter.
    lowest = min(s.first_x for s in series)
    highest = max(s.last_x for s in series)
    return (lowest, highest)


def compute_y_bounds(
    series: Sequence[Series],
    viewport: Viewport,
    *,
    manual_min: float | None = None,
    manual_max: float | None = None,
) -> tuple[float, float]:
    """Y range over the viewport-filtered points; manual values win verbatim."""

    if manual_min is not None and manual_max is not None:
        return (manual_min, manual_max)
    smallest = EMPTY_MIN_Y
    largest = EMPTY_MAX_Y
    for s in series:
        for point in slice_for_viewport(s.points, viewport):
            if point.y < smallest:
                smallest = point.y
            if point.y > largest:
                largest = point.y
    if manual_min is not None:
        smallest = manual_min
    if manual_max is not None:
        largest = manual_max
    return (smallest, largest)


def compute_bounds(
    series: Sequence[Series],
    viewport: Viewport,
    *,
    manual_min_y: float | None = None,
    manual_max_y: float | None = None,
) -> AxisBounds:
    min_x, max_x = compute_x_bounds(series, viewport)
    min_y, max_y = compute_y_bounds(series, viewport, manual_min=manual_min_y, manual_max=manual_max_y)
    return AxisBounds(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)
