from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from graphview.bounds import AxisBounds
from graphview.mapping import PlotGeometry, area_polygon, background_verticals, line_segments, map_to_pixels
from graphview.series import DataPoint, SeriesStyle
from graphview.surface import DrawStyle, RenderSurface


BACKGROUND_COLOR = (20, 40, 60, 255)
BACKGROUND_STROKE_PX = 4.0


class SeriesRenderer(Protocol):
    def draw(
        self,
        surface: RenderSurface,
        points: Sequence[DataPoint],
        geometry: PlotGeometry,
        bounds: AxisBounds,
        style: SeriesStyle,
    ) -> None: ...


@dataclass(frozen=True)
class LineRenderer:
    """One stroke per consecutive point pair.

    With ``draw_background`` the area under the line is shaded with sampled
    vertical strokes before the line itself is drawn.
    """

    draw_background: bool = False
    background_color: tuple[int, int, int, int] = BACKGROUND_COLOR
    background_stroke: float = BACKGROUND_STROKE_PX

    def draw(
        self,
        surface: RenderSurface,
        points: Sequence[DataPoint],
        geometry: PlotGeometry,
        bounds: AxisBounds,
        style: SeriesStyle,
    ) -> None:
        px, py = map_to_pixels(points, geometry, bounds)
        if self.draw_background:
            shade = DrawStyle(color=self.background_color, stroke_width=self.background_stroke)
            for x1, y1, x2, y2 in background_verticals(px, py, geometry):
                surface.draw_line(x1, y1, x2, y2, shade)
        stroke = DrawStyle(color=style.color, stroke_width=style.thickness)
        for x1, y1, x2, y2 in line_segments(px, py):
            surface.draw_line(x1, y1, x2, y2, stroke)


@dataclass(frozen=True)
class FilledAreaRenderer:
    """Fills the closed polygon between the curve and the baseline."""

    def draw(
        self,
        surface: RenderSurface,
        points: Sequence[DataPoint],
        geometry: PlotGeometry,
        bounds: AxisBounds,
        style: SeriesStyle,
    ) -> None:
        px, py = map_to_pixels(points, geometry, bounds)
        outline = area_polygon(px, py, geometry.baseline)
        if len(outline) < 3:
            return
        surface.draw_path(outline, DrawStyle(color=style.color, stroke_width=style.thickness))


def renderer_for(*, draw_filled: bool, draw_background: bool) -> SeriesRenderer:
    if draw_filled:
        return FilledAreaRenderer()
    return LineRenderer(draw_background=draw_background)
