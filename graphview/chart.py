from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

import numpy as np
import torch

from graphview.bounds import AxisBounds, compute_bounds, compute_x_bounds, slice_for_viewport
from graphview.config import ChartConfig, LegendAlign, validate_chart_config
from graphview.errors import ChartStateError, SeriesIndexError
from graphview.gestures import GestureEvent, PanGesture, ZoomGesture
from graphview.labels import AdaptiveLabelGenerator, FixedLabelGenerator, LabelGenerator
from graphview.mapping import PlotGeometry
from graphview.raster import RasterSurface
from graphview.renderers import SeriesRenderer, renderer_for
from graphview.series import Series
from graphview.surface import DrawStyle, Rect, RenderSurface
from graphview.viewport import Viewport


LOGGER = logging.getLogger(__name__)

LEGEND_SWATCH_PX = 15.0
LEGEND_GAP_PX = 5.0
LEGEND_MARGIN_PX = 10.0
LEGEND_CORNER_RADIUS_PX = 8.0
LABEL_BASELINE_INSET_PX = 4.0


@dataclass(frozen=True)
class ChartLayout:
    width: float
    height: float
    graph_width: float
    graph_height: float
    border: float
    left_offset: float

    @property
    def geometry(self) -> PlotGeometry:
        return PlotGeometry(
            graph_width=self.graph_width,
            graph_height=self.graph_height,
            border=self.border,
            left_offset=self.left_offset,
        )


@dataclass
class LabelCache:
    """Per-axis label lists plus the inputs they were generated from."""

    horizontal_key: tuple[Any, ...] | None = None
    horizontal: list[str] | None = None
    vertical_key: tuple[Any, ...] | None = None
    vertical: list[str] | None = None

    def invalidate(self) -> None:
        self.horizontal_key = None
        self.horizontal = None
        self.vertical_key = None
        self.vertical = None


@dataclass
class ChartState:
    viewport: Viewport = field(default_factory=Viewport)
    labels: LabelCache = field(default_factory=LabelCache)
    manual_min_y: float | None = None
    manual_max_y: float | None = None
    manual_y_axis: bool = False
    scrollable: bool = False
    scalable: bool = False


class Chart:
    """Line chart over one or more x-sorted series with a pannable, zoomable viewport."""

    def __init__(
        self,
        width: int,
        height: int,
        config: ChartConfig | Mapping[str, Any] | None = None,
        *,
        title: str = "",
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("chart width/height must be > 0")
        if config is None or isinstance(config, Mapping):
            config = validate_chart_config(config)
        self.width = int(width)
        self.height = int(height)
        self.config = config
        self.title = title
        self.show_legend = config.show_legend
        self.legend_width = config.legend_width
        self.legend_align: LegendAlign = config.legend_align
        self.renderer: SeriesRenderer = renderer_for(
            draw_filled=config.draw_filled,
            draw_background=config.draw_background,
        )
        self.horizontal_label_generator: LabelGenerator = AdaptiveLabelGenerator(config.vertical_label_spacing_px)
        self.vertical_label_generator: LabelGenerator = AdaptiveLabelGenerator(config.horizontal_label_spacing_px)

        self._series: list[Series] = []
        self._state = ChartState(
            manual_min_y=config.min_y,
            manual_max_y=config.max_y,
            manual_y_axis=config.min_y is not None or config.max_y is not None,
            scrollable=config.scrollable or config.scalable,
            scalable=config.scalable,
        )

    # series

    @property
    def series(self) -> tuple[Series, ...]:
        return tuple(self._series)

    def add_series(self, series: Series) -> None:
        self._series.append(series)
        self._state.labels.invalidate()

    def remove_series(self, target: int | Series) -> None:
        if isinstance(target, Series):
            for idx, existing in enumerate(self._series):
                if existing is target:
                    del self._series[idx]
                    self._state.labels.invalidate()
                    return
            LOGGER.debug("remove_series: series not attached to this chart")
            return
        index = int(target)
        if index < 0 or index >= len(self._series):
            raise SeriesIndexError(f"No series at index {index}")
        del self._series[index]
        self._state.labels.invalidate()

    # state

    @property
    def state(self) -> ChartState:
        return self._state

    @property
    def viewport(self) -> Viewport:
        return self._state.viewport

    @property
    def scrollable(self) -> bool:
        return self._state.scrollable

    @property
    def scalable(self) -> bool:
        return self._state.scalable

    def set_title(self, title: str) -> None:
        self.title = title

    def set_viewport(self, start: float, size: float) -> None:
        self._state.viewport.set(start, size)
        self._state.labels.invalidate()

    def set_scrollable(self, scrollable: bool) -> None:
        self._state.scrollable = bool(scrollable)

    def set_scalable(self, scalable: bool) -> None:
        self._state.scalable = bool(scalable)
        if scalable:
            self._state.scrollable = True

    def scroll_to_end(self) -> None:
        if not self._state.scrollable:
            raise ChartStateError("chart is not scrollable")
        _, domain_max = self.domain()
        self._state.viewport.scroll_to_end(domain_max)
        self.redraw_all()

    def set_manual_y_axis_bounds(self, max_y: float, min_y: float) -> None:
        self._state.manual_max_y = float(max_y)
        self._state.manual_min_y = float(min_y)
        self._state.manual_y_axis = True
        self._state.labels.invalidate()

    def set_manual_y_axis(self, enabled: bool) -> None:
        self._state.manual_y_axis = bool(enabled)
        self._state.labels.invalidate()

    def set_horizontal_labels(self, labels: Sequence[str] | None) -> None:
        """Use a fixed list of x labels (left to right); ``None`` restores generated labels."""

        if labels is None:
            self.horizontal_label_generator = AdaptiveLabelGenerator(self.config.vertical_label_spacing_px)
        else:
            self.horizontal_label_generator = FixedLabelGenerator(labels)
        self._state.labels.invalidate()

    def set_vertical_labels(self, labels: Sequence[str] | None) -> None:
        """Use a fixed list of y labels (bottom to top); ``None`` restores generated labels."""

        if labels is None:
            self.vertical_label_generator = AdaptiveLabelGenerator(self.config.horizontal_label_spacing_px)
        else:
            self.vertical_label_generator = FixedLabelGenerator(labels)
        self._state.labels.invalidate()

    def set_horizontal_label_generator(self, generator: LabelGenerator) -> None:
        self.horizontal_label_generator = generator
        self._state.labels.invalidate()

    def set_vertical_label_generator(self, generator: LabelGenerator) -> None:
        self.vertical_label_generator = generator
        self._state.labels.invalidate()

    def set_renderer(self, renderer: SeriesRenderer) -> None:
        self.renderer = renderer

    def set_show_legend(self, show: bool) -> None:
        self.show_legend = bool(show)

    def set_legend_width(self, width: float) -> None:
        if width <= 0:
            raise ValueError("legend width must be > 0")
        self.legend_width = float(width)

    def set_legend_align(self, align: LegendAlign) -> None:
        if align not in ("top", "middle", "bottom"):
            raise ValueError("legend align must be one of top, middle, bottom")
        self.legend_align = align

    def redraw_all(self) -> None:
        self._state.labels.invalidate()

    # gestures

    def apply_pan(self, pixel_delta: float) -> bool:
        if not self._state.scrollable:
            LOGGER.debug("pan ignored: chart is not scrollable")
            return False
        viewport = self._state.viewport
        if not viewport.active:
            LOGGER.debug("pan ignored: no active viewport")
            return False
        domain_min, domain_max = self.domain()
        pixels_per_unit = self.layout().graph_width / viewport.size
        changed = viewport.pan(pixel_delta, pixels_per_unit, domain_min, domain_max)
        if changed:
            self._state.labels.invalidate()
        return changed

    def apply_zoom(self, scale_factor: float) -> bool:
        if not self._state.scalable:
            LOGGER.debug("zoom ignored: chart is not scalable")
            return False
        domain_min, domain_max = self.domain()
        changed = self._state.viewport.zoom(scale_factor, domain_min, domain_max)
        if changed:
            self._state.labels.invalidate()
        return changed

    def handle_gesture(self, event: GestureEvent) -> bool:
        if isinstance(event, PanGesture):
            return self.apply_pan(event.delta_px)
        if isinstance(event, ZoomGesture):
            return self.apply_zoom(event.scale_factor)
        raise TypeError(f"unsupported gesture event: {type(event)!r}")

    # geometry

    def domain(self) -> tuple[float, float]:
        return compute_x_bounds(self._series, self._state.viewport, ignore_viewport=True)

    def bounds(self) -> AxisBounds:
        state = self._state
        manual_min = state.manual_min_y if state.manual_y_axis else None
        manual_max = state.manual_max_y if state.manual_y_axis else None
        return compute_bounds(self._series, state.viewport, manual_min_y=manual_min, manual_max_y=manual_max)

    def layout(self) -> ChartLayout:
        width = float(self.width - 1)
        height = float(self.height)
        border = self.config.lower_border_px
        left = self.config.left_border_px
        graph_height = height - 2 * border
        graph_width = width - left
        if graph_width <= 0 or graph_height <= 0:
            raise ValueError("chart is too small for its borders")
        return ChartLayout(
            width=width,
            height=height,
            graph_width=graph_width,
            graph_height=graph_height,
            border=border,
            left_offset=left,
        )

    def horizontal_labels(self, layout: ChartLayout | None = None, bounds: AxisBounds | None = None) -> list[str]:
        layout = layout or self.layout()
        bounds = bounds or self.bounds()
        cache = self._state.labels
        generator = self.horizontal_label_generator
        key = (bounds.min_x, bounds.max_x, layout.graph_width, generator, _spacing_of(generator))
        if cache.horizontal is None or cache.horizontal_key != key:
            LOGGER.debug("regenerating x labels for [%s, %s]", bounds.min_x, bounds.max_x)
            cache.horizontal = generator.generate_labels(
                layout.graph_width, bounds.min_x, bounds.max_x
            )
            cache.horizontal_key = key
        return cache.horizontal

    def vertical_labels(self, layout: ChartLayout | None = None, bounds: AxisBounds | None = None) -> list[str]:
        layout = layout or self.layout()
        bounds = bounds or self.bounds()
        cache = self._state.labels
        generator = self.vertical_label_generator
        key = (bounds.min_y, bounds.max_y, layout.graph_height, generator, _spacing_of(generator))
        if cache.vertical is None or cache.vertical_key != key:
            LOGGER.debug("regenerating y labels for [%s, %s]", bounds.min_y, bounds.max_y)
            cache.vertical = generator.generate_labels(
                layout.graph_height, bounds.min_y, bounds.max_y
            )
            cache.vertical_key = key
        return cache.vertical

    # drawing

    def draw(self, surface: RenderSurface) -> None:
        layout = self.layout()
        bounds = self.bounds()
        x_labels = self.horizontal_labels(layout, bounds)
        y_labels = self.vertical_labels(layout, bounds)

        self._draw_vertical_labels(surface, layout, y_labels)
        self._draw_grid(surface, layout, x_labels, y_labels)
        self._draw_title(surface, layout)

        if bounds.y_degenerate:
            LOGGER.debug("flat y range %s; drawing axes only", bounds.min_y)
            return

        geometry = layout.geometry
        viewport = self._state.viewport
        for series in self._series:
            points = slice_for_viewport(series.points, viewport)
            self.renderer.draw(surface, points, geometry, bounds, series.style)

        if self.show_legend:
            self._draw_legend(surface, layout)

    def render_raster(self) -> RasterSurface:
        surface = RasterSurface(self.width, self.height, background=self.config.background_color)
        self.draw(surface)
        return surface

    def render_rgba(self) -> np.ndarray:
        return self.render_raster().canvas

    def render_tensor(self) -> torch.Tensor:
        return self.render_raster().to_tensor()

    def save_png(self, path: str | Path) -> Path:
        return self.render_raster().save_png(path)

    def _draw_vertical_labels(self, surface: RenderSurface, layout: ChartLayout, labels: list[str]) -> None:
        style = DrawStyle(
            color=self.config.vertical_label_color,
            text_size=self.config.vertical_label_text_size,
            align="left",
        )
        for idx, text in enumerate(labels):
            surface.draw_text(text, 0.0, _row_for_label(layout, idx, len(labels)), style)

    def _draw_grid(
        self,
        surface: RenderSurface,
        layout: ChartLayout,
        x_labels: list[str],
        y_labels: list[str],
    ) -> None:
        grid = DrawStyle(color=self.config.grid_color, stroke_width=0.0)
        for idx in range(len(y_labels)):
            y = _row_for_label(layout, idx, len(y_labels))
            surface.draw_line(layout.left_offset, y, layout.width, y, grid)

        last = len(x_labels) - 1
        for idx, text in enumerate(x_labels):
            x = layout.left_offset + (layout.graph_width * idx / last if last > 0 else 0.0)
            surface.draw_line(x, layout.height - layout.border, x, layout.border, grid)
            if idx == 0:
                align = "left"
            elif idx == last:
                align = "right"
            else:
                align = "center"
            style = DrawStyle(
                color=self.config.horizontal_label_color,
                text_size=self.config.label_text_size,
                align=align,
            )
            surface.draw_text(text, x, layout.height - LABEL_BASELINE_INSET_PX, style)

    def _draw_title(self, surface: RenderSurface, layout: ChartLayout) -> None:
        if not self.title:
            return
        style = DrawStyle(color=self.config.title_color, text_size=self.config.label_text_size, align="center")
        surface.draw_text(
            self.title,
            layout.graph_width / 2 + layout.left_offset,
            layout.border - LABEL_BASELINE_INSET_PX,
            style,
        )

    def legend_rect(self, layout: ChartLayout | None = None) -> Rect:
        layout = layout or self.layout()
        row = LEGEND_SWATCH_PX + LEGEND_GAP_PX
        legend_height = row * len(self._series) + LEGEND_GAP_PX
        left = layout.width - self.legend_width - LEGEND_MARGIN_PX
        if self.legend_align == "top":
            top = LEGEND_MARGIN_PX
        elif self.legend_align == "middle":
            top = layout.height / 2 - legend_height / 2
        else:
            top = layout.height - layout.border - legend_height - LEGEND_MARGIN_PX
        return Rect(left=left, top=top, right=left + self.legend_width, bottom=top + legend_height)

    def _draw_legend(self, surface: RenderSurface, layout: ChartLayout) -> None:
        box = self.legend_rect(layout)
        surface.draw_rounded_rect(
            box,
            LEGEND_CORNER_RADIUS_PX,
            LEGEND_CORNER_RADIUS_PX,
            DrawStyle(color=self.config.legend_background_color),
        )
        row = LEGEND_SWATCH_PX + LEGEND_GAP_PX
        text_style = DrawStyle(
            color=self.config.legend_text_color,
            text_size=self.config.label_text_size,
            align="left",
        )
        for idx, series in enumerate(self._series):
            swatch = Rect(
                left=box.left + LEGEND_GAP_PX,
                top=box.top + LEGEND_GAP_PX + idx * row,
                right=box.left + LEGEND_GAP_PX + LEGEND_SWATCH_PX,
                bottom=box.top + (idx + 1) * row,
            )
            surface.draw_rect(swatch, DrawStyle(color=series.style.color))
            if series.description is not None:
                surface.draw_text(
                    series.description,
                    swatch.right + LEGEND_GAP_PX,
                    box.top + LEGEND_SWATCH_PX + idx * row,
                    text_style,
                )


def _spacing_of(generator: LabelGenerator) -> float | None:
    return getattr(generator, "spacing", None)


def _row_for_label(layout: ChartLayout, idx: int, count: int) -> float:
    """Pixel row of the ``idx``-th y label; labels run bottom (min) to top (max)."""

    if count <= 1:
        return layout.border + layout.graph_height
    return layout.border + layout.graph_height * (1.0 - idx / (count - 1))
