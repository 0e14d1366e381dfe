from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image
import torch

from graphview.raster.canvas import RGBA, fill_rect, new_canvas
from graphview.raster.draw_lines import draw_segment
from graphview.raster.draw_shapes import fill_polygon, fill_rounded_rect
from graphview.raster.draw_text import draw_text, text_size
from graphview.surface import DrawStyle, Rect


class RasterSurface:
    """Render surface backed by an ``(H, W, 4)`` uint8 RGBA canvas."""

    def __init__(self, width: int, height: int, background: RGBA = (0, 0, 0, 255)) -> None:
        self.canvas = new_canvas(width, height, background)

    @property
    def width(self) -> int:
        return int(self.canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self.canvas.shape[0])

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, style: DrawStyle) -> None:
        width = max(1, int(round(style.stroke_width)))
        draw_segment(
            self.canvas,
            int(round(x1)),
            int(round(y1)),
            int(round(x2)),
            int(round(y2)),
            style.color,
            width=width,
        )

    def draw_path(self, polygon: Sequence[tuple[float, float]], style: DrawStyle) -> None:
        fill_polygon(self.canvas, polygon, style.color)

    def draw_rect(self, rect: Rect, style: DrawStyle) -> None:
        fill_rect(
            self.canvas,
            int(round(rect.left)),
            int(round(rect.top)),
            int(round(rect.right)) - 1,
            int(round(rect.bottom)) - 1,
            style.color,
        )

    def draw_rounded_rect(self, rect: Rect, radius_x: float, radius_y: float, style: DrawStyle) -> None:
        fill_rounded_rect(self.canvas, rect.left, rect.top, rect.right, rect.bottom, radius_x, radius_y, style.color)

    def draw_text(self, text: str, x: float, y: float, style: DrawStyle) -> None:
        draw_text(self.canvas, x, y, text, style.color, font_size_px=style.text_size, align=style.align)

    def measure_text(self, text: str, style: DrawStyle) -> tuple[float, float]:
        w, h = text_size(text, font_size_px=style.text_size)
        return (float(w), float(h))

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.canvas))

    def to_tensor(self) -> torch.Tensor:
        return torch.from_numpy(np.ascontiguousarray(self.canvas))

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        self.to_image().save(out, format="PNG")
        return out
