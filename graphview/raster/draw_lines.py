from __future__ import annotations

import numpy as np

from graphview.raster.canvas import RGBA, draw_pixel, fill_rect


def draw_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int = 1) -> None:
    """Bresenham line stamped with a square brush of ``width`` pixels."""

    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    radius = max(0, width // 2)

    while True:
        if radius == 0:
            draw_pixel(dst, x0, y0, color)
        else:
            fill_rect(dst, x0 - radius, y0 - radius, x0 + radius, y0 + radius, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
