from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from graphview.raster.canvas import RGBA, draw_hline, fill_rect


def fill_polygon(dst: np.ndarray, polygon: Sequence[tuple[float, float]], color: RGBA) -> None:
    """Even-odd scanline fill, sampling each row at its pixel center."""

    if len(polygon) < 3:
        return
    pts = np.asarray(polygon, dtype=np.float64)
    xs = pts[:, 0]
    ys = pts[:, 1]
    nxt_x = np.roll(xs, -1)
    nxt_y = np.roll(ys, -1)

    row_lo = max(0, int(math.floor(float(ys.min()))))
    row_hi = min(dst.shape[0] - 1, int(math.ceil(float(ys.max()))))
    for row in range(row_lo, row_hi + 1):
        yc = row + 0.5
        crossing = ((ys <= yc) & (nxt_y > yc)) | ((nxt_y <= yc) & (ys > yc))
        if not np.any(crossing):
            continue
        t = (yc - ys[crossing]) / (nxt_y[crossing] - ys[crossing])
        hits = np.sort(xs[crossing] + t * (nxt_x[crossing] - xs[crossing]))
        for left, right in zip(hits[0::2].tolist(), hits[1::2].tolist(), strict=False):
            x0 = int(math.ceil(left - 0.5))
            x1 = int(math.floor(right - 0.5))
            if x1 >= x0:
                draw_hline(dst, x0, x1, row, color)


def fill_rounded_rect(
    dst: np.ndarray,
    left: float,
    top: float,
    right: float,
    bottom: float,
    radius_x: float,
    radius_y: float,
    color: RGBA,
) -> None:
    x0 = int(round(min(left, right)))
    x1 = int(round(max(left, right))) - 1
    y0 = int(round(min(top, bottom)))
    y1 = int(round(max(top, bottom))) - 1
    if x1 < x0 or y1 < y0:
        return
    rx = max(0.0, min(float(radius_x), (x1 - x0 + 1) / 2.0))
    ry = max(0.0, min(float(radius_y), (y1 - y0 + 1) / 2.0))
    if rx == 0 or ry == 0:
        fill_rect(dst, x0, y0, x1, y1, color)
        return

    for row in range(y0, y1 + 1):
        yc = row + 0.5
        # Distance into the corner band measured from the nearest edge.
        if yc < y0 + ry:
            dy = (y0 + ry) - yc
        elif yc > y1 + 1 - ry:
            dy = yc - (y1 + 1 - ry)
        else:
            dy = 0.0
        inset = 0.0
        if dy > 0:
            inset = rx - rx * math.sqrt(max(0.0, 1.0 - (dy / ry) ** 2))
        draw_hline(dst, int(round(x0 + inset)), int(round(x1 - inset)), row, color)
