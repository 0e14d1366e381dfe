from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from graphview.raster.canvas import RGBA


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 12.0
FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "dejavu sans",
    "helvetica",
    "arial",
    "liberationsans",
    "roboto",
)
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)


def draw_text(
    dst: np.ndarray,
    x: float,
    baseline_y: float,
    text: str,
    color: RGBA,
    *,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    align: str = "left",
    font_family: str = DEFAULT_FONT_FAMILY,
) -> None:
    """Draw ``text`` with its baseline on row ``baseline_y``.

    ``x`` is the left edge, center or right edge depending on ``align``.
    """

    if not text:
        return
    font = _load_font(font_family, font_size_px)
    mask, left, top = _render_mask(text, font)
    anchor_x = float(x) - _align_offset(font.getlength(text), align)
    _blend_mask(dst, int(round(anchor_x)) + left, int(round(baseline_y)) + top, mask, color)


def text_size(
    text: str,
    *,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    font_family: str = DEFAULT_FONT_FAMILY,
) -> tuple[int, int]:
    font = _load_font(font_family, font_size_px)
    if not text:
        return (0, max(1, int(round(font_size_px))))
    left, top, right, bottom = font.getbbox(text, anchor="ls")
    return (max(0, int(round(font.getlength(text)))), max(1, int(bottom - top)))


def _align_offset(advance: float, align: str) -> float:
    if align == "left":
        return 0.0
    if align == "center":
        return advance / 2.0
    if align == "right":
        return advance
    raise ValueError(f"unknown text alignment: {align}")


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    src_alpha = (color[3] / 255.0) * cov
    if not np.any(src_alpha > 0):
        return

    patch = dst[y0:y1, x0:x1]
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    dst_rgb = patch[:, :, :3].astype(np.float32)
    out_rgb = src_rgb * src_alpha[:, :, None] + dst_rgb * (1.0 - src_alpha[:, :, None])
    patch[:, :, :3] = np.clip(out_rgb, 0, 255).astype(np.uint8)
    patch[:, :, 3] = 255


@lru_cache(maxsize=256)
def _render_mask(text: str, font: ImageFont.FreeTypeFont) -> tuple[np.ndarray, int, int]:
    left, top, right, bottom = font.getbbox(text, anchor="ls")
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font, anchor="ls")
    return np.asarray(image, dtype=np.uint8), int(left), int(top)


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is not None:
        try:
            return ImageFont.truetype(str(font_path), size=size)
        except OSError as exc:
            LOGGER.warning("could not load font %s (%s); using built-in font", font_path, exc)
    else:
        LOGGER.warning("no font matching %r found; using built-in font", font_family)
    return ImageFont.load_default(size=size)


def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() or DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + FONT_FALLBACK_PATTERNS

    candidates: list[Path] = []
    for base in FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            if p in path.stem.lower().replace(" ", ""):
                return path
    return None
