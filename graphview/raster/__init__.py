from .canvas import draw_hline, draw_pixel, draw_vline, fill_rect, new_canvas
from .draw_lines import draw_segment
from .draw_shapes import fill_polygon, fill_rounded_rect
from .draw_text import draw_text, text_size
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "draw_hline",
    "draw_pixel",
    "draw_segment",
    "draw_text",
    "draw_vline",
    "fill_polygon",
    "fill_rect",
    "fill_rounded_rect",
    "new_canvas",
    "text_size",
]
