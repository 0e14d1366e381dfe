from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
import re
import tomllib
from typing import Any, Literal, Mapping


RGBA = tuple[int, int, int, int]
LegendAlign = Literal["top", "middle", "bottom"]

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")
_LEGEND_ALIGNS = ("top", "middle", "bottom")

WHITE: RGBA = (255, 255, 255, 255)
DARK_GRAY: RGBA = (68, 68, 68, 255)
BLACK: RGBA = (0, 0, 0, 255)


@dataclass(frozen=True)
class ChartConfig:
    """Flat chart options. ``None`` for ``min_y``/``max_y`` means autoscale."""

    min_y: float | None = None
    max_y: float | None = None
    lower_border_px: float = 20.0
    left_border_px: float = 50.0
    vertical_label_spacing_px: float = 100.0
    horizontal_label_spacing_px: float = 80.0
    vertical_label_color: RGBA = WHITE
    horizontal_label_color: RGBA = WHITE
    title_color: RGBA = WHITE
    vertical_label_text_size: float = 15.0
    label_text_size: float = 12.0
    grid_color: RGBA = DARK_GRAY
    background_color: RGBA = BLACK
    show_legend: bool = False
    legend_width: float = 120.0
    legend_align: LegendAlign = "middle"
    legend_background_color: RGBA = (100, 100, 100, 180)
    legend_text_color: RGBA = WHITE
    draw_filled: bool = False
    draw_background: bool = False
    scrollable: bool = False
    scalable: bool = False


DEFAULT_CONFIG = ChartConfig()

_COLOR_FIELDS = (
    "vertical_label_color",
    "horizontal_label_color",
    "title_color",
    "grid_color",
    "background_color",
    "legend_background_color",
    "legend_text_color",
)
_POSITIVE_FIELDS = (
    "vertical_label_spacing_px",
    "horizontal_label_spacing_px",
    "vertical_label_text_size",
    "label_text_size",
    "legend_width",
)
_NON_NEGATIVE_FIELDS = ("lower_border_px", "left_border_px")
_FLAG_FIELDS = ("show_legend", "draw_filled", "draw_background", "scrollable", "scalable")


def validate_chart_config(overrides: Mapping[str, Any] | None = None) -> ChartConfig:
    """Merge ``overrides`` over the defaults and validate every field."""

    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown chart option: {key}")
            raw[key] = value

    for key in _COLOR_FIELDS:
        raw[key] = parse_color(raw[key], field_name=key)

    for key in ("min_y", "max_y"):
        if raw[key] is not None:
            raw[key] = _coerce_number(raw[key], key)

    for key in _POSITIVE_FIELDS:
        raw[key] = _coerce_number(raw[key], key)
        if raw[key] <= 0:
            raise ValueError(f"Option `{key}` must be > 0")

    for key in _NON_NEGATIVE_FIELDS:
        raw[key] = _coerce_number(raw[key], key)
        if raw[key] < 0:
            raise ValueError(f"Option `{key}` must be >= 0")

    for key in _FLAG_FIELDS:
        if not isinstance(raw[key], bool):
            raise ValueError(f"Option `{key}` must be a boolean")

    align = raw["legend_align"]
    if not isinstance(align, str) or align.lower() not in _LEGEND_ALIGNS:
        raise ValueError("Option `legend_align` must be one of top, middle, bottom")
    raw["legend_align"] = align.lower()

    return ChartConfig(**{f.name: raw[f.name] for f in fields(ChartConfig)})


def load_chart_config(path: str | Path) -> ChartConfig:
    """Read options from a TOML file, either top-level or under ``[chart]``."""

    with Path(path).open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("chart", raw)
    if not isinstance(table, dict):
        raise ValueError("`chart` must be a table")
    return validate_chart_config(table)


def parse_color(value: Any, *, field_name: str = "color") -> RGBA:
    if isinstance(value, str):
        if not _HEX_COLOR.match(value):
            raise ValueError(f"Option `{field_name}` must be a hex color (#RRGGBB or #RRGGBBAA)")
        r, g, b = (int(value[i : i + 2], 16) for i in (1, 3, 5))
        a = int(value[7:9], 16) if len(value) == 9 else 255
        return (r, g, b, a)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        channels = [int(c) for c in value]
        if any(c < 0 or c > 255 for c in channels):
            raise ValueError(f"Option `{field_name}` channels must be in 0..255")
        if len(channels) == 3:
            channels.append(255)
        return (channels[0], channels[1], channels[2], channels[3])
    raise ValueError(f"Option `{field_name}` must be a hex string or an RGB(A) tuple")


def _coerce_number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Option `{key}` must be a number")
    return float(value)
