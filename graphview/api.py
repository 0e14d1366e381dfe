from __future__ import annotations

from typing import Any

from graphview.chart import Chart
from graphview.config import ChartConfig, validate_chart_config
from graphview.series import Series, SeriesStyle


def line_chart(
    width: int,
    height: int,
    *series: Series,
    title: str = "",
    config: ChartConfig | None = None,
    **options: Any,
) -> Chart:
    """Build a chart from keyword options and attach ``series`` in order.

    ``options`` are ``ChartConfig`` field names; they are applied on top of
    ``config`` when both are given.
    """

    if config is not None and options:
        merged = {**_config_items(config), **options}
        config = validate_chart_config(merged)
    elif config is None:
        config = validate_chart_config(options)
    chart = Chart(width, height, config, title=title)
    for s in series:
        chart.add_series(s)
    return chart


def make_series(
    y: Any,
    *,
    x: Any = None,
    color: tuple[int, int, int, int] | None = None,
    thickness: float | None = None,
    description: str | None = None,
) -> Series:
    style = SeriesStyle()
    if color is not None or thickness is not None:
        style = SeriesStyle(
            color=color if color is not None else style.color,
            thickness=float(thickness) if thickness is not None else style.thickness,
        )
    return Series.from_values(y, x=x, style=style, description=description)


def _config_items(config: ChartConfig) -> dict[str, Any]:
    return {name: getattr(config, name) for name in config.__dataclass_fields__}
