from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from graphview import Chart, DataPoint, DragTracker, Series, SeriesStyle, line_chart, make_series


def build_demo(*, filled: bool) -> Chart:
    sample = Series(
        points=(
            DataPoint(1, 2.0),
            DataPoint(2, 1.5),
            DataPoint(2.5, 3.0),
            DataPoint(3, 2.5),
            DataPoint(4, 1.0),
            DataPoint(5, 3.0),
        ),
        style=SeriesStyle(color=(0, 119, 204, 255), thickness=3.0),
        description="sample",
    )
    x = np.linspace(1.0, 5.0, 81, dtype=np.float64)
    wave = make_series(
        2.0 + 0.8 * np.sin(x * 2.2),
        x=x,
        color=(255, 170, 70, 255),
        thickness=2.0,
        description="wave",
    )
    return line_chart(
        800,
        480,
        sample,
        wave,
        title="GraphViewDemo",
        show_legend=True,
        legend_align="top",
        draw_filled=filled,
        scalable=True,
    )


def main() -> None:
    parser = argparse.ArgumentParser(prog="graph_view_demo")
    parser.add_argument("--out", type=Path, default=Path("graph_view_demo.png"))
    parser.add_argument("--filled", action="store_true")
    parser.add_argument("--pan", type=float, default=0.0, help="simulated drag distance in pixels")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    chart = build_demo(filled=args.filled)
    chart.set_viewport(2.0, 2.0)
    if args.pan:
        tracker = DragTracker()
        tracker.feed("down", 0.0)
        tracker.feed("move", 0.0)
        gesture = tracker.feed("move", args.pan)
        if gesture is not None:
            chart.handle_gesture(gesture)
    out = chart.save_png(args.out)
    logging.getLogger("graph_view_demo").info("wrote %s (viewport %s)", out, chart.viewport)


if __name__ == "__main__":
    main()
