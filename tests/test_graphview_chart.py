from __future__ import annotations

import unittest

from graphview import (
    Chart,
    ChartStateError,
    DataPoint,
    FixedLabelGenerator,
    PanGesture,
    RecordingSurface,
    Series,
    SeriesIndexError,
    SeriesStyle,
    ZoomGesture,
    line_chart,
    make_series,
)
from graphview.renderers import BACKGROUND_COLOR, FilledAreaRenderer, LineRenderer


SAMPLE = ((1.0, 2.0), (2.0, 1.5), (2.5, 3.0), (3.0, 2.5), (4.0, 1.0), (5.0, 3.0))
RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)


def _series(pairs=SAMPLE, color=RED, description: str | None = None) -> Series:
    return Series(
        points=tuple(DataPoint(x, y) for x, y in pairs),
        style=SeriesStyle(color=color, thickness=2.0),
        description=description,
    )


def _chart(**options) -> Chart:
    chart = Chart(400, 240, options or None, title="demo")
    chart.add_series(_series())
    return chart


def _series_lines(surface: RecordingSurface, color=RED) -> list:
    return [call for call in surface.ops("line") if call.style.color == color]


class ChartLayoutTests(unittest.TestCase):
    def test_layout_reserves_borders(self) -> None:
        layout = _chart().layout()
        self.assertEqual(layout.width, 399.0)
        self.assertEqual(layout.graph_width, 349.0)
        self.assertEqual(layout.graph_height, 200.0)
        self.assertEqual(layout.geometry.baseline, 220.0)

    def test_rejects_non_positive_size(self) -> None:
        with self.assertRaises(ValueError):
            Chart(0, 100)

    def test_too_small_for_borders(self) -> None:
        with self.assertRaises(ValueError):
            Chart(40, 30).layout()


class ChartDrawTests(unittest.TestCase):
    def test_draw_emits_labels_grid_title_and_series(self) -> None:
        chart = _chart()
        surface = RecordingSurface()
        chart.draw(surface)

        self.assertEqual(chart.horizontal_labels(), ["1", "2.333", "3.667", "5"])
        self.assertEqual(chart.vertical_labels(), ["1", "2", "3"])
        texts = surface.texts()
        for label in ("1", "2", "3", "2.333", "3.667", "5", "demo"):
            self.assertIn(label, texts)
        grid = [call for call in surface.ops("line") if call.style.color == chart.config.grid_color]
        self.assertEqual(len(grid), 3 + 4)
        self.assertEqual(len(_series_lines(surface)), len(SAMPLE) - 1)

    def test_vertical_labels_run_bottom_to_top(self) -> None:
        chart = _chart()
        surface = RecordingSurface()
        chart.draw(surface)
        rows = {call.args[0]: call.args[2] for call in surface.ops("text") if call.args[1] == 0.0}
        self.assertEqual(rows["1"], 220.0)
        self.assertEqual(rows["3"], 20.0)

    def test_horizontal_label_alignment(self) -> None:
        chart = _chart()
        chart.set_horizontal_labels(["a", "b", "c"])
        surface = RecordingSurface()
        chart.draw(surface)
        aligns = {call.args[0]: call.style.align for call in surface.ops("text") if call.args[0] in "abc"}
        self.assertEqual(aligns, {"a": "left", "b": "center", "c": "right"})

    def test_flat_y_range_draws_axes_only(self) -> None:
        chart = Chart(400, 240, {"show_legend": True})
        chart.add_series(_series(((0.0, 4.0), (1.0, 4.0), (2.0, 4.0))))
        surface = RecordingSurface()
        chart.draw(surface)
        self.assertEqual(_series_lines(surface), [])
        self.assertEqual(surface.ops("rounded_rect"), [])
        self.assertGreater(len(surface.ops("line")), 0)

    def test_filled_mode_draws_one_polygon_per_series(self) -> None:
        chart = _chart(draw_filled=True)
        self.assertIsInstance(chart.renderer, FilledAreaRenderer)
        surface = RecordingSurface()
        chart.draw(surface)
        paths = surface.ops("path")
        self.assertEqual(len(paths), 1)
        self.assertEqual(len(paths[0].args[0]), len(SAMPLE) + 3)
        self.assertEqual(_series_lines(surface), [])

    def test_background_mode_shades_under_line(self) -> None:
        chart = _chart(draw_background=True)
        self.assertEqual(chart.renderer, LineRenderer(draw_background=True))
        surface = RecordingSurface()
        chart.draw(surface)
        shaded = [call for call in surface.ops("line") if call.style.color == BACKGROUND_COLOR]
        self.assertGreater(len(shaded), len(SAMPLE))
        self.assertEqual(len(_series_lines(surface)), len(SAMPLE) - 1)

    def test_legend_rows_follow_series_order(self) -> None:
        chart = Chart(400, 240, {"show_legend": True})
        chart.add_series(_series(color=RED, description="first"))
        chart.add_series(_series(color=GREEN, description="second"))
        surface = RecordingSurface()
        chart.draw(surface)

        box = chart.legend_rect()
        self.assertEqual((box.left, box.top, box.right, box.bottom), (269.0, 97.5, 389.0, 142.5))
        self.assertEqual(len(surface.ops("rounded_rect")), 1)
        swatches = [call.style.color for call in surface.ops("rect")]
        self.assertEqual(swatches, [RED, GREEN])
        texts = surface.texts()
        self.assertLess(texts.index("first"), texts.index("second"))

    def test_legend_alignment(self) -> None:
        chart = _chart()
        chart.set_legend_align("top")
        self.assertEqual(chart.legend_rect().top, 10.0)
        chart.set_legend_align("bottom")
        self.assertEqual(chart.legend_rect().bottom, 240.0 - 20.0 - 10.0)
        with self.assertRaises(ValueError):
            chart.set_legend_align("left")  # type: ignore[arg-type]


class ChartStateTests(unittest.TestCase):
    def test_remove_series_out_of_range(self) -> None:
        chart = _chart()
        with self.assertRaises(SeriesIndexError) as ctx:
            chart.remove_series(3)
        self.assertIsInstance(ctx.exception, IndexError)
        self.assertEqual(len(chart.series), 1)

    def test_remove_series_by_instance(self) -> None:
        chart = _chart()
        extra = _series(color=GREEN)
        chart.add_series(extra)
        chart.remove_series(extra)
        self.assertEqual(len(chart.series), 1)
        chart.remove_series(_series())
        self.assertEqual(len(chart.series), 1)

    def test_remove_and_readd_restores_bounds(self) -> None:
        chart = _chart()
        chart.draw(RecordingSurface())
        before = chart.bounds()
        labels_before = list(chart.horizontal_labels())
        chart.remove_series(0)
        chart.draw(RecordingSurface())
        chart.add_series(_series())
        chart.draw(RecordingSurface())
        self.assertEqual(chart.bounds(), before)
        self.assertEqual(chart.horizontal_labels(), labels_before)

    def test_label_cache_reused_until_invalidated(self) -> None:
        chart = _chart()
        chart.draw(RecordingSurface())
        first = chart.horizontal_labels()
        chart.draw(RecordingSurface())
        self.assertIs(chart.horizontal_labels(), first)
        chart.redraw_all()
        self.assertIsNone(chart.state.labels.horizontal)

    def test_scroll_to_end_requires_scrollable(self) -> None:
        chart = _chart()
        chart.set_viewport(1.0, 2.0)
        with self.assertRaises(ChartStateError):
            chart.scroll_to_end()
        chart.set_scrollable(True)
        chart.scroll_to_end()
        self.assertEqual(chart.viewport.start, 3.0)

    def test_pan_ignored_unless_scrollable(self) -> None:
        chart = _chart()
        chart.set_viewport(2.0, 1.0)
        self.assertFalse(chart.apply_pan(-100.0))
        self.assertEqual(chart.viewport.start, 2.0)

    def test_pan_moves_viewport_and_invalidates_labels(self) -> None:
        chart = _chart()
        chart.set_viewport(2.0, 1.0)
        chart.set_scrollable(True)
        chart.draw(RecordingSurface())
        self.assertIsNotNone(chart.state.labels.horizontal)
        self.assertTrue(chart.apply_pan(-chart.layout().graph_width))
        self.assertEqual(chart.viewport.start, 3.0)
        self.assertIsNone(chart.state.labels.horizontal)
        self.assertIsNone(chart.state.labels.vertical)
        self.assertEqual(chart.bounds().min_x, 3.0)

    def test_scalable_forces_scrollable(self) -> None:
        chart = _chart()
        chart.set_scalable(True)
        self.assertTrue(chart.scrollable)

    def test_zoom_gestures(self) -> None:
        chart = _chart()
        chart.set_viewport(2.0, 2.0)
        self.assertFalse(chart.handle_gesture(ZoomGesture(scale_factor=2.0)))
        chart.set_scalable(True)
        self.assertFalse(chart.handle_gesture(ZoomGesture(scale_factor=1.0)))
        self.assertTrue(chart.handle_gesture(ZoomGesture(scale_factor=2.0)))
        self.assertEqual((chart.viewport.start, chart.viewport.size), (2.5, 1.0))
        self.assertTrue(chart.handle_gesture(ZoomGesture(scale_factor=0.1)))
        self.assertEqual((chart.viewport.start, chart.viewport.size), (1.0, 4.0))

    def test_zoom_invalidates_both_label_caches(self) -> None:
        chart = _chart(scalable=True)
        chart.set_viewport(2.0, 2.0)
        chart.draw(RecordingSurface())
        self.assertIsNotNone(chart.state.labels.horizontal)
        self.assertIsNotNone(chart.state.labels.vertical)
        self.assertTrue(chart.apply_zoom(2.0))
        self.assertIsNone(chart.state.labels.horizontal)
        self.assertIsNone(chart.state.labels.vertical)
        self.assertEqual(chart.horizontal_labels()[0], "2.5")

    def test_pan_gesture_dispatch(self) -> None:
        chart = _chart(scrollable=True)
        chart.set_viewport(2.0, 1.0)
        self.assertTrue(chart.handle_gesture(PanGesture(delta_px=chart.layout().graph_width)))
        self.assertEqual(chart.viewport.start, 1.0)

    def test_manual_y_axis_from_config_and_toggle(self) -> None:
        chart = _chart(min_y=0.0, max_y=10.0)
        bounds = chart.bounds()
        self.assertEqual((bounds.min_y, bounds.max_y), (0.0, 10.0))
        chart.set_manual_y_axis(False)
        bounds = chart.bounds()
        self.assertEqual((bounds.min_y, bounds.max_y), (1.0, 3.0))
        chart.set_manual_y_axis_bounds(max_y=4.0, min_y=-4.0)
        bounds = chart.bounds()
        self.assertEqual((bounds.min_y, bounds.max_y), (-4.0, 4.0))

    def test_manual_y_axis_changes_invalidate_labels(self) -> None:
        chart = _chart()
        chart.draw(RecordingSurface())
        self.assertEqual(chart.vertical_labels(), ["1", "2", "3"])
        chart.set_manual_y_axis_bounds(max_y=4.0, min_y=-4.0)
        self.assertIsNone(chart.state.labels.horizontal)
        self.assertIsNone(chart.state.labels.vertical)
        self.assertEqual(chart.vertical_labels(), ["-4", "0", "4"])
        chart.draw(RecordingSurface())
        chart.set_manual_y_axis(False)
        self.assertIsNone(chart.state.labels.vertical)
        self.assertEqual(chart.vertical_labels(), ["1", "2", "3"])

    def test_label_spacing_change_regenerates_labels(self) -> None:
        chart = _chart()
        self.assertEqual(chart.horizontal_labels(), ["1", "2.333", "3.667", "5"])
        chart.horizontal_label_generator.spacing = 50.0
        labels = chart.horizontal_labels()
        self.assertEqual(len(labels), 7)
        self.assertEqual((labels[0], labels[3], labels[-1]), ("1", "3", "5"))

    def test_custom_label_generator(self) -> None:
        chart = _chart()
        chart.set_vertical_label_generator(FixedLabelGenerator(["lo", "hi"]))
        self.assertEqual(chart.vertical_labels(), ["lo", "hi"])
        chart.set_vertical_labels(None)
        self.assertEqual(chart.vertical_labels(), ["1", "2", "3"])


class LineChartFactoryTests(unittest.TestCase):
    def test_factory_attaches_series_in_order(self) -> None:
        a = make_series([1.0, 2.0, 3.0], description="a")
        b = make_series([3.0, 1.0], x=[0.5, 1.5], color=GREEN, description="b")
        chart = line_chart(320, 200, a, b, title="t", show_legend=True)
        self.assertEqual([s.description for s in chart.series], ["a", "b"])
        self.assertTrue(chart.show_legend)
        self.assertEqual(chart.domain(), (0.0, 2.0))
        self.assertEqual(b.style.color, GREEN)


if __name__ == "__main__":
    unittest.main()
