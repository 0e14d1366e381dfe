from __future__ import annotations

import unittest

import numpy as np
import torch

from graphview import ChartDataError, DataPoint, Series
from graphview.adapters.normalize import normalize_points


class NormalizePointsTests(unittest.TestCase):
    def test_pairs_and_data_points(self) -> None:
        self.assertEqual(normalize_points([(1, 2), (3, 4)]), (DataPoint(1.0, 2.0), DataPoint(3.0, 4.0)))
        pts = (DataPoint(0.0, 1.0), DataPoint(1.0, 0.5))
        self.assertEqual(normalize_points(list(pts)), pts)

    def test_index_used_when_x_omitted(self) -> None:
        self.assertEqual([p.x for p in normalize_points([5.0, 6.0, 7.0])], [0.0, 1.0, 2.0])

    def test_numpy_and_torch_inputs(self) -> None:
        from_numpy = normalize_points(np.asarray([1.0, 2.0]), x=np.asarray([10, 20]))
        from_torch = normalize_points(torch.tensor([1.0, 2.0]), x=torch.tensor([10.0, 20.0]))
        self.assertEqual(from_numpy, from_torch)
        self.assertEqual(from_numpy[1], DataPoint(20.0, 2.0))

    def test_invalid_inputs(self) -> None:
        cases = (
            ([], None),
            ([1.0, 2.0], [1.0]),
            ([1.0, float("nan")], None),
            (np.zeros((2, 2)), None),
            (["a", "b"], None),
            ("12", None),
        )
        for y, x in cases:
            with self.subTest(y=y, x=x):
                with self.assertRaises(ChartDataError):
                    normalize_points(y, x=x)

    def test_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            normalize_points(None)

    def test_series_from_values(self) -> None:
        series = Series.from_values([3.0, 1.0], x=[0.0, 2.0], description="s")
        self.assertEqual(series.first_x, 0.0)
        self.assertEqual(series.last_x, 2.0)
        self.assertEqual(len(series), 2)

    def test_empty_series_rejected(self) -> None:
        with self.assertRaises(ChartDataError):
            Series(points=())


if __name__ == "__main__":
    unittest.main()
