from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from graphview.errors import ChartDataError


RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float


@dataclass(frozen=True)
class SeriesStyle:
    color: RGBA = (0, 119, 204, 255)
    thickness: float = 3.0


@dataclass(frozen=True)
class Series:
    """One plotted dataset. Points must be sorted ascending by x."""

    points: tuple[DataPoint, ...]
    style: SeriesStyle = SeriesStyle()
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))
        if not self.points:
            raise ChartDataError("empty series")

    @classmethod
    def from_values(
        cls,
        y: Any,
        *,
        x: Any = None,
        style: SeriesStyle | None = None,
        description: str | None = None,
    ) -> "Series":
        from graphview.adapters.normalize import normalize_points

        return cls(
            points=normalize_points(y, x=x),
            style=style or SeriesStyle(),
            description=description,
        )

    @property
    def first_x(self) -> float:
        return self.points[0].x

    @property
    def last_x(self) -> float:
        return self.points[-1].x

    def __len__(self) -> int:
        return len(self.points)


def point_arrays(points: Sequence[DataPoint]) -> tuple[np.ndarray, np.ndarray]:
    n = len(points)
    xs = np.fromiter((p.x for p in points), dtype=np.float64, count=n)
    ys = np.fromiter((p.y for p in points), dtype=np.float64, count=n)
    return xs, ys
