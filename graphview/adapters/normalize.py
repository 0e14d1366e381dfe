from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np
import torch

from graphview.errors import ChartDataError
from graphview.series import DataPoint


def normalize_points(y: Any, *, x: Any = None) -> tuple[DataPoint, ...]:
    """Coerce user data into an ordered tuple of ``DataPoint``.

    ``y`` may already be a sequence of ``DataPoint`` or ``(x, y)`` pairs, in
    which case ``x`` must be omitted. Otherwise ``y`` (and optional ``x``) are
    1-D numeric inputs: lists, numpy arrays or torch tensors. Ordering by x is
    the caller's responsibility and is not checked here.
    """

    if y is None:
        raise ChartDataError("y input is required")

    if x is None and _is_point_sequence(y):
        return _points_from_pairs(y)

    y_arr = _coerce_1d_numeric(y, label="y")
    if y_arr.size == 0:
        raise ChartDataError("empty series")

    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = _coerce_1d_numeric(x, label="x")

    if x_arr.shape != y_arr.shape:
        raise ChartDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    finite = np.isfinite(x_arr) & np.isfinite(y_arr)
    if not np.all(finite):
        bad = int(np.flatnonzero(~finite)[0])
        raise ChartDataError(f"series contains a non-finite point at index {bad}")

    return tuple(DataPoint(x=float(px), y=float(py)) for px, py in zip(x_arr.tolist(), y_arr.tolist(), strict=True))


def _is_point_sequence(value: Any) -> bool:
    if isinstance(value, (np.ndarray, torch.Tensor, str, bytes, bytearray)):
        return False
    if not isinstance(value, Sequence) or len(value) == 0:
        return False
    first = value[0]
    if isinstance(first, DataPoint):
        return True
    return isinstance(first, (tuple, list)) and len(first) == 2


def _points_from_pairs(values: Sequence[Any]) -> tuple[DataPoint, ...]:
    out: list[DataPoint] = []
    for i, raw in enumerate(values):
        if isinstance(raw, DataPoint):
            px, py = raw.x, raw.y
        else:
            try:
                px, py = raw
            except (TypeError, ValueError) as exc:
                raise ChartDataError(f"point at index {i} is not an (x, y) pair: {raw!r}") from exc
        try:
            point = DataPoint(x=float(px), y=float(py))
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"point at index {i} is not numeric: {raw!r}") from exc
        if not (np.isfinite(point.x) and np.isfinite(point.y)):
            raise ChartDataError(f"series contains a non-finite point at index {i}")
        out.append(point)
    return tuple(out)


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
