from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
import math
from typing import Protocol, Sequence, runtime_checkable


DEFAULT_HORIZONTAL_SPACING_PX = 100.0
DEFAULT_VERTICAL_SPACING_PX = 80.0


@runtime_checkable
class LabelGenerator(Protocol):
    def generate_labels(self, range_span_px: float, vmin: float, vmax: float) -> list[str]: ...


class AdaptiveLabelGenerator:
    """Evenly spaced labels, one per ``spacing`` pixels of axis span."""

    def __init__(self, spacing: float) -> None:
        self._spacing = float(spacing)

    @property
    def spacing(self) -> float:
        return self._spacing

    @spacing.setter
    def spacing(self, value: float) -> None:
        self._spacing = float(value)

    def label_count(self, range_span_px: float) -> int:
        if self._spacing <= 0 or not math.isfinite(self._spacing):
            raise ValueError("label spacing must be > 0")
        return max(1, int(math.floor(range_span_px / self._spacing)) + 1)

    def generate_labels(self, range_span_px: float, vmin: float, vmax: float) -> list[str]:
        count = self.label_count(range_span_px)
        if count == 1:
            return [format_label(vmin, vmin, vmax)]
        span = vmax - vmin
        return [format_label(vmin + span * idx / (count - 1), vmin, vmax) for idx in range(count)]

    def __repr__(self) -> str:
        return f"AdaptiveLabelGenerator(spacing={self._spacing!r})"


class FixedLabelGenerator:
    """Returns a stored label list regardless of span or range."""

    def __init__(self, labels: Sequence[str]) -> None:
        if not labels:
            raise ValueError("fixed labels must not be empty")
        self._labels = tuple(str(label) for label in labels)

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    def generate_labels(self, range_span_px: float, vmin: float, vmax: float) -> list[str]:
        return list(self._labels)

    def __repr__(self) -> str:
        return f"FixedLabelGenerator(labels={list(self._labels)!r})"


def fraction_digits_for_span(span: float) -> int:
    if span < 0.1:
        return 6
    if span < 1:
        return 4
    if span < 20:
        return 3
    if span < 100:
        return 1
    return 0


def format_label(value: float, lowest: float, highest: float) -> str:
    """Format ``value`` with a precision chosen from the ``highest - lowest`` span.

    Precision is derived on every call so that no state carries over between
    axes with different ranges.
    """

    if not math.isfinite(value):
        return str(value)
    digits = fraction_digits_for_span(highest - lowest)
    quant = Decimal("1").scaleb(-digits)
    d = Decimal(str(value))
    try:
        q = d.quantize(quant, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        q = d
    out = format(q, ",f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out
