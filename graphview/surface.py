from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, Sequence


RGBA = tuple[int, int, int, int]
TextAlign = Literal["left", "center", "right"]


@dataclass(frozen=True)
class DrawStyle:
    color: RGBA = (255, 255, 255, 255)
    stroke_width: float = 0.0
    text_size: float = 12.0
    align: TextAlign = "left"


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


class RenderSurface(Protocol):
    """Drawing primitives the chart renders through.

    Text is positioned by its baseline: ``y`` is the baseline row and ``x`` is
    interpreted according to ``style.align``.
    """

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, style: DrawStyle) -> None: ...

    def draw_path(self, polygon: Sequence[tuple[float, float]], style: DrawStyle) -> None: ...

    def draw_rect(self, rect: Rect, style: DrawStyle) -> None: ...

    def draw_rounded_rect(self, rect: Rect, radius_x: float, radius_y: float, style: DrawStyle) -> None: ...

    def draw_text(self, text: str, x: float, y: float, style: DrawStyle) -> None: ...

    def measure_text(self, text: str, style: DrawStyle) -> tuple[float, float]: ...


@dataclass(frozen=True)
class DrawCall:
    op: str
    args: tuple[Any, ...]
    style: DrawStyle


@dataclass
class RecordingSurface:
    """Surface that only records calls, for headless layout checks."""

    calls: list[DrawCall] = field(default_factory=list)
    char_width: float = 7.0

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, style: DrawStyle) -> None:
        self.calls.append(DrawCall("line", (x1, y1, x2, y2), style))

    def draw_path(self, polygon: Sequence[tuple[float, float]], style: DrawStyle) -> None:
        self.calls.append(DrawCall("path", (tuple(polygon),), style))

    def draw_rect(self, rect: Rect, style: DrawStyle) -> None:
        self.calls.append(DrawCall("rect", (rect,), style))

    def draw_rounded_rect(self, rect: Rect, radius_x: float, radius_y: float, style: DrawStyle) -> None:
        self.calls.append(DrawCall("rounded_rect", (rect, radius_x, radius_y), style))

    def draw_text(self, text: str, x: float, y: float, style: DrawStyle) -> None:
        self.calls.append(DrawCall("text", (text, x, y), style))

    def measure_text(self, text: str, style: DrawStyle) -> tuple[float, float]:
        return (len(text) * self.char_width, style.text_size)

    def ops(self, op: str) -> list[DrawCall]:
        return [call for call in self.calls if call.op == op]

    def texts(self) -> list[str]:
        return [call.args[0] for call in self.calls if call.op == "text"]

    def clear(self) -> None:
        self.calls.clear()
