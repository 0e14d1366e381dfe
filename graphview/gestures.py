from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping


PointerPhase = Literal["down", "move", "up"]


@dataclass(frozen=True)
class PanGesture:
    """Horizontal drag of ``delta_px`` pixels (positive = rightwards)."""

    delta_px: float


@dataclass(frozen=True)
class ZoomGesture:
    """Pinch scale factor; > 1 zooms in, < 1 zooms out."""

    scale_factor: float


GestureEvent = PanGesture | ZoomGesture


def parse_gesture_event(event_type: str, payload: object) -> GestureEvent | None:
    """Decode a normalized host event into a typed gesture.

    Unknown event types and malformed payloads yield ``None`` so hosts can
    forward their whole event stream.
    """

    if not isinstance(payload, Mapping):
        return None
    if event_type == "pan":
        delta = payload.get("delta_px")
        if isinstance(delta, bool) or not isinstance(delta, (int, float)):
            return None
        return PanGesture(delta_px=float(delta))
    if event_type == "zoom":
        factor = payload.get("scale_factor")
        if isinstance(factor, bool) or not isinstance(factor, (int, float)) or factor <= 0:
            return None
        return ZoomGesture(scale_factor=float(factor))
    return None


class DragTracker:
    """Turns raw pointer x positions into pan deltas.

    The first move after a press only records the position; releasing the
    pointer forgets it.
    """

    def __init__(self) -> None:
        self._last_x: float | None = None

    @property
    def dragging(self) -> bool:
        return self._last_x is not None

    def feed(self, phase: PointerPhase, x: float) -> PanGesture | None:
        if phase == "down":
            self._last_x = None
            return None
        if phase == "up":
            self._last_x = None
            return None
        if phase != "move":
            raise ValueError(f"unknown pointer phase: {phase}")
        previous = self._last_x
        self._last_x = float(x)
        if previous is None:
            return None
        return PanGesture(delta_px=float(x) - previous)
