from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass
class Viewport:
    """Visible window ``[start, start + size]`` into the x domain.

    ``size == 0`` means no window is active and the full data range is shown.
    """

    start: float = 0.0
    size: float = 0.0

    @property
    def active(self) -> bool:
        return self.size != 0

    @property
    def end(self) -> float:
        return self.start + self.size

    def set(self, start: float, size: float) -> None:
        self.start = float(start)
        self.size = float(size)

    def clear(self) -> None:
        self.start = 0.0
        self.size = 0.0

    def active_window(self, domain_min: float, domain_max: float) -> tuple[float, float]:
        if self.active:
            return (self.start, self.start + self.size)
        return (domain_min, domain_max)

    def pan(self, pixel_delta: float, pixels_per_unit: float, domain_min: float, domain_max: float) -> bool:
        """Shift the window by a drag of ``pixel_delta`` pixels.

        Dragging right (positive delta) moves the window towards smaller x.
        Returns False when the viewport is inactive and nothing changed.
        """

        if not self.active:
            return False
        if pixels_per_unit <= 0:
            raise ValueError("pixels_per_unit must be > 0")
        self.start -= pixel_delta / pixels_per_unit
        if self.start < domain_min:
            self.start = domain_min
        elif self.start + self.size > domain_max:
            self.start = max(domain_min, domain_max - self.size)
        self._fit_right(domain_min, domain_max)
        return True

    def zoom(self, scale_factor: float, domain_min: float, domain_max: float) -> bool:
        """Scale the window around its center; factors > 1 zoom in."""

        if scale_factor <= 0:
            raise ValueError("scale_factor must be > 0")
        if not self.active or scale_factor == 1:
            return False
        if domain_max <= domain_min:
            # A single x value leaves nothing to zoom.
            return False
        center = self.start + self.size / 2
        self.size /= scale_factor
        self.start = center - self.size / 2

        if self.start < domain_min:
            self.start = domain_min

        overlap = self.start + self.size - domain_max
        if overlap > 0:
            if self.start - overlap > domain_min:
                self.start -= overlap
            else:
                # Window would exceed the domain: show all of it.
                self.start = domain_min
                self.size = domain_max - domain_min
        self._fit_right(domain_min, domain_max)
        return True

    def _fit_right(self, domain_min: float, domain_max: float) -> None:
        """Shrink ``size`` so ``start + size <= domain_max`` holds exactly in floats."""

        if domain_max <= domain_min or self.start >= domain_max:
            return
        if self.start + self.size > domain_max:
            self.size = domain_max - self.start
        while self.start + self.size > domain_max:
            self.size = math.nextafter(self.size, 0.0)

    def scroll_to_end(self, domain_max: float) -> None:
        self.start = domain_max - self.size

    def contains_window(self, domain_min: float, domain_max: float, tolerance: float = 0.0) -> bool:
        return domain_min - tolerance <= self.start and self.start + self.size <= domain_max + tolerance
