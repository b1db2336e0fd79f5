"""Axis-aligned rectangles used for room layout."""

from __future__ import annotations

from dataclasses import dataclass


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its corner coordinates."""

    x1: int
    x2: int
    y1: int
    y2: int
    radius: float | None = None

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        """Build a rectangle from its top-left corner and its size."""
        return cls(x1=x, x2=x + w, y1=y, y2=y + h)

    def intersect(self, other: Rect) -> bool:
        """Return True if this rectangle overlaps or touches ``other``."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def center(self) -> tuple[int, int]:
        """Return the centre point, rounding toward zero."""
        return _half(self.x1 + self.x2), _half(self.y1 + self.y2)