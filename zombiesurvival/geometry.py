"""Axis-aligned rectangles and small vector helpers shared by game objects."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vec = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in world coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Vec:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap with a non-empty area."""
        left = max(min(self.left, self.right), min(other.left, other.right))
        right = min(max(self.left, self.right), max(other.left, other.right))
        top = max(min(self.top, self.bottom), min(other.top, other.bottom))
        bottom = min(max(self.top, self.bottom), max(other.top, other.bottom))
        return left < right and top < bottom


def shape_bounds(
    position: Vec, size: Vec, origin: Vec = (0.0, 0.0), scale: Vec = (1.0, 1.0)
) -> Rect:
    """Bounding box of a rectangle of ``size`` placed at ``position``.

    ``origin`` is the local point that sits on ``position``; ``scale`` is
    applied around that origin and may be negative (mirroring).
    """
    xs = [position[0] + (edge - origin[0]) * scale[0] for edge in (0.0, size[0])]
    ys = [position[1] + (edge - origin[1]) * scale[1] for edge in (0.0, size[1])]
    return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def normalized(vector: Vec) -> Vec:
    """Return ``vector`` scaled to unit length; the zero vector stays zero."""
    x, y = vector
    length = math.hypot(x, y)
    if length == 0.0:
        return (float(x), float(y))
    return (x / length, y / length)