"""
Screen-space geometry.

All coordinates are image pixels with the origin at the top-left and
y growing downward.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class Region:
    """
    Axis-aligned rectangle.

    Containment is half-open: the near edges are inside, the far
    edges (``max_x``/``max_y``) are not.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point) -> bool:
        px, py = point
        return self.x <= px < self.max_x and self.y <= py < self.max_y

    def with_x(self, x: float) -> "Region":
        return Region(x, self.y, self.width, self.height)

    def extended_up(self, amount: float) -> "Region":
        """Grow the region upward (toward y=0) by ``amount`` pixels."""
        return Region(self.x, self.y - amount, self.width, self.height + amount)

    def expanded(self, amount: float) -> "Region":
        """Grow the region by ``amount`` pixels on every side."""
        return Region(self.x - amount, self.y - amount,
                      self.width + 2 * amount, self.height + 2 * amount)

    def to_int_tuple(self) -> Tuple[int, int, int, int]:
        """(x1, y1, x2, y2) for OpenCV drawing."""
        return (int(self.x), int(self.y), int(self.max_x), int(self.max_y))

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, d: dict) -> "Region":
        return cls(float(d["x"]), float(d["y"]), float(d["width"]), float(d["height"]))

    @classmethod
    def bounding(cls, points: Iterable[Point]) -> Optional["Region"]:
        """Smallest region covering all points, or None for no points."""
        pts = list(points)
        if not pts:
            return None
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        return cls(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
