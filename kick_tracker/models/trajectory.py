"""
Ball trajectory data models.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import numpy as np

from .geometry import Point


@dataclass
class TrajectoryPoint:
    x: float
    y: float
    timestamp_ms: float = 0.0

    @property
    def location(self) -> Point:
        return (self.x, self.y)


@dataclass
class TrajectoryPath:
    """
    One candidate ball path reported by the trajectory source.

    ``is_complete`` is the source's own "flight complete" verdict.
    """
    points: List[TrajectoryPoint] = field(default_factory=list)
    confidence: float = 0.0
    duration_s: float = 0.0
    is_complete: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def current_point(self) -> Optional[Point]:
        return self.points[-1].location if self.points else None

    @property
    def length_px(self) -> float:
        if len(self.points) < 2:
            return 0.0
        xy = np.array([p.location for p in self.points], dtype=float)
        return float(np.sum(np.hypot(*np.diff(xy, axis=0).T)))

    def to_dict(self) -> dict:
        return {
            "points": [[round(p.x, 1), round(p.y, 1)] for p in self.points],
            "confidence": round(self.confidence, 3),
            "duration_s": round(self.duration_s, 3),
            "complete": self.is_complete,
        }
