"""
Per-kick result models.
"""
from dataclasses import dataclass
from enum import Enum, IntEnum

from .geometry import Point


class KickStyle(Enum):
    INSTEP       = "instep"
    OUTSIDE      = "outside"
    INSIDE       = "inside"
    UNDETERMINED = "undetermined"

    @classmethod
    def from_label(cls, label: str) -> "KickStyle":
        """Exact case-insensitive match (no trimming); raises ValueError otherwise."""
        return cls(label.lower())


class ScoreValue(IntEnum):
    ZERO    = 0
    ONE     = 1
    THREE   = 3
    FIVE    = 5
    FIFTEEN = 15


@dataclass
class KickMetrics:
    """The current shot's result, filled in while the shot completes."""
    score: ScoreValue = ScoreValue.ZERO
    release_speed: float = 0.0       # mph
    release_angle: float = 0.0       # degrees
    kick_style: KickStyle = KickStyle.UNDETERMINED
    landing_point: Point = (0.0, 0.0)

    def update_kick_style(self, style: KickStyle) -> None:
        self.kick_style = style

    def update_landing_point(self, point: Point) -> None:
        self.landing_point = point

    def update_metrics(self, score: ScoreValue, speed: float, angle: float) -> None:
        self.score = score
        self.release_speed = speed
        self.release_angle = angle

    def to_dict(self) -> dict:
        return {
            "score": int(self.score),
            "release_speed_mph": self.release_speed,
            "release_angle_deg": self.release_angle,
            "kick_style": self.kick_style.value,
            "landing_px": [round(self.landing_point[0], 1), round(self.landing_point[1], 1)],
        }
