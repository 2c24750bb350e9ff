"""
Session-level aggregate statistics.
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List

from .kick import KickStyle, ScoreValue
from .pose import PoseObservation
from .trajectory import TrajectoryPath
from ..errors import SessionCompleteError
import config


def _style_counts() -> Dict[KickStyle, int]:
    return {style: 0 for style in KickStyle}


@dataclass
class SessionStats:
    """
    Running totals for a fixed-length kicking session.

    Averages are incremental means; raw per-kick speeds are not kept.
    """
    max_kicks: int = config.MAX_KICKS
    pose_capacity: int = config.MAX_POSE_OBSERVATIONS

    total_score: int = 0
    kick_count: int = 0
    top_speed: float = 0.0
    avg_speed: float = 0.0
    release_angle: float = 0.0       # last computed release angle
    avg_release_angle: float = 0.0
    style_counts: Dict[KickStyle, int] = field(default_factory=_style_counts)
    score_history: List[int] = field(default_factory=list)
    kick_paths: List[TrajectoryPath] = field(default_factory=list)
    pose_buffer: Deque[PoseObservation] = field(init=False)

    def __post_init__(self):
        self.pose_buffer = deque(maxlen=self.pose_capacity)

    @property
    def is_complete(self) -> bool:
        return self.kick_count >= self.max_kicks

    # ── Mutation ──────────────────────────────────────────────────────────────

    def adjust_metrics(
        self,
        score: ScoreValue,
        speed: float,
        angle: float,
        style: KickStyle,
    ) -> None:
        """Fold one completed kick into the running totals."""
        if self.kick_count >= self.max_kicks:
            raise SessionCompleteError(self.max_kicks)
        self.kick_count += 1
        n = self.kick_count
        self.total_score += int(score)
        self.avg_speed = (self.avg_speed * (n - 1) + speed) / n
        self.avg_release_angle = (self.avg_release_angle * (n - 1) + angle) / n
        if speed > self.top_speed:
            self.top_speed = speed
        self.style_counts[style] += 1
        self.score_history.append(int(score))

    def reset(self) -> None:
        """Start a fresh session: counters, averages and pose buffer."""
        self.total_score = 0
        self.kick_count = 0
        self.top_speed = 0.0
        self.avg_speed = 0.0
        self.release_angle = 0.0
        self.avg_release_angle = 0.0
        self.style_counts = _style_counts()
        self.score_history = []
        self.kick_paths = []
        self.pose_buffer.clear()

    def reset_observations(self) -> None:
        """Drop buffered poses only; totals are untouched."""
        self.pose_buffer.clear()

    def store_observation(self, observation: PoseObservation) -> None:
        # deque(maxlen) evicts the oldest entry once full
        self.pose_buffer.append(observation)

    def store_path(self, path: TrajectoryPath) -> None:
        self.kick_paths.append(path)

    # ── Output ────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "total_score": self.total_score,
            "kick_count": self.kick_count,
            "max_kicks": self.max_kicks,
            "top_speed_mph": round(self.top_speed, 2),
            "avg_speed_mph": round(self.avg_speed, 2),
            "avg_release_angle_deg": round(self.avg_release_angle, 2),
            "kick_styles": {s.value: c for s, c in self.style_counts.items()},
            "scores": list(self.score_history),
        }
