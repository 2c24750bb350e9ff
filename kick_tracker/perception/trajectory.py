"""
Trajectory source built from per-frame ball detections.

Keeps a rolling window of the latest detections and fits a parabola in
x(t) and y(t); the fit's RMS residual becomes the path confidence (a
kicked ball follows a clean second-order curve, detector noise does
not). A path is reported complete once the ball has been missing for
``lost_frames`` consecutive frames.
"""
from __future__ import annotations
from collections import deque
from typing import Deque, List, Optional
import numpy as np

from ..models.trajectory import TrajectoryPath, TrajectoryPoint
from .ball import BallDetection
import config


class TrajectoryBuilder:

    def __init__(
        self,
        window: int = config.TRAJECTORY_LENGTH,
        lost_frames: int = config.BALL_LOST_FRAMES,
        max_jump_px: float = config.MAX_DISTANCE_WITH_TRAJECTORY,
        fit_tolerance_px: float = config.FIT_TOLERANCE_PX,
        min_points: int = config.MIN_PATH_POINTS,
    ):
        self._window: Deque[TrajectoryPoint] = deque(maxlen=window)
        self.lost_frames = lost_frames
        self.max_jump_px = max_jump_px
        self.fit_tolerance_px = fit_tolerance_px
        self.min_points = min_points
        self._missing = 0

    def reset(self) -> None:
        self._window.clear()
        self._missing = 0

    def update(self, ball: Optional[BallDetection]) -> List[TrajectoryPath]:
        """Add a detection (or None for a missed frame); return this frame's paths."""
        if ball is None:
            if not self._window:
                return []
            self._missing += 1
            if self._missing < self.lost_frames:
                return []
            paths = [self._path(complete=True)] if len(self._window) >= self.min_points else []
            self.reset()
            return paths

        point = TrajectoryPoint(ball.x, ball.y, ball.timestamp_ms)
        if self._window:
            last = self._window[-1]
            if np.hypot(point.x - last.x, point.y - last.y) > self.max_jump_px:
                # Too far from the current path: treat as a new one
                self._window.clear()
        self._missing = 0
        self._window.append(point)

        if len(self._window) < self.min_points:
            return []
        return [self._path(complete=False)]

    # ── Internals ──────────────────────────────────────────────────────────────

    def _path(self, complete: bool) -> TrajectoryPath:
        points = list(self._window)
        t  = np.array([p.timestamp_ms for p in points], dtype=float)
        t -= t[0]
        t /= 1000.0
        return TrajectoryPath(
            points=points,
            confidence=self._fit_confidence(t, points),
            duration_s=float(t[-1]),
            is_complete=complete,
        )

    def _fit_confidence(self, t: np.ndarray, points: List[TrajectoryPoint]) -> float:
        if len(points) < 3 or np.ptp(t) <= 0:
            return 0.0
        xs = np.array([p.x for p in points])
        ys = np.array([p.y for p in points])
        deg = min(2, len(points) - 1)
        rx = xs - np.polyval(np.polyfit(t, xs, deg), t)
        ry = ys - np.polyval(np.polyfit(t, ys, deg), t)
        rms = float(np.sqrt(np.mean(rx ** 2 + ry ** 2)))
        return float(np.clip(1.0 - rms / self.fit_tolerance_px, 0.0, 1.0))
