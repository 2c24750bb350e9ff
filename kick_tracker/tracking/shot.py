"""
Per-frame shot tracking.

Consumes the trajectory source's candidate paths, keeps the full path of
the ball in flight, drives the RegionTracker and decides when a shot has
ended. A shot ends when

  (a) the tracked path is non-empty and the source reports the flight
      complete, or
  (b) the ball was in flight but no path at all arrived for more than
      ``no_observation_limit`` consecutive frames (the source can stop
      reporting before a path is truly finished).
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import List, Optional, Sequence

import numpy as np

from ..models.geometry import Point
from ..models.trajectory import TrajectoryPath, TrajectoryPoint
from .regions import RegionTracker
import config

logger = logging.getLogger(__name__)


@dataclass
class CompletedShot:
    path: TrajectoryPath
    landing_point: Point
    speed_px_s: float
    forced: bool = False          # True = ended by the no-observation limit


class ShotTracker:

    def __init__(
        self,
        regions: RegionTracker,
        min_confidence: float = config.TRAJECTORY_MIN_CONFIDENCE,
        no_observation_limit: int = config.NO_OBSERVATION_FRAME_LIMIT,
        max_jump_px: float = config.MAX_DISTANCE_WITH_TRAJECTORY,
    ):
        self.regions = regions
        self.min_confidence = min_confidence
        self.no_observation_limit = no_observation_limit
        self.max_jump_px = max_jump_px

        self._points: List[TrajectoryPoint] = []
        self._duration_s = 0.0
        self._confidence = 0.0
        self.no_observation_frames = 0

    # ── State ─────────────────────────────────────────────────────────────────

    @property
    def in_flight(self) -> bool:
        return bool(self._points)

    @property
    def current_point(self) -> Optional[Point]:
        return self._points[-1].location if self._points else None

    @property
    def duration_s(self) -> float:
        """Time spanned by the tracked points; falls back to the source's own duration."""
        if len(self._points) < 2:
            return self._duration_s
        span = (self._points[-1].timestamp_ms - self._points[0].timestamp_ms) / 1000.0
        return span if span > 0 else self._duration_s

    @property
    def trajectory(self) -> TrajectoryPath:
        return TrajectoryPath(
            points=list(self._points),
            confidence=self._confidence,
            duration_s=self.duration_s,
            is_complete=False,
        )

    def reset(self) -> None:
        self._points = []
        self._duration_s = 0.0
        self._confidence = 0.0
        self.no_observation_frames = 0

    # ── Per-frame update ──────────────────────────────────────────────────────

    def update(self, paths: Sequence[TrajectoryPath]) -> Optional[CompletedShot]:
        """Feed one frame's candidate paths. Returns a CompletedShot when the shot ends."""
        if not paths:
            if not self.in_flight:
                return None
            self.no_observation_frames += 1
            if self.no_observation_frames > self.no_observation_limit:
                logger.info("No trajectory for %d frames, ending shot",
                            self.no_observation_frames)
                return self._complete(forced=True)
            return None

        path = self._select(paths)
        if path is None:
            return None

        self._extend(path)
        self.no_observation_frames = 0
        if not self.in_flight:
            return None

        self.regions.update_regions(self.current_point)
        if path.is_complete:
            return self._complete(forced=False)
        return None

    def _select(self, paths: Sequence[TrajectoryPath]) -> Optional[TrajectoryPath]:
        qualifying = [p for p in paths
                      if p.confidence > self.min_confidence and not p.is_empty]
        if not qualifying:
            return None
        return max(qualifying, key=lambda p: p.confidence)

    def _extend(self, path: TrajectoryPath) -> None:
        point = path.points[-1]
        if not self._points:
            # A shot only starts inside the kick region
            if not self.regions.kick_region.contains(point.location):
                return
            # Seed with the part of the source path already inside the region
            seed = [p for p in path.points if self.regions.kick_region.contains(p.location)]
            self._points = seed or [point]
        else:
            last = self._points[-1]
            jump = float(np.hypot(point.x - last.x, point.y - last.y))
            if jump > self.max_jump_px:
                logger.debug("Ignoring jump of %.0f px", jump)
                return
            if jump > 0:
                self._points.append(point)
        self._duration_s = max(self._duration_s, path.duration_s)
        self._confidence = max(self._confidence, path.confidence)

    def _complete(self, forced: bool) -> CompletedShot:
        path = self.trajectory
        path.is_complete = True
        speed = path.length_px / path.duration_s if path.duration_s > 0 else 0.0
        shot = CompletedShot(
            path=path,
            landing_point=path.current_point,
            speed_px_s=speed,
            forced=forced,
        )
        self.reset()
        return shot
