"""
Scene calibration.

Static geometry produced once by the goal detector during setup and used
for the rest of the session: goal region, top-corner region and the
crossbar length in pixels, from which the pixel → metre scale follows.

Stored as JSON so a scene can be reused for later runs of the same camera
placement.
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from .models.geometry import Point, Region
import config

logger = logging.getLogger(__name__)


@dataclass
class SceneCalibration:
    goal_region: Region
    top_corner_region: Region
    crossbar_length_px: float
    goal_length_m: float = config.GOAL_LENGTH_M

    @property
    def metres_per_px(self) -> float:
        if self.crossbar_length_px <= 0:
            return float("nan")
        return self.goal_length_m / self.crossbar_length_px

    @staticmethod
    def crossbar_length(start: Point, end: Point) -> float:
        return float(np.hypot(end[0] - start[0], end[1] - start[1]))

    def is_valid(self) -> bool:
        return (not self.goal_region.is_empty
                and not self.top_corner_region.is_empty
                and self.crossbar_length_px > 0)

    # ── Persistence ────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "goal_region": self.goal_region.to_dict(),
            "top_corner_region": self.top_corner_region.to_dict(),
            "crossbar_length_px": self.crossbar_length_px,
            "goal_length_m": self.goal_length_m,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "SceneCalibration":
        return cls(
            goal_region=Region.from_dict(d["goal_region"]),
            top_corner_region=Region.from_dict(d["top_corner_region"]),
            crossbar_length_px=float(d["crossbar_length_px"]),
            goal_length_m=float(d.get("goal_length_m", config.GOAL_LENGTH_M)),
        )

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info("Saved scene calibration -> %s", path)

    @classmethod
    def load(cls, path: Path) -> Optional["SceneCalibration"]:
        path = Path(path)
        if not path.exists():
            return None
        try:
            with open(path) as f:
                scene = cls.from_dict(json.load(f))
        except (OSError, ValueError, KeyError) as e:
            logger.error("Scene calibration load failed (%s): %s", path, e)
            return None
        logger.info("Loaded scene calibration <- %s", path)
        return scene
