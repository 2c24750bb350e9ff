"""
Regions of interest for shot tracking.

kick region   – window right of the subject in which a shot starts;
                it chases the ball left-to-right while in flight.
target region – the goal padded horizontally; once the ball is inside
                it, the kick region snaps to it for the rest of the flight.
"""
from __future__ import annotations
from typing import Optional

from ..models.geometry import Point, Region
import config


class RegionTracker:

    def __init__(
        self,
        kick_x_buffer: float = config.KICK_X_BUFFER,
        kick_y_buffer: float = config.KICK_Y_BUFFER,
        kick_width: float = config.KICK_REGION_WIDTH,
        target_x_buffer: float = config.TARGET_X_BUFFER,
        overlap_buffer: float = config.OVERLAP_BUFFER,
    ):
        self.kick_x_buffer = kick_x_buffer
        self.kick_y_buffer = kick_y_buffer
        self.kick_width = kick_width
        self.target_x_buffer = target_x_buffer
        self.overlap_buffer = overlap_buffer

        self.kick_region: Optional[Region] = None
        self.target_region: Optional[Region] = None

    @property
    def is_ready(self) -> bool:
        return self.kick_region is not None and self.target_region is not None

    def reset_regions(self, goal_region: Region, subject_box: Region) -> None:
        self.kick_region = Region(
            x=subject_box.max_x + self.kick_x_buffer,
            y=0,
            width=self.kick_width,
            height=subject_box.height - self.kick_y_buffer,
        )
        self.target_region = Region(
            x=goal_region.x - self.target_x_buffer,
            y=0,
            width=goal_region.width + 2 * self.target_x_buffer,
            height=goal_region.max_y,
        )

    def update_regions(self, point: Point) -> Region:
        """Move the kick region after the ball's current point; returns it."""
        if not self.is_ready:
            raise RuntimeError("RegionTracker.update_regions called before reset_regions")
        kick, target = self.kick_region, self.target_region

        crossed_center = point[0] > kick.mid_x
        if kick.contains(point) and crossed_center:
            return kick

        if target.contains(point):
            self.kick_region = target
        elif point[0] + kick.width / 2 - self.overlap_buffer < target.x:
            self.kick_region = kick.with_x(point[0] - kick.width / 2)
        return self.kick_region
