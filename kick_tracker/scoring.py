"""
Shot scoring and speed conversion.

The trajectory may end a few pixels above the goal, especially when the
ball bounces in, so goal and top-corner regions are extended upward by a
fixed buffer before the containment checks.
"""
from __future__ import annotations

from .models.geometry import Point, Region
from .models.kick import KickStyle, ScoreValue
import config


def compute_score(
    landing_point: Point,
    kick_style: KickStyle,
    goal_region: Region,
    top_corner_region: Region,
    height_buffer: float = config.SCORE_HEIGHT_BUFFER,
) -> ScoreValue:
    extended_goal = goal_region.extended_up(height_buffer)
    extended_corner = top_corner_region.extended_up(height_buffer)
    outside_foot = kick_style is KickStyle.OUTSIDE

    if not extended_goal.contains(landing_point):
        return ScoreValue.ZERO
    if extended_corner.contains(landing_point):
        return ScoreValue.FIFTEEN if outside_foot else ScoreValue.THREE
    return ScoreValue.FIVE if outside_foot else ScoreValue.ONE


def release_speed_mph(
    speed_px_s: float,
    metres_per_px: float,
    mps_to_mph: float = config.MPS_TO_MPH,
) -> float:
    """Screen-space speed (px/s) → physical speed in mph, 2 decimals."""
    return round(speed_px_s * metres_per_px * mps_to_mph, 2)
