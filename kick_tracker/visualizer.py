"""
Frame annotation: scene regions, subject box, ball path and a HUD.
"""
from __future__ import annotations
from typing import Optional, Sequence, Tuple
import cv2
import numpy as np

from .game.controller import GameController
from .models.geometry import Point, Region
import config

Color = Tuple[int, int, int]

# BGR
GOAL_COLOR    = (255, 255, 255)
CORNER_COLOR  = (0, 215, 255)
KICK_COLOR    = (0, 200, 0)
TARGET_COLOR  = (200, 120, 0)
SUBJECT_COLOR = (255, 0, 255)
PATH_COLOR    = (0, 0, 255)
TEXT_COLOR    = (255, 255, 255)


class Visualizer:

    def __init__(
        self,
        box_thickness: int = config.BOX_THICKNESS,
        font_scale: float = config.FONT_SCALE,
        font_thickness: int = config.FONT_THICKNESS,
    ):
        self.box_thickness = box_thickness
        self.font_scale = font_scale
        self.font_thickness = font_thickness
        self.font = cv2.FONT_HERSHEY_SIMPLEX

    def draw(self, frame: np.ndarray, controller: GameController) -> np.ndarray:
        """Return an annotated copy of ``frame`` for the controller's current state."""
        out   = frame.copy()
        scene = controller.context.scene
        if scene is not None:
            self.draw_region(out, scene.goal_region, GOAL_COLOR, "goal")
            self.draw_region(out, scene.top_corner_region, CORNER_COLOR, "corner")
        if controller.regions.is_ready:
            self.draw_region(out, controller.regions.kick_region, KICK_COLOR, "kick")
            self.draw_region(out, controller.regions.target_region, TARGET_COLOR, "target")
        if controller.subject_box is not None:
            self.draw_region(out, controller.subject_box, SUBJECT_COLOR)
        if controller.shots.in_flight:
            self.draw_path(out, [p.location for p in controller.shots.trajectory.points])
        self.draw_hud(out, controller)
        return out

    def draw_region(
        self,
        frame: np.ndarray,
        region: Region,
        color: Color,
        label: Optional[str] = None,
    ) -> None:
        x1, y1, x2, y2 = region.to_int_tuple()
        cv2.rectangle(frame, (x1, y1), (x2, y2), color, self.box_thickness)
        if label:
            cv2.putText(frame, label, (x1 + 4, max(y1 + 16, 16)), self.font,
                        self.font_scale, color, self.font_thickness, cv2.LINE_AA)

    def draw_path(self, frame: np.ndarray, points: Sequence[Point]) -> None:
        if len(points) < 2:
            return
        pts = np.array(points, dtype=np.int32).reshape(-1, 1, 2)
        cv2.polylines(frame, [pts], False, PATH_COLOR, self.box_thickness, cv2.LINE_AA)
        cv2.circle(frame, tuple(int(v) for v in points[-1]), 5, PATH_COLOR, -1)

    def draw_hud(self, frame: np.ndarray, controller: GameController) -> None:
        stats   = controller.stats
        metrics = controller.metrics
        lines = [
            f"State: {controller.state.value}",
            f"Kicks: {stats.kick_count}/{stats.max_kicks}   Score: {stats.total_score}",
            f"Last: {int(metrics.score)} pts  {metrics.release_speed:.1f} mph  "
            f"{metrics.release_angle:.1f} deg  {metrics.kick_style.value}",
        ]
        y = 24
        for line in lines:
            cv2.putText(frame, line, (12, y), self.font, self.font_scale,
                        TEXT_COLOR, self.font_thickness, cv2.LINE_AA)
            y += 22
