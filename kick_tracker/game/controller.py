"""
Game flow controller.

Turns per-frame perception results into game events:

  - setup: scene geometry → DetectedGoal → DetectingPlayer
  - player detection: first confident pose → DetectedPlayer → TrackKicks
  - tracking: poses are buffered, trajectory paths drive the ShotTracker
  - shot end: classify, score and measure, then KickCompleted folds the
    metrics into the session and moves on to TrackKicks or ShowSummary

The controller is the state machine's observer; every side effect of a
transition happens in ``_on_state``. All frame handling is serialised on
one lock so stats and metrics have a single writer.
"""
from __future__ import annotations
import logging
import threading
from typing import Optional, Sequence

from ..classifier.adapter import KickStyleClassifier, release_angle
from ..errors import SceneNotConfiguredError
from ..models.geometry import Region
from ..models.pose import PoseObservation
from ..models.trajectory import TrajectoryPath
from ..scene import SceneCalibration
from ..scoring import compute_score, release_speed_mph
from ..tracking.regions import RegionTracker
from ..tracking.shot import CompletedShot, ShotTracker
from .context import GameContext
from .state_machine import GameState

logger = logging.getLogger(__name__)


class GameController:

    def __init__(
        self,
        context: Optional[GameContext] = None,
        classifier: Optional[KickStyleClassifier] = None,
        regions: Optional[RegionTracker] = None,
    ):
        self.context = context or GameContext()
        settings = self.context.settings
        self.classifier = classifier or KickStyleClassifier(window_size=settings.window_size)
        self.regions = regions or RegionTracker()
        self.shots = ShotTracker(
            self.regions,
            min_confidence=settings.trajectory_min_confidence,
            no_observation_limit=settings.no_observation_limit,
        )

        self.subject_box: Optional[Region] = None
        self.in_flight_poses = 0
        self._metrics_pending = False
        self._lock = threading.RLock()

        self.context.state_machine.subscribe(self._on_state, key=self)

    # ── Convenience accessors ─────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self.context.state

    @property
    def stats(self):
        return self.context.stats

    @property
    def metrics(self):
        return self.context.last_metrics

    def _enter(self, state: GameState) -> bool:
        return self.context.state_machine.enter(state)

    # ── Setup ─────────────────────────────────────────────────────────────────

    def start_setup(self) -> bool:
        """Inactive → SetupCamera → DetectingGoal."""
        with self._lock:
            return self._enter(GameState.SETUP_CAMERA) and self._enter(GameState.DETECTING_GOAL)

    def configure_scene(self, scene: SceneCalibration, start_detecting: bool = True) -> bool:
        """Store the goal geometry found during setup and move on to player detection."""
        if not scene.is_valid():
            raise SceneNotConfiguredError("valid goal, top corner and crossbar geometry")
        with self._lock:
            if not self._enter(GameState.DETECTED_GOAL):
                return False
            self.context.scene = scene
            logger.info("Scene configured: goal=%s  %.4f m/px",
                        scene.goal_region, scene.metres_per_px)
            if start_detecting:
                return self._enter(GameState.DETECTING_PLAYER)
            return True

    def start_player_detection(self) -> bool:
        with self._lock:
            return self._enter(GameState.DETECTING_PLAYER)

    def request_summary(self) -> bool:
        """End the session early (only valid while kicks are being tracked)."""
        with self._lock:
            return self._enter(GameState.SHOW_SUMMARY)

    def start_new_game(self) -> bool:
        """ShowSummary → DetectingPlayer; stats reset once the player is found again."""
        with self._lock:
            self.subject_box = None
            return self._enter(GameState.DETECTING_PLAYER)

    def reset(self) -> None:
        """Hard reset to Inactive from any state."""
        with self._lock:
            self.context.reset()
            self.shots.reset()
            self.subject_box = None
            self.in_flight_poses = 0
            self._metrics_pending = False
            self.context.state_machine.subscribe(self._on_state, key=self)

    # ── Per-frame input ───────────────────────────────────────────────────────

    def process_frame(
        self,
        pose: Optional[PoseObservation] = None,
        paths: Sequence[TrajectoryPath] = (),
    ) -> None:
        with self._lock:
            if pose is not None:
                self.handle_pose(pose)
            if self.state is GameState.TRACK_KICKS:
                self.handle_trajectories(paths)

    def handle_pose(self, pose: PoseObservation) -> None:
        settings = self.context.settings
        with self._lock:
            if pose.confidence <= settings.pose_min_confidence:
                return
            # Stop sampling a few frames after the ball left the foot
            if self.shots.in_flight and self.in_flight_poses >= settings.max_in_flight_poses:
                return

            box = pose.subject_box(settings.keypoint_min_confidence)
            if box is not None:
                self.subject_box = box

            state = self.state
            if state is GameState.DETECTING_PLAYER and self.subject_box is not None:
                self._enter(GameState.DETECTED_PLAYER)
            elif state is GameState.TRACK_KICKS:
                self.stats.store_observation(pose)
                if self.shots.in_flight:
                    self.in_flight_poses += 1

    def handle_trajectories(self, paths: Sequence[TrajectoryPath]) -> Optional[CompletedShot]:
        with self._lock:
            if self.state is not GameState.TRACK_KICKS or not self.regions.is_ready:
                return None
            shot = self.shots.update(paths)
            if shot is not None:
                self.complete_shot(shot)
            return shot

    # ── Shot completion ───────────────────────────────────────────────────────

    def complete_shot(self, shot: CompletedShot) -> None:
        scene = self.context.scene
        if scene is None:
            raise SceneNotConfiguredError("scene calibration")
        if self._metrics_pending:
            logger.warning("Previous kick not folded yet; ignoring shot")
            return

        stats, metrics = self.stats, self.metrics
        self._metrics_pending = True
        stats.store_path(shot.path)

        result = self.classifier.classify(stats.pose_buffer)
        if not result.ok:
            logger.info("Kick style undetermined (%s)", result.reason)
        metrics.update_kick_style(result.style)
        metrics.update_landing_point(shot.landing_point)

        score = compute_score(shot.landing_point, metrics.kick_style,
                              scene.goal_region, scene.top_corner_region)
        speed = release_speed_mph(shot.speed_px_s, scene.metres_per_px)
        settings = self.context.settings
        angle = release_angle(stats.pose_buffer, previous=stats.release_angle,
                              min_confidence=settings.keypoint_min_confidence,
                              max_in_flight=settings.max_in_flight_poses)
        stats.release_angle = angle.angle
        metrics.update_metrics(score, speed, angle.angle)

        logger.info("Kick: score=%d speed=%.2f mph angle=%.2f style=%s%s",
                    int(score), speed, angle.angle, result.style.value,
                    " (forced)" if shot.forced else "")
        self._enter(GameState.KICK_COMPLETED)

    # ── State observer ────────────────────────────────────────────────────────

    def _on_state(self, state: GameState, previous: Optional[GameState]) -> None:
        if state is GameState.DETECTED_PLAYER:
            self.stats.reset()
            self._reset_regions()
            self._enter(GameState.TRACK_KICKS)

        elif state is GameState.TRACK_KICKS:
            self._reset_regions()
            self.shots.reset()

        elif state is GameState.KICK_COMPLETED:
            self._fold_metrics()
            if self.stats.kick_count == self.stats.max_kicks:
                self._enter(GameState.SHOW_SUMMARY)
            else:
                self._enter(GameState.TRACK_KICKS)

        elif state is GameState.SHOW_SUMMARY:
            logger.info("Session summary: %s", self.stats.to_dict())

    def _reset_regions(self) -> None:
        scene = self.context.scene
        if scene is None:
            raise SceneNotConfiguredError("scene calibration")
        if self.subject_box is None:
            raise SceneNotConfiguredError("subject bounding box")
        self.regions.reset_regions(scene.goal_region, self.subject_box)

    def _fold_metrics(self) -> None:
        m = self.metrics
        self.stats.adjust_metrics(m.score, m.release_speed, m.release_angle, m.kick_style)
        self.stats.reset_observations()
        self.in_flight_poses = 0
        self._metrics_pending = False
