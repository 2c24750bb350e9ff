"""
Video pipeline – runs perception on every frame and feeds the controller.

  frame → PoseEstimator   → PoseObservation ┐
        → BallDetector    → TrajectoryBuilder → TrajectoryPaths ┴→ GameController

The goal geometry comes from a saved SceneCalibration. When a session
reaches ShowSummary its stats are kept and, after NEW_GAME_DELAY_S of
video time, a new game is started with the same scene.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from tqdm import tqdm

from .classifier import KickStyleClassifier, load_classifier
from .game import GameContext, GameController, GameState
from .perception import BallDetector, PoseEstimator, TrajectoryBuilder
from .scene import SceneCalibration
from .settings import GameSettings
from .video import VideoLoader, open_writer
from .visualizer import Visualizer
import config

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    frames_processed: int = 0
    sessions: List[dict] = field(default_factory=list)   # completed sessions
    current: Optional[dict] = None                       # unfinished session

    def to_dict(self) -> dict:
        return {
            "frames_processed": self.frames_processed,
            "sessions": self.sessions,
            "current": self.current,
        }


class Pipeline:

    def __init__(
        self,
        scene: SceneCalibration,
        settings: Optional[GameSettings] = None,
        classifier_path: Optional[str] = None,
        output_dir: str = str(config.RESULTS_DIR),
        frame_skip: int = config.DEFAULT_SKIP,
        save_video: bool = False,
        show_progress: bool = True,
        new_game_delay_s: float = config.NEW_GAME_DELAY_S,
    ):
        self.scene = scene
        self.output_dir = Path(output_dir)
        self.frame_skip = frame_skip
        self.save_video = save_video
        self.show_progress = show_progress
        self.new_game_delay_s = new_game_delay_s

        context = GameContext(settings)
        classifier = KickStyleClassifier(
            model=load_classifier(classifier_path),
            window_size=context.settings.window_size,
        )
        self.controller = GameController(context, classifier=classifier)

        self._pose       = PoseEstimator()
        self._ball       = BallDetector()
        self._trajectory = TrajectoryBuilder()
        self._visualizer = Visualizer() if save_video else None

    # ── Public entry point ────────────────────────────────────────────────────

    def process(
        self,
        video_path: str,
        max_frames: Optional[int] = None,
        output_name: Optional[str] = None,
    ) -> PipelineResult:
        base = output_name or Path(video_path).stem
        ctl  = self.controller
        ctl.start_setup()
        ctl.configure_scene(self.scene)

        result = PipelineResult()
        summary_at_ms: Optional[float] = None

        with VideoLoader(video_path) as loader:
            meta = loader.metadata
            logger.info("Video %s: %dx%d @ %.1f fps, %d frames",
                        meta.path, meta.width, meta.height, meta.fps, meta.total_frames)

            writer = None
            if self.save_video:
                writer = open_writer(meta, self.output_dir / f"{base}_annotated.mp4")

            frames_iter = loader.frames(skip=self.frame_skip, max_frames=max_frames)
            if self.show_progress:
                total = max_frames or meta.total_frames // (self.frame_skip + 1)
                frames_iter = tqdm(frames_iter, total=total, desc="Processing", unit="frames")

            try:
                for fn, ts, frame in frames_iter:
                    pose  = self._pose.estimate(frame, frame_number=fn)
                    ball  = self._ball.detect(frame, frame_number=fn, timestamp_ms=ts)
                    paths = self._trajectory.update(ball)
                    ctl.process_frame(pose=pose, paths=paths)
                    result.frames_processed += 1

                    if ctl.state is GameState.SHOW_SUMMARY:
                        if summary_at_ms is None:
                            summary_at_ms = ts
                            result.sessions.append(ctl.stats.to_dict())
                        elif ts - summary_at_ms >= self.new_game_delay_s * 1000.0:
                            summary_at_ms = None
                            self._trajectory.reset()
                            ctl.start_new_game()

                    if writer is not None:
                        writer.write(self._visualizer.draw(frame, ctl))
            finally:
                if writer is not None:
                    writer.release()

        if ctl.state is not GameState.SHOW_SUMMARY and ctl.stats.kick_count > 0:
            result.current = ctl.stats.to_dict()
        return result
