"""
Kick Tracker – kick-at-goal video analysis.

Public API:  all major components are importable directly from `kick_tracker`.

    from kick_tracker import Pipeline
    from kick_tracker import GameController, GameContext, GameStateMachine, GameState
    from kick_tracker import RegionTracker, ShotTracker, compute_score
    from kick_tracker import KickStyleClassifier, release_angle
    from kick_tracker.models import Region, PoseObservation, KickMetrics, SessionStats
"""

# ── Pipeline (top-level entry point) ─────────────────────────────────────────
from .pipeline import Pipeline, PipelineResult

# ── Game flow ─────────────────────────────────────────────────────────────────
from .game      import GameState, GameStateMachine, GameContext, GameController
from .scene     import SceneCalibration
from .settings  import GameSettings

# ── Tracking & scoring ────────────────────────────────────────────────────────
from .tracking  import RegionTracker, ShotTracker, CompletedShot
from .scoring   import compute_score, release_speed_mph

# ── Kick style ────────────────────────────────────────────────────────────────
from .classifier import (
    KickStyleClassifier, TorchKickClassifier, load_classifier, release_angle,
)

# ── Perception & video ────────────────────────────────────────────────────────
from .perception import PoseEstimator, BallDetector, TrajectoryBuilder
from .visualizer import Visualizer
from .video      import VideoLoader

# ── Errors ────────────────────────────────────────────────────────────────────
from .errors import (
    KickTrackerError, ConfigError, InvalidTransitionError,
    SceneNotConfiguredError, ClassifierUnavailableError, SessionCompleteError,
)

# ── Models (data classes) ─────────────────────────────────────────────────────
from .models import (
    Region, PoseObservation, Keypoint,
    TrajectoryPath, TrajectoryPoint,
    KickStyle, ScoreValue, KickMetrics, SessionStats,
)

__all__ = [
    # Pipeline
    "Pipeline", "PipelineResult",
    # Game
    "GameState", "GameStateMachine", "GameContext", "GameController",
    "SceneCalibration", "GameSettings",
    # Tracking
    "RegionTracker", "ShotTracker", "CompletedShot",
    "compute_score", "release_speed_mph",
    # Kick style
    "KickStyleClassifier", "TorchKickClassifier", "load_classifier", "release_angle",
    # Perception & video
    "PoseEstimator", "BallDetector", "TrajectoryBuilder", "Visualizer", "VideoLoader",
    # Errors
    "KickTrackerError", "ConfigError", "InvalidTransitionError",
    "SceneNotConfiguredError", "ClassifierUnavailableError", "SessionCompleteError",
    # Models
    "Region", "PoseObservation", "Keypoint", "TrajectoryPath", "TrajectoryPoint",
    "KickStyle", "ScoreValue", "KickMetrics", "SessionStats",
]
