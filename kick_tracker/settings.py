"""
User-tunable game settings.
"""
from dataclasses import dataclass

from .errors import ConfigError
import config


@dataclass
class GameSettings:
    max_kicks: int = config.MAX_KICKS
    pose_capacity: int = config.MAX_POSE_OBSERVATIONS
    window_size: int = config.CLASSIFIER_WINDOW_SIZE
    pose_min_confidence: float = config.POSE_MIN_CONFIDENCE
    keypoint_min_confidence: float = config.KEYPOINT_MIN_CONFIDENCE
    trajectory_min_confidence: float = config.TRAJECTORY_MIN_CONFIDENCE
    no_observation_limit: int = config.NO_OBSERVATION_FRAME_LIMIT
    max_in_flight_poses: int = config.MAX_IN_FLIGHT_POSE_OBSERVATIONS

    def validate(self) -> None:
        """Raise ConfigError if the settings cannot work together."""
        if self.max_kicks < 1:
            raise ConfigError(f"max_kicks must be >= 1, got {self.max_kicks}")
        if self.window_size < 1:
            raise ConfigError(f"window_size must be >= 1, got {self.window_size}")
        if self.pose_capacity < self.window_size:
            raise ConfigError(
                f"Pose buffer capacity ({self.pose_capacity}) is smaller than the "
                f"classifier window ({self.window_size})",
                {"pose_capacity": self.pose_capacity, "window_size": self.window_size},
            )
        if self.no_observation_limit < 0:
            raise ConfigError(
                f"no_observation_limit must be >= 0, got {self.no_observation_limit}"
            )
