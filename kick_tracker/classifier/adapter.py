"""
Kick-style classification from buffered body poses.

The external model takes a fixed-size window of pose frames. Short
buffers are padded with all-zero frames; the window keeps a mask so
padding is never mistaken for a real low-confidence observation.

Classification never raises: an unavailable model, a failed prediction
or an unknown label all degrade to KickStyle.UNDETERMINED, reported
through ClassificationResult.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
import math
from typing import Optional, Protocol, Sequence, Tuple

import numpy as np

from ..models.kick import KickStyle
from ..models.pose import PoseObservation, NUM_JOINTS
import config

logger = logging.getLogger(__name__)


class KickClassifierModel(Protocol):
    def predict(self, window: np.ndarray) -> Tuple[str, float]:
        """Return (label, confidence) for a (window, 3, joints) array."""
        ...


@dataclass
class PoseWindow:
    frames: np.ndarray        # (window_size, 3, NUM_JOINTS) float32
    mask: np.ndarray          # (window_size,) bool, True = real frame

    @property
    def real_count(self) -> int:
        return int(self.mask.sum())

    @property
    def size(self) -> int:
        return len(self.frames)


@dataclass
class ClassificationResult:
    style: KickStyle
    ok: bool
    label: Optional[str] = None
    confidence: float = 0.0
    reason: Optional[str] = None

    @classmethod
    def failed(cls, reason: str, label: Optional[str] = None) -> "ClassificationResult":
        return cls(style=KickStyle.UNDETERMINED, ok=False, label=label, reason=reason)


@dataclass
class ReleaseAngleResult:
    angle: float
    frame_index: Optional[int]
    measured: bool                 # False = joints unusable, previous angle kept
    insufficient_history: bool     # key frame index was clamped to 0


def prepare_window(
    poses: Sequence[PoseObservation],
    window_size: int = config.CLASSIFIER_WINDOW_SIZE,
) -> PoseWindow:
    """Earliest ``min(len(poses), window_size)`` frames, zero-padded to ``window_size``."""
    frames = np.zeros((window_size, 3, NUM_JOINTS), dtype=np.float32)
    mask = np.zeros(window_size, dtype=bool)
    for i, pose in enumerate(list(poses)[:window_size]):
        frames[i] = pose.to_array()
        mask[i] = True
    return PoseWindow(frames=frames, mask=mask)


class KickStyleClassifier:
    """Adapter between the pose buffer and an external kick-style model."""

    def __init__(
        self,
        model: Optional[KickClassifierModel] = None,
        window_size: int = config.CLASSIFIER_WINDOW_SIZE,
    ):
        self.model = model
        self.window_size = window_size

    def classify(self, poses: Sequence[PoseObservation]) -> ClassificationResult:
        if self.model is None:
            return ClassificationResult.failed("model unavailable")

        window = prepare_window(poses, self.window_size)
        try:
            label, confidence = self.model.predict(window.frames)
        except Exception as exc:
            logger.warning("Kick classifier failed: %s", exc)
            return ClassificationResult.failed(f"prediction failed: {exc}")

        if not isinstance(label, str) or not label:
            return ClassificationResult.failed("no result")
        try:
            style = KickStyle.from_label(label)
        except ValueError:
            logger.debug("Unrecognised kick label %r", label)
            return ClassificationResult.failed("unrecognised label", label=label)
        try:
            confidence = float(confidence)
        except (TypeError, ValueError):
            logger.debug("Unusable confidence %r for label %r", confidence, label)
            return ClassificationResult.failed("invalid confidence", label=label)

        return ClassificationResult(style=style, ok=True, label=label,
                                    confidence=confidence)


# ── Release angle ─────────────────────────────────────────────────────────────

def angle_from_horizontal(start, end) -> float:
    """Unsigned angle of start → end against the horizontal, degrees, 2 dp."""
    angle = math.atan2(end[1] - start[1], end[0] - start[0])
    return round(abs(math.degrees(angle)), 2)


def release_key_frame(
    observation_count: int,
    trajectory_length: int = config.TRAJECTORY_LENGTH,
    max_in_flight: int = config.MAX_IN_FLIGHT_POSE_OBSERVATIONS,
) -> int:
    """Index of the pose sampled just before the ball's flight began."""
    return max(0, observation_count - (trajectory_length + max_in_flight))


def release_angle(
    poses: Sequence[PoseObservation],
    previous: float = 0.0,
    min_confidence: float = config.KEYPOINT_MIN_CONFIDENCE,
    trajectory_length: int = config.TRAJECTORY_LENGTH,
    max_in_flight: int = config.MAX_IN_FLIGHT_POSE_OBSERVATIONS,
) -> ReleaseAngleResult:
    """
    Angle the kicking leg (right hip → right ankle) makes with the horizontal.

    The key frame is taken ``trajectory_length + max_in_flight`` poses
    before the end of the buffer. Keeps ``previous`` if the buffer is empty
    or either joint is unreliable.
    """
    if not poses:
        return ReleaseAngleResult(previous, None, measured=False, insufficient_history=True)

    count = len(poses)
    index = release_key_frame(count, trajectory_length, max_in_flight)
    insufficient = count < trajectory_length + max_in_flight
    if insufficient:
        logger.debug("Release angle from frame 0 of %d (short pose history)", count)

    pose = poses[index]
    hip = pose.joint("r_hip", min_confidence)
    ankle = pose.joint("r_ankle", min_confidence)
    if hip is None or ankle is None:
        return ReleaseAngleResult(previous, index, measured=False,
                                  insufficient_history=insufficient)
    return ReleaseAngleResult(angle_from_horizontal(hip, ankle), index,
                              measured=True, insufficient_history=insufficient)
