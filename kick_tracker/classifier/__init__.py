from .adapter import (
    KickStyleClassifier, KickClassifierModel, ClassificationResult,
    PoseWindow, ReleaseAngleResult,
    prepare_window, release_angle, release_key_frame, angle_from_horizontal,
)
from .model import TorchKickClassifier, load_classifier

__all__ = [
    "KickStyleClassifier", "KickClassifierModel", "ClassificationResult",
    "PoseWindow", "ReleaseAngleResult",
    "prepare_window", "release_angle", "release_key_frame", "angle_from_horizontal",
    "TorchKickClassifier", "load_classifier",
]
