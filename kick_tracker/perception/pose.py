"""
Body pose estimation via YOLOv8-pose.

Produces one PoseObservation per frame for the most confident person.
The model is loaded on first use.
"""
from __future__ import annotations
from typing import Optional
import numpy as np

from ..models.pose import NUM_JOINTS, PoseObservation
import config

_pose_model = None


def _get_pose_model(model_name: str):
    global _pose_model
    if _pose_model is None:
        from ultralytics import YOLO
        _pose_model = YOLO(model_name)
    return _pose_model


class PoseEstimator:

    def __init__(
        self,
        model_name: str = config.POSE_MODEL,
        conf: float = config.DETECTION_CONF,
    ):
        self.model_name = model_name
        self.conf = conf

    def estimate(self, frame: np.ndarray, frame_number: int = 0) -> Optional[PoseObservation]:
        """Return the best person's skeleton, or None if nobody was found."""
        model   = _get_pose_model(self.model_name)
        results = model.predict(frame, verbose=False, conf=self.conf, device=config.DEVICE)
        if not results or results[0].keypoints is None or results[0].boxes is None:
            return None

        res   = results[0]
        kpts  = res.keypoints.data.cpu().numpy()     # (N, 17, 3): x, y, conf
        confs = res.boxes.conf.cpu().numpy()
        if len(kpts) == 0 or kpts.shape[1] != NUM_JOINTS:
            return None

        best = int(np.argmax(confs))
        return PoseObservation.from_array(
            kpts[best], confidence=float(confs[best]), frame_number=frame_number,
        )
