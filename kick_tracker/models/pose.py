"""
Body pose data models.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional
import numpy as np

from .geometry import Point, Region
import config

# COCO pose keypoint order, as produced by YOLOv8-pose
JOINT_NAMES = (
    "nose",
    "l_eye", "r_eye",
    "l_ear", "r_ear",
    "l_shoulder", "r_shoulder",
    "l_elbow", "r_elbow",
    "l_wrist", "r_wrist",
    "l_hip", "r_hip",
    "l_knee", "r_knee",
    "l_ankle", "r_ankle",
)
NUM_JOINTS = len(JOINT_NAMES)


@dataclass
class Keypoint:
    x: float
    y: float
    confidence: float

    @property
    def location(self) -> Point:
        return (self.x, self.y)


@dataclass
class PoseObservation:
    """One frame's keypoints for the tracked subject."""
    keypoints: Dict[str, Keypoint] = field(default_factory=dict)
    confidence: float = 0.0
    frame_number: int = 0

    def joint(
        self,
        name: str,
        min_confidence: float = config.KEYPOINT_MIN_CONFIDENCE,
    ) -> Optional[Point]:
        """Location of a joint if it was detected reliably, else None."""
        kp = self.keypoints.get(name)
        if kp is None or kp.confidence <= min_confidence:
            return None
        return kp.location

    def usable_joints(
        self,
        min_confidence: float = config.KEYPOINT_MIN_CONFIDENCE,
    ) -> Dict[str, Point]:
        return {
            name: kp.location
            for name, kp in self.keypoints.items()
            if kp.confidence > min_confidence
        }

    def subject_box(
        self,
        min_confidence: float = config.KEYPOINT_MIN_CONFIDENCE,
        inset: float = config.SUBJECT_BOX_INSET,
    ) -> Optional[Region]:
        """Bounding box of the reliable joints, grown by ``inset`` pixels."""
        box = Region.bounding(self.usable_joints(min_confidence).values())
        if box is None:
            return None
        return box.expanded(inset)

    def to_array(self) -> np.ndarray:
        """(3, NUM_JOINTS) float32 array of x, y, confidence; missing joints are 0."""
        arr = np.zeros((3, NUM_JOINTS), dtype=np.float32)
        for i, name in enumerate(JOINT_NAMES):
            kp = self.keypoints.get(name)
            if kp is None:
                continue
            arr[0, i] = kp.x
            arr[1, i] = kp.y
            arr[2, i] = kp.confidence
        return arr

    @classmethod
    def from_array(
        cls,
        kpts: np.ndarray,
        confidence: float,
        frame_number: int = 0,
    ) -> "PoseObservation":
        """Build from a (NUM_JOINTS, 3) array of x, y, conf rows."""
        keypoints = {
            name: Keypoint(float(row[0]), float(row[1]), float(row[2]))
            for name, row in zip(JOINT_NAMES, kpts)
        }
        return cls(keypoints=keypoints, confidence=float(confidence),
                   frame_number=frame_number)
