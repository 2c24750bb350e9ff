"""
Pytest fixtures for kick tracker tests.
"""
import numpy as np
import pytest
import tempfile
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from kick_tracker.models import (
    Region, Keypoint, PoseObservation, JOINT_NAMES, TrajectoryPath, TrajectoryPoint,
)
from kick_tracker.scene import SceneCalibration


class FakeKickModel:
    """Stands in for the TorchScript model; records the windows it is given."""

    def __init__(self, label="outside", confidence=0.9, error=None):
        self.label = label
        self.confidence = confidence
        self.error = error
        self.windows = []

    def predict(self, window):
        self.windows.append(window)
        if self.error is not None:
            raise self.error
        return self.label, self.confidence


def make_pose(x1=120, y1=220, x2=230, y2=580, confidence=0.9,
              joint_confidence=0.9, frame_number=0, overrides=None):
    """
    Pose whose joints are spread evenly between (x1, y1) and (x2, y2).

    The first joint sits at the top-left corner and the last at the
    bottom-right, so the raw joint bounds are exactly the given box.
    ``overrides`` maps joint name → (x, y, conf).
    """
    n = len(JOINT_NAMES)
    keypoints = {}
    for i, name in enumerate(JOINT_NAMES):
        t = i / (n - 1)
        keypoints[name] = Keypoint(x1 + t * (x2 - x1), y1 + t * (y2 - y1), joint_confidence)
    for name, (x, y, c) in (overrides or {}).items():
        keypoints[name] = Keypoint(x, y, c)
    return PoseObservation(keypoints=keypoints, confidence=confidence,
                           frame_number=frame_number)


def make_path(points, confidence=0.95, duration_s=0.2, complete=False):
    step = duration_s * 1000.0 / max(len(points) - 1, 1)
    return TrajectoryPath(
        points=[TrajectoryPoint(x, y, i * step) for i, (x, y) in enumerate(points)],
        confidence=confidence,
        duration_s=duration_s,
        is_complete=complete,
    )


@pytest.fixture
def fake_model():
    return FakeKickModel()


@pytest.fixture
def goal_region():
    return Region(600, 0, 200, 300)


@pytest.fixture
def top_corner_region():
    return Region(600, 0, 60, 60)


@pytest.fixture
def subject_box():
    return Region(100, 200, 150, 400)


@pytest.fixture
def scene(goal_region, top_corner_region):
    return SceneCalibration(goal_region, top_corner_region, crossbar_length_px=200.0)


@pytest.fixture
def subject_pose():
    """Pose whose subject box (after the 20 px inset) is (100, 200, 150, 400)."""
    return make_pose()


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
