"""
Tests for data models.
"""
import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from kick_tracker.models import (
    Region, Keypoint, PoseObservation, NUM_JOINTS,
    TrajectoryPath, TrajectoryPoint, KickStyle, ScoreValue, KickMetrics,
)
from conftest import make_pose


class TestRegion:

    def test_edges(self):
        r = Region(10, 20, 100, 50)
        assert r.max_x == 110
        assert r.max_y == 70
        assert r.mid_x == 60

    def test_contains_is_half_open(self):
        r = Region(0, 0, 10, 10)
        assert r.contains((0, 0))
        assert r.contains((9.99, 9.99))
        assert not r.contains((10, 5))
        assert not r.contains((5, 10))
        assert not r.contains((-0.01, 5))

    def test_extended_up(self):
        r = Region(600, 0, 200, 300).extended_up(100)
        assert r == Region(600, -100, 200, 400)
        assert r.max_y == 300

    def test_expanded(self):
        assert Region(10, 10, 20, 20).expanded(5) == Region(5, 5, 30, 30)

    def test_with_x_keeps_size(self):
        assert Region(0, 5, 40, 30).with_x(100) == Region(100, 5, 40, 30)

    def test_bounding(self):
        r = Region.bounding([(5, 10), (15, 2), (8, 30)])
        assert r == Region(5, 2, 10, 28)
        assert Region.bounding([]) is None

    def test_empty(self):
        assert Region(0, 0, 0, 10).is_empty
        assert not Region(0, 0, 1, 1).is_empty

    def test_dict_round_trip(self):
        r = Region(1.5, 2, 3, 4)
        assert Region.from_dict(r.to_dict()) == r

    def test_to_int_tuple(self):
        assert Region(10.5, 20.7, 100, 200).to_int_tuple() == (10, 20, 110, 220)


class TestPoseObservation:

    def test_joint_confidence_threshold(self):
        pose = make_pose(overrides={"r_hip": (1, 2, 0.1), "r_ankle": (3, 4, 0.11)})
        assert pose.joint("r_hip", 0.1) is None
        assert pose.joint("r_ankle", 0.1) == (3, 4)
        assert pose.joint("missing") is None

    def test_subject_box_grows_by_inset(self, subject_pose, subject_box):
        assert subject_pose.subject_box() == subject_box

    def test_subject_box_ignores_weak_joints(self):
        pose = make_pose(overrides={"nose": (0, 0, 0.05)})
        box = pose.subject_box(inset=0)
        assert box.x > 0 and box.y > 0

    def test_subject_box_none_without_joints(self):
        pose = make_pose(joint_confidence=0.0)
        assert pose.subject_box() is None

    def test_array_round_trip_shape(self):
        pose = make_pose()
        arr = pose.to_array()
        assert arr.shape == (3, NUM_JOINTS)
        assert arr.dtype == np.float32
        back = PoseObservation.from_array(arr.T, confidence=0.7, frame_number=3)
        assert back.joint("r_ankle") == pytest.approx(pose.joint("r_ankle"))
        assert back.frame_number == 3

    def test_missing_joints_are_zero(self):
        pose = PoseObservation(keypoints={"nose": Keypoint(5, 6, 0.8)}, confidence=0.9)
        arr = pose.to_array()
        assert arr[:, 0].tolist() == pytest.approx([5, 6, 0.8])
        assert not arr[:, 1:].any()


class TestTrajectoryPath:

    def test_empty(self):
        path = TrajectoryPath()
        assert path.is_empty
        assert path.current_point is None
        assert path.length_px == 0.0

    def test_length(self):
        path = TrajectoryPath(points=[
            TrajectoryPoint(0, 0), TrajectoryPoint(3, 4), TrajectoryPoint(3, 14),
        ])
        assert path.length_px == pytest.approx(15.0)
        assert path.current_point == (3, 14)


class TestKickModels:

    @pytest.mark.parametrize("label,style", [
        ("instep", KickStyle.INSTEP),
        ("Outside", KickStyle.OUTSIDE),
        ("INSIDE", KickStyle.INSIDE),
    ])
    def test_style_from_label(self, label, style):
        assert KickStyle.from_label(label) is style

    def test_unknown_label_raises(self):
        with pytest.raises(ValueError):
            KickStyle.from_label("toe poke")

    def test_padded_label_is_not_trimmed(self):
        with pytest.raises(ValueError):
            KickStyle.from_label(" outside ")

    def test_score_values(self):
        assert [int(s) for s in ScoreValue] == [0, 1, 3, 5, 15]

    def test_metrics_updates(self):
        m = KickMetrics()
        assert m.kick_style is KickStyle.UNDETERMINED
        m.update_kick_style(KickStyle.OUTSIDE)
        m.update_landing_point((650, 50))
        m.update_metrics(ScoreValue.FIFTEEN, 41.5, 33.2)
        d = m.to_dict()
        assert d["score"] == 15
        assert d["kick_style"] == "outside"
        assert d["landing_px"] == [650, 50]
        assert d["release_speed_mph"] == 41.5
