"""
Tests for the kick-style classifier adapter and release angle.
"""
import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from kick_tracker.classifier import (
    KickStyleClassifier, TorchKickClassifier, load_classifier,
    prepare_window, release_angle, release_key_frame, angle_from_horizontal,
)
from kick_tracker.errors import ClassifierUnavailableError
from kick_tracker.models import KickStyle, NUM_JOINTS
from conftest import FakeKickModel, make_pose


class TestPrepareWindow:

    def test_empty_buffer_is_all_padding(self):
        window = prepare_window([], window_size=120)
        assert window.frames.shape == (120, 3, NUM_JOINTS)
        assert window.real_count == 0
        assert not window.frames.any()

    def test_short_buffer_padded_after_real_frames(self):
        poses = [make_pose(frame_number=i) for i in range(5)]
        window = prepare_window(poses, window_size=8)
        assert window.mask.tolist() == [True] * 5 + [False] * 3
        assert window.frames[:5].any(axis=(1, 2)).all()
        assert not window.frames[5:].any()

    def test_long_buffer_takes_earliest_frames(self):
        poses = [make_pose(x1=i, frame_number=i) for i in range(10)]
        window = prepare_window(poses, window_size=4)
        assert window.real_count == 4
        # nose x of each frame is x1
        assert window.frames[:, 0, 0].tolist() == [0, 1, 2, 3]


class TestKickStyleClassifier:

    def test_maps_label(self):
        model = FakeKickModel(label="Outside", confidence=0.8)
        result = KickStyleClassifier(model, window_size=6).classify([make_pose()])
        assert result.ok
        assert result.style is KickStyle.OUTSIDE
        assert result.confidence == pytest.approx(0.8)
        assert model.windows[0].shape == (6, 3, NUM_JOINTS)

    def test_empty_buffer_still_classified(self, fake_model):
        result = KickStyleClassifier(fake_model).classify([])
        assert result.ok
        assert not fake_model.windows[0].any()

    def test_no_model(self):
        result = KickStyleClassifier(None).classify([make_pose()])
        assert not result.ok
        assert result.style is KickStyle.UNDETERMINED

    def test_prediction_error(self):
        model = FakeKickModel(error=RuntimeError("boom"))
        result = KickStyleClassifier(model).classify([make_pose()])
        assert result.style is KickStyle.UNDETERMINED
        assert "boom" in result.reason

    def test_empty_label(self):
        result = KickStyleClassifier(FakeKickModel(label="")).classify([])
        assert result.style is KickStyle.UNDETERMINED
        assert result.reason == "no result"

    def test_unknown_label(self):
        result = KickStyleClassifier(FakeKickModel(label="volley")).classify([])
        assert result.style is KickStyle.UNDETERMINED
        assert result.label == "volley"

    def test_non_string_label(self):
        result = KickStyleClassifier(FakeKickModel(label=1)).classify([])
        assert not result.ok
        assert result.style is KickStyle.UNDETERMINED
        assert result.reason == "no result"

    @pytest.mark.parametrize("confidence", [None, "high"])
    def test_unusable_confidence(self, confidence):
        model = FakeKickModel(label="outside", confidence=confidence)
        result = KickStyleClassifier(model).classify([])
        assert not result.ok
        assert result.style is KickStyle.UNDETERMINED
        assert result.reason == "invalid confidence"


class TestTorchKickClassifier:

    def test_missing_weights_raise(self, temp_output_dir):
        model = TorchKickClassifier(model_path=str(temp_output_dir / "none.pt"))
        with pytest.raises(ClassifierUnavailableError):
            model.predict(np.zeros((4, 3, NUM_JOINTS), dtype=np.float32))

    def test_missing_weights_degrade_in_adapter(self, temp_output_dir):
        model = TorchKickClassifier(model_path=str(temp_output_dir / "none.pt"))
        result = KickStyleClassifier(model).classify([])
        assert result.style is KickStyle.UNDETERMINED

    def test_load_classifier_without_file(self, temp_output_dir):
        assert load_classifier(str(temp_output_dir / "none.pt")) is None


class TestReleaseAngle:

    def test_angle_from_horizontal(self):
        assert angle_from_horizontal((0, 0), (10, 0)) == 0.0
        assert angle_from_horizontal((0, 0), (0, 10)) == 90.0
        assert angle_from_horizontal((0, 0), (10, 10)) == 45.0
        assert angle_from_horizontal((0, 0), (-10, -10)) == 135.0

    def test_key_frame(self):
        assert release_key_frame(120) == 95
        assert release_key_frame(25) == 0
        assert release_key_frame(3) == 0

    def test_measures_hip_to_ankle(self):
        poses = [make_pose(overrides={"r_hip": (100, 100, 0.9),
                                      "r_ankle": (200, 200, 0.9)})] * 30
        result = release_angle(poses)
        assert result.measured
        assert result.angle == 45.0
        assert result.frame_index == 5
        assert not result.insufficient_history

    def test_short_history_uses_first_frame(self):
        first = make_pose(overrides={"r_hip": (0, 0, 0.9), "r_ankle": (0, 50, 0.9)})
        rest = [make_pose(overrides={"r_hip": (0, 0, 0.9), "r_ankle": (50, 0, 0.9)})] * 4
        result = release_angle([first] + rest)
        assert result.frame_index == 0
        assert result.angle == 90.0
        assert result.insufficient_history

    def test_unusable_joint_keeps_previous(self):
        poses = [make_pose(overrides={"r_ankle": (0, 0, 0.05)})]
        result = release_angle(poses, previous=31.5)
        assert not result.measured
        assert result.angle == 31.5

    def test_empty_buffer_keeps_previous(self):
        result = release_angle([], previous=12.0)
        assert result.angle == 12.0
        assert result.frame_index is None

    def test_key_frame_follows_in_flight_limit(self):
        poses = [make_pose(overrides={"r_hip": (0, 0, 0.9), "r_ankle": (0, 50, 0.9)})] * 30
        poses[13] = make_pose(overrides={"r_hip": (0, 0, 0.9), "r_ankle": (50, 50, 0.9)})
        result = release_angle(poses, max_in_flight=2)
        assert result.frame_index == 13
        assert result.angle == 45.0
        assert release_angle(poses).frame_index == 5

    def test_short_history_threshold_follows_limits(self):
        poses = [make_pose()] * 18
        assert release_angle(poses, max_in_flight=2).insufficient_history is False
        assert release_angle(poses).insufficient_history is True
