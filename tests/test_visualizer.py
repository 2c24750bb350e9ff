"""
Tests for frame annotation and video I/O.
"""
import cv2
import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from kick_tracker.classifier import KickStyleClassifier
from kick_tracker.game import GameController
from kick_tracker.models import Region
from kick_tracker.video import VideoLoader
from kick_tracker.visualizer import Visualizer
from conftest import FakeKickModel, make_path


@pytest.fixture
def blank_frame():
    return np.zeros((720, 1280, 3), dtype=np.uint8)


@pytest.fixture
def controller(scene, subject_pose):
    ctl = GameController(classifier=KickStyleClassifier(FakeKickModel()))
    ctl.start_setup()
    ctl.configure_scene(scene)
    ctl.process_frame(pose=subject_pose)
    return ctl


@pytest.fixture
def temp_video_file(temp_output_dir):
    path = temp_output_dir / "clip.avi"
    writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*"MJPG"), 30.0, (320, 240))
    for i in range(12):
        frame = np.zeros((240, 320, 3), dtype=np.uint8)
        cv2.circle(frame, (20 + i * 20, 120), 8, (255, 255, 255), -1)
        writer.write(frame)
    writer.release()
    return path


class TestVisualizer:

    def test_draw_returns_annotated_copy(self, blank_frame, controller):
        original = blank_frame.copy()
        out = Visualizer().draw(blank_frame, controller)
        assert out.shape == blank_frame.shape
        assert np.array_equal(original, blank_frame)
        assert out.any()

    def test_draw_region(self, blank_frame):
        Visualizer(box_thickness=1).draw_region(blank_frame, Region(10, 10, 50, 50), (0, 255, 0))
        assert blank_frame[10, 30].tolist() == [0, 255, 0]
        assert not blank_frame[30, 30].any()

    def test_draw_path_in_flight(self, blank_frame, controller):
        controller.process_frame(paths=[make_path([(400, 300), (500, 200), (600, 100)])])
        assert controller.shots.in_flight
        out = Visualizer().draw(blank_frame, controller)
        assert out[100, 600].tolist() == [0, 0, 255]

    def test_path_needs_two_points(self, blank_frame):
        Visualizer().draw_path(blank_frame, [(10, 10)])
        assert not blank_frame.any()


class TestVideoLoader:

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            VideoLoader(str(temp_output_dir / "none.mp4"))

    def test_metadata_requires_open(self, temp_video_file):
        with pytest.raises(RuntimeError):
            VideoLoader(str(temp_video_file)).metadata

    def test_frames(self, temp_video_file):
        with VideoLoader(str(temp_video_file)) as loader:
            assert loader.metadata.width == 320
            frames = list(loader.frames())
        assert len(frames) == 12
        fn, ts, frame = frames[3]
        assert fn == 3
        assert ts == pytest.approx(100.0, rel=0.01)
        assert frame.shape == (240, 320, 3)

    def test_skip_and_max(self, temp_video_file):
        with VideoLoader(str(temp_video_file)) as loader:
            numbers = [fn for fn, _, _ in loader.frames(skip=1, max_frames=4)]
        assert numbers == [0, 2, 4, 6]
