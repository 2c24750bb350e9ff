"""
Tests for kick/target region tracking.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from kick_tracker.models import Region
from kick_tracker.tracking import RegionTracker


@pytest.fixture
def tracker(goal_region, subject_box):
    t = RegionTracker()
    t.reset_regions(goal_region, subject_box)
    return t


class TestResetRegions:

    def test_kick_region_right_of_subject(self, tracker):
        assert tracker.kick_region == Region(300, 0, 400, 350)

    def test_target_region_pads_goal(self, tracker):
        assert tracker.target_region == Region(550, 0, 300, 300)

    def test_not_ready_before_reset(self):
        t = RegionTracker()
        assert not t.is_ready
        with pytest.raises(RuntimeError):
            t.update_regions((0, 0))

    def test_reset_is_idempotent(self, tracker, goal_region, subject_box):
        first = (tracker.kick_region, tracker.target_region)
        tracker.reset_regions(goal_region, subject_box)
        assert (tracker.kick_region, tracker.target_region) == first


class TestUpdateRegions:

    def test_no_change_past_center_of_kick_region(self, tracker):
        before = tracker.kick_region
        assert tracker.update_regions((550, 100)) == before

    def test_chases_ball_left_of_center(self, tracker):
        # 320 is inside the kick region but left of its centre (500)
        region = tracker.update_regions((320, 100))
        assert region == Region(120, 0, 400, 350)

    def test_chases_ball_outside_region(self, tracker):
        region = tracker.update_regions((250, 400))
        assert region.x == 50
        assert region.width == 400

    def test_snaps_to_target(self, tracker):
        tracker.kick_region = Region(100, 0, 400, 350)
        region = tracker.update_regions((600, 100))
        assert region == tracker.target_region

    def test_no_chase_once_overlapping_target(self, tracker):
        tracker.kick_region = Region(0, 0, 400, 350)
        # 450 + 200 - 50 = 600 is not left of the target (550)
        before = tracker.kick_region
        assert tracker.update_regions((450, 400)) == before

    def test_left_to_right_flight_is_monotone(self, tracker):
        xs = []
        for x in range(300, 800, 25):
            xs.append(tracker.update_regions((x, 100)).x)
        assert xs == sorted(xs)
        assert tracker.kick_region == tracker.target_region
