"""
Core data models for Kick Tracker.
Split across sub-modules; this __init__ re-exports everything.
"""
from .geometry   import Point, Region
from .pose       import Keypoint, PoseObservation, JOINT_NAMES, NUM_JOINTS
from .trajectory import TrajectoryPoint, TrajectoryPath
from .kick       import KickStyle, ScoreValue, KickMetrics
from .session    import SessionStats

__all__ = [
    "Point", "Region",
    "Keypoint", "PoseObservation", "JOINT_NAMES", "NUM_JOINTS",
    "TrajectoryPoint", "TrajectoryPath",
    "KickStyle", "ScoreValue", "KickMetrics",
    "SessionStats",
]
