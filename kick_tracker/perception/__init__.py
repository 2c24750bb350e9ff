from .ball       import BallDetection, BallDetector
from .pose       import PoseEstimator
from .trajectory import TrajectoryBuilder

__all__ = ["BallDetection", "BallDetector", "PoseEstimator", "TrajectoryBuilder"]
