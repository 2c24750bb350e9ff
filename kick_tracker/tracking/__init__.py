from .regions import RegionTracker
from .shot    import ShotTracker, CompletedShot

__all__ = ["RegionTracker", "ShotTracker", "CompletedShot"]
