"""
Ball detector.

YOLO sports-ball class; the most confident box within the expected
radius range is returned.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import numpy as np

import config


@dataclass
class BallDetection:
    """Single-frame ball detection."""
    x: float
    y: float
    radius: float
    confidence: float
    frame_number: int
    timestamp_ms: float


class BallDetector:

    def __init__(
        self,
        model_name: str = config.BALL_MODEL,
        conf: float = config.DETECTION_CONF,
        imgsz: int = config.DETECTION_IMG_SIZE,
    ):
        from ultralytics import YOLO
        self._model = YOLO(model_name)
        self.conf = conf
        self.imgsz = imgsz

    def detect(
        self,
        frame: np.ndarray,
        frame_number: int = 0,
        timestamp_ms: float = 0.0,
    ) -> Optional[BallDetection]:
        results = self._model.predict(
            frame,
            conf=self.conf,
            classes=[config.SPORTS_BALL_CLASS],
            imgsz=self.imgsz,
            device=config.DEVICE,
            verbose=False,
        )
        best: Optional[BallDetection] = None
        for res in results:
            for box in res.boxes:
                x1, y1, x2, y2 = box.xyxy[0].tolist()
                r    = ((x2 - x1) + (y2 - y1)) / 4
                conf = float(box.conf[0])
                if not (config.BALL_MIN_RADIUS_PX <= r <= config.BALL_MAX_RADIUS_PX):
                    continue
                if best is None or conf > best.confidence:
                    best = BallDetection(
                        x=(x1 + x2) / 2, y=(y1 + y2) / 2, radius=r,
                        confidence=conf, frame_number=frame_number,
                        timestamp_ms=timestamp_ms,
                    )
        return best
