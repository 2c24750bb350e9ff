"""
Video input and annotated output.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple
import cv2
import numpy as np

import config

logger = logging.getLogger(__name__)


@dataclass
class VideoMetadata:
    path: str
    width: int
    height: int
    fps: float
    total_frames: int

    @property
    def duration_s(self) -> float:
        return self.total_frames / self.fps if self.fps > 0 else 0.0


class VideoLoader:
    """Context manager over cv2.VideoCapture yielding timestamped frames."""

    def __init__(self, path: str):
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Video not found: {path}")
        self._cap: Optional[cv2.VideoCapture] = None
        self._meta: Optional[VideoMetadata] = None

    def __enter__(self) -> "VideoLoader":
        self._cap = cv2.VideoCapture(str(self.path))
        if not self._cap.isOpened():
            raise IOError(f"Cannot open video: {self.path}")
        cap = self._cap
        self._meta = VideoMetadata(
            path=str(self.path),
            width=int(cap.get(cv2.CAP_PROP_FRAME_WIDTH)),
            height=int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT)),
            fps=cap.get(cv2.CAP_PROP_FPS) or 30.0,
            total_frames=int(cap.get(cv2.CAP_PROP_FRAME_COUNT)),
        )
        return self

    def __exit__(self, *_) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None

    @property
    def metadata(self) -> VideoMetadata:
        if self._meta is None:
            raise RuntimeError("VideoLoader not opened; use it as a context manager")
        return self._meta

    def frames(
        self,
        skip: int = 0,
        max_frames: Optional[int] = None,
    ) -> Iterator[Tuple[int, float, np.ndarray]]:
        """Yield (frame_number, timestamp_ms, frame) for every (skip+1)-th frame."""
        if self._cap is None:
            raise RuntimeError("VideoLoader not opened")
        fps = self.metadata.fps
        yielded = 0
        frame_number = 0
        while max_frames is None or yielded < max_frames:
            ok, frame = self._cap.read()
            if not ok:
                break
            if frame_number % (skip + 1) == 0:
                yield frame_number, frame_number / fps * 1000.0, frame
                yielded += 1
            frame_number += 1


def open_writer(
    metadata: VideoMetadata,
    output_path: Path,
    codecs: Tuple[str, ...] = (config.OUTPUT_CODEC, "XVID", "MJPG"),
) -> cv2.VideoWriter:
    """Open a VideoWriter, falling back through ``codecs`` until one works."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    size = (metadata.width, metadata.height)
    for codec in codecs:
        writer = cv2.VideoWriter(str(output_path), cv2.VideoWriter_fourcc(*codec),
                                 metadata.fps, size)
        if writer.isOpened():
            logger.info("Writing %s with codec %s", output_path, codec)
            return writer
        writer.release()
    raise IOError(f"No usable codec for {output_path} (tried {', '.join(codecs)})")
