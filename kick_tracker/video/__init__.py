from .loader import VideoLoader, VideoMetadata, open_writer

__all__ = ["VideoLoader", "VideoMetadata", "open_writer"]
