"""Extractors for YouTube video data."""

from .transcript import TranscriptExtractor
from .metadata import MetadataExtractor
from .video_source import VideoSourceExtractor, resolve_video_id

__all__ = ["TranscriptExtractor", "MetadataExtractor", "VideoSourceExtractor", "resolve_video_id"]
