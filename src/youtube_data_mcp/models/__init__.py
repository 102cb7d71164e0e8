"""Data models for YouTube video data."""

from .video import (
    Comment,
    CommentsPage,
    PageMetadata,
    RepliesPage,
    SortingToken,
    TranscriptResult,
    VideoInfo,
)

__all__ = [
    "Comment",
    "CommentsPage",
    "PageMetadata",
    "RepliesPage",
    "SortingToken",
    "TranscriptResult",
    "VideoInfo",
]
