"""
YouTube Data MCP
================

MCP server that gives agents YouTube transcripts, video information,
comments and comment replies.

Transcripts come from youtube-transcript-api; video information, comments
and replies come from the SerpApi ``youtube_video`` engine.

Tools:
- getTranscript(url, lang="en")
- getVideoInfo(url)
- getReplies(url?, limit=100, sort="relevance", pageToken?)
- getCommentReplies(pageToken)

Example:
    $ export SERPAPI_KEY=...
    $ ydm serve
    $ ydm comments --url "https://youtube.com/watch?v=xxx" --sort time
"""

__version__ = "1.0.0"

from .service import YouTubeDataService
from .config import Settings, load_settings
from .errors import YouTubeDataError
from .models.video import (
    Comment,
    CommentsPage,
    RepliesPage,
    SortingToken,
    TranscriptResult,
    VideoInfo,
)

__all__ = [
    # Service
    "YouTubeDataService",
    # Config
    "Settings",
    "load_settings",
    # Errors
    "YouTubeDataError",
    # Models
    "Comment",
    "CommentsPage",
    "RepliesPage",
    "SortingToken",
    "TranscriptResult",
    "VideoInfo",
    # Meta
    "__version__",
]
