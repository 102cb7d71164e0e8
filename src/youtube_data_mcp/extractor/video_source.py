"""
Video ID resolution for YouTube URLs and bare IDs.
"""

import re
from typing import Optional

VIDEO_ID_RE = re.compile(r'^[a-zA-Z0-9_-]{11}$')

_PREFIX = r'(?:https?://)?(?:www\.)?'


class VideoSourceExtractor:
    """Extract canonical video IDs from URLs or bare IDs."""

    # Tried in order; the first match wins
    VIDEO_ID_PATTERNS = [
        re.compile(_PREFIX + r'youtube\.com/watch\?v=([a-zA-Z0-9_-]{11})'),
        re.compile(_PREFIX + r'youtube\.com/embed/([a-zA-Z0-9_-]{11})'),
        re.compile(_PREFIX + r'youtube\.com/v/([a-zA-Z0-9_-]{11})'),
        re.compile(_PREFIX + r'youtu\.be/([a-zA-Z0-9_-]{11})'),
        re.compile(_PREFIX + r'youtube\.com/shorts/([a-zA-Z0-9_-]{11})'),
    ]

    def extract_video_id(self, url: str) -> Optional[str]:
        """
        Extract a single video ID from a URL.

        Args:
            url: YouTube video URL or bare video ID.

        Returns:
            Video ID (11 characters) or None.
        """
        if not url:
            return None
        url = url.strip()
        if VIDEO_ID_RE.match(url):
            return url
        for pattern in self.VIDEO_ID_PATTERNS:
            match = pattern.search(url)
            if match:
                return match.group(1)
        return None


def resolve_video_id(url: str) -> Optional[str]:
    """Module-level shortcut for :meth:`VideoSourceExtractor.extract_video_id`."""
    return VideoSourceExtractor().extract_video_id(url)
