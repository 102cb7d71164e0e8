"""
Metadata extraction from the public YouTube watch page.

No API key is involved: the page markup is searched for a handful of
well-known patterns. The markup is undocumented, so every field is
best-effort and may come back empty.
"""

import html
import logging
import re
from typing import Callable, Optional

import requests

from ..config import Settings, DEFAULT_SETTINGS
from ..errors import UpstreamUnavailableError
from ..models.video import PageMetadata

logger = logging.getLogger(__name__)


class MetadataExtractor:
    """Extract basic metadata from a YouTube watch page."""

    TITLE_PATTERN = re.compile(r'<meta\s+name="title"\s+content="([^"]+)"', re.IGNORECASE)
    AUTHOR_PATTERN = re.compile(r'<meta\s+name="author"\s+content="([^"]+)"', re.IGNORECASE)
    PUBLISH_DATE_PATTERN = re.compile(r'"publishDate":"([^"]+)"')
    VIEW_COUNT_PATTERN = re.compile(r'"viewCount":"([^"]+)"')

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
        log: Optional[logging.Logger] = None,
    ):
        """
        Initialize the metadata extractor.

        Args:
            settings: Configuration settings. Uses defaults if not provided.
            session_factory: Opens the HTTP session for one request. Each
                             request gets its own session, closed afterwards.
            log: Logger for diagnostics.
        """
        self.settings = settings or DEFAULT_SETTINGS
        self.session_factory = session_factory
        self.log = log or logger

    def extract(self, video_id: str) -> PageMetadata:
        """
        Extract metadata from a YouTube video page.

        Args:
            video_id: YouTube video ID (11 characters).

        Returns:
            PageMetadata; fields that could not be found are None.

        Raises:
            UpstreamUnavailableError: The page could not be fetched.
        """
        url = self.settings.watch_url_template.format(video_id=video_id)
        self.log.debug("Fetching watch page: %s", url)

        try:
            with self.session_factory() as session:
                response = session.get(url, timeout=self.settings.request_timeout)
        except requests.RequestException as e:
            raise UpstreamUnavailableError(f"Could not reach YouTube: {e}") from e

        if not 200 <= response.status_code < 300:
            self.log.debug("Watch page status: %s", response.status_code)
            raise UpstreamUnavailableError(
                f"HTTP error! status: {response.status_code}",
                status=response.status_code,
            )

        return self.parse(video_id, response.text)

    def parse(self, video_id: str, page: str) -> PageMetadata:
        """Search the raw markup for each field independently."""
        return PageMetadata(
            video_id=video_id,
            title=self._search(self.TITLE_PATTERN, page, unescape=True),
            channel_name=self._search(self.AUTHOR_PATTERN, page, unescape=True),
            published_at=self._search(self.PUBLISH_DATE_PATTERN, page),
            view_count=self._search(self.VIEW_COUNT_PATTERN, page),
        )

    @staticmethod
    def _search(pattern: re.Pattern, page: str, unescape: bool = False) -> Optional[str]:
        match = pattern.search(page)
        if not match:
            return None
        value = match.group(1)
        return html.unescape(value) if unescape else value
