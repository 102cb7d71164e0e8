"""
Operation handlers that orchestrate resolution, fetching and normalization.
"""

import logging
from typing import Callable, Optional

import requests

from .client import SerpApiClient
from .config import Settings, DEFAULT_SETTINGS
from .errors import (
    CommentsUnavailableError,
    InvalidArgumentsError,
    InvalidReferenceError,
)
from .extractor import MetadataExtractor, TranscriptExtractor, VideoSourceExtractor
from .models.video import (
    CommentsPage,
    RepliesPage,
    TranscriptResult,
    VideoInfo,
)
from .normalizer import (
    normalize_comments_page,
    normalize_replies_page,
    normalize_video_info,
    select_comments_token,
)

logger = logging.getLogger(__name__)

SORT_ORDERS = ("relevance", "time")


class YouTubeDataService:
    """
    Handlers for the four YouTube data operations.

    Each call is independent: HTTP sessions are opened and closed inside
    the request that needs them, so nothing (cookies, connections) carries
    over from one call to the next and one instance can serve concurrent
    calls.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[SerpApiClient] = None,
        metadata_extractor: Optional[MetadataExtractor] = None,
        transcript_extractor: Optional[TranscriptExtractor] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
        log: Optional[logging.Logger] = None,
    ):
        """
        Initialize the service.

        Args:
            settings: Configuration settings. Uses defaults if not provided.
            client: SerpApi client. Built from settings if not provided.
            metadata_extractor: Watch page extractor. Built from settings if not provided.
            transcript_extractor: Transcript extractor. Built if not provided.
            session_factory: Opens a fresh HTTP session for each request made
                             by the default client and extractors.
            log: Logger for diagnostics.
        """
        self.settings = settings or DEFAULT_SETTINGS
        self.log = log or logger
        self.source_extractor = VideoSourceExtractor()
        self.client = client or SerpApiClient(
            self.settings, session_factory=session_factory, log=self.log
        )
        self.metadata_extractor = metadata_extractor or MetadataExtractor(
            self.settings, session_factory=session_factory, log=self.log
        )
        self.transcript_extractor = transcript_extractor or TranscriptExtractor(
            session_factory=session_factory, log=self.log
        )

    def resolve(self, url: Optional[str]) -> str:
        """Resolve a URL or bare ID, raising InvalidReferenceError on failure."""
        video_id = self.source_extractor.extract_video_id(url or "")
        if not video_id:
            raise InvalidReferenceError(url or "")
        return video_id

    def get_video_info(self, url: str) -> VideoInfo:
        """
        Get basic information about a video from SerpApi.

        Args:
            url: YouTube video URL or video ID.

        Returns:
            VideoInfo including the comment page and sorting tokens.
        """
        video_id = self.resolve(url)
        return normalize_video_info(video_id, self.client.fetch_video(video_id))

    def get_transcript(self, url: str, lang: Optional[str] = None) -> TranscriptResult:
        """
        Get the transcript of a video plus metadata from its watch page.

        Args:
            url: YouTube video URL or video ID.
            lang: Transcript language code. Defaults to the configured language.

        Returns:
            TranscriptResult.
        """
        video_id = self.resolve(url)
        lang = lang or self.settings.default_lang

        video_info = self.metadata_extractor.extract(video_id)
        segments = self.transcript_extractor.extract(video_id, lang)
        result = TranscriptResult(video_info=video_info, segments=segments, language=lang)
        self.log.debug("Transcript for %s (%s): %d segments", video_id, lang, result.segment_count)
        return result

    def get_comments(
        self,
        url: Optional[str] = None,
        limit: Optional[int] = None,
        sort: str = "relevance",
        page_token: Optional[str] = None,
    ) -> CommentsPage:
        """
        Get one page of top-level comments.

        Either a video URL (first page) or a page token from a previous
        response must be given. With a token, the URL and sort are ignored.

        Args:
            url: YouTube video URL or video ID.
            limit: Maximum number of comments to return.
            sort: "relevance" or "time".
            page_token: nextPageToken from a previous page.

        Returns:
            CommentsPage.
        """
        if not url and not page_token:
            raise InvalidArgumentsError("Either url or pageToken must be provided")
        if limit is None:
            limit = self.settings.default_comment_limit
        if limit < 1:
            raise InvalidArgumentsError("limit must be a positive integer")
        if sort not in SORT_ORDERS:
            raise InvalidArgumentsError(f"sort must be one of: {', '.join(SORT_ORDERS)}")

        self.log.debug(
            "Comments request: url=%s limit=%s sort=%s pageToken=%s",
            url, limit, sort, page_token,
        )

        video_id = ""
        if page_token:
            token = page_token
        else:
            video_id = self.resolve(url)
            info = self.get_video_info(video_id)
            token = select_comments_token(info, sort)
            if not token:
                raise CommentsUnavailableError("Could not find valid comments token")

        return normalize_comments_page(self.client.fetch_page(token), video_id, limit)

    def get_comment_replies(self, page_token: str) -> RepliesPage:
        """
        Get replies to a comment.

        Args:
            page_token: repliesToken of a comment, or nextPageToken of a
                        previous replies page.

        Returns:
            RepliesPage.
        """
        if not page_token:
            raise InvalidArgumentsError("pageToken must be provided")

        self.log.debug("Replies request: pageToken=%s", page_token)
        return normalize_replies_page(self.client.fetch_page(page_token))
