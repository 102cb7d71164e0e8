"""
Transcript extraction from YouTube videos.

Uses youtube-transcript-api. Segments are handed back in the provider's
order and shape ({text, start, duration}); nothing is cleaned or merged.
"""

import logging
from typing import Any, Callable, Optional

import requests
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api._errors import CouldNotRetrieveTranscript

from ..errors import TranscriptUnavailableError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


class TranscriptExtractor:
    """Extract transcripts from YouTube videos."""

    def __init__(
        self,
        api: Optional[YouTubeTranscriptApi] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
        log: Optional[logging.Logger] = None,
    ):
        """
        Initialize the transcript extractor.

        Args:
            api: Transcript API instance to use for every call. When not
                 provided, each call builds one on a fresh HTTP session.
            session_factory: Opens the HTTP session for one call.
            log: Logger for diagnostics.
        """
        self.api = api
        self.session_factory = session_factory
        self.log = log or logger

    def extract(self, video_id: str, lang: str = "en") -> list[dict[str, Any]]:
        """
        Extract the transcript of a YouTube video in one language.

        Args:
            video_id: YouTube video ID (11 characters).
            lang: Transcript language code.

        Returns:
            Ordered list of segment dicts.

        Raises:
            TranscriptUnavailableError: No transcript exists for the language.
            UpstreamUnavailableError: YouTube could not be reached.
        """
        try:
            if self.api is not None:
                transcript = self.api.fetch(video_id, languages=[lang])
            else:
                with self.session_factory() as session:
                    api = YouTubeTranscriptApi(http_client=session)
                    transcript = api.fetch(video_id, languages=[lang])
        except CouldNotRetrieveTranscript as e:
            self.log.debug("Transcript provider error for %s: %s", video_id, e)
            raise TranscriptUnavailableError(
                f"No transcript available for video {video_id} "
                f"in language '{lang}' ({type(e).__name__})"
            ) from e
        except requests.RequestException as e:
            raise UpstreamUnavailableError(f"Could not reach YouTube: {e}") from e

        return [self._segment_to_dict(seg) for seg in transcript]

    @staticmethod
    def _segment_to_dict(seg: Any) -> dict[str, Any]:
        # Handle different segment formats
        if isinstance(seg, dict):
            return dict(seg)
        if hasattr(seg, 'text'):
            return {
                "text": seg.text,
                "start": getattr(seg, 'start', None),
                "duration": getattr(seg, 'duration', None),
            }
        return {"text": str(seg)}
