"""
Error types raised by the YouTube data handlers.

Every error carries a human-readable message; the server boundary renders
it as ``Error: <message>`` and never lets it reach the MCP host.
"""

from typing import Optional


class YouTubeDataError(Exception):
    """Base class for all handled failures."""


class InvalidReferenceError(YouTubeDataError):
    """The URL or identifier could not be resolved to a video ID."""

    def __init__(self, value: str = ""):
        self.value = value
        super().__init__("Invalid YouTube URL or video ID")


class InvalidArgumentsError(YouTubeDataError):
    """Required or mutually exclusive parameters are missing or invalid."""


class MissingCredentialError(YouTubeDataError):
    """No SerpApi key is configured."""

    def __init__(self, variable: str = "SERPAPI_KEY"):
        super().__init__(f"{variable} is not set in environment variables")


class UpstreamError(YouTubeDataError):
    """SerpApi answered with a non-success HTTP status."""

    def __init__(self, status: int, body: str = ""):
        self.status = status
        self.body = body
        super().__init__(f"SerpAPI error: {status} - {body}")


class UpstreamUnavailableError(YouTubeDataError):
    """An upstream host could not be reached or refused the request."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class MalformedUpstreamResponseError(YouTubeDataError):
    """The upstream body is not a usable JSON object."""


class TranscriptUnavailableError(YouTubeDataError):
    """The transcript provider has no transcript for the requested video."""


class CommentsUnavailableError(YouTubeDataError):
    """No comments page token could be found for the video."""
