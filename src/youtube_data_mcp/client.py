"""
SerpApi client for the youtube_video engine.

Two request shapes are supported: video info by ID, and a page by opaque
``next_page_token``. Comment pages and reply pages share the second shape;
SerpApi tells them apart by the token itself.

Each call makes a single attempt. There is no retry and no backoff.
"""

import logging
from typing import Any, Callable, Optional

import requests

from .config import Settings, DEFAULT_SETTINGS
from .errors import (
    MalformedUpstreamResponseError,
    MissingCredentialError,
    UpstreamError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


class SerpApiClient:
    """Issue youtube_video queries against SerpApi."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
        log: Optional[logging.Logger] = None,
    ):
        """
        Initialize the client.

        Args:
            settings: Configuration settings. Uses defaults if not provided.
            session_factory: Opens the HTTP session for one request. Each
                             request gets its own session, closed afterwards.
            log: Logger for diagnostics.
        """
        self.settings = settings or DEFAULT_SETTINGS
        self.session_factory = session_factory
        self.log = log or logger

    def fetch_video(self, video_id: str) -> dict[str, Any]:
        """Fetch video info (title, views, comment tokens) by video ID."""
        return self._query({"v": video_id})

    def fetch_page(self, page_token: str) -> dict[str, Any]:
        """Fetch a comments or replies page by its opaque token."""
        return self._query({"next_page_token": page_token})

    def _query(self, params: dict[str, str]) -> dict[str, Any]:
        api_key = self.settings.serpapi_key
        if not api_key:
            raise MissingCredentialError("SERPAPI_KEY")

        query = {"api_key": api_key, "engine": self.settings.serpapi_engine, **params}
        self.log.debug(
            "SerpApi request: url=%s params=%s",
            self.settings.serpapi_base_url,
            {**query, "api_key": "***"},
        )

        try:
            with self.session_factory() as session:
                response = session.get(
                    self.settings.serpapi_base_url,
                    params=query,
                    headers={"Content-Type": "application/json"},
                    timeout=self.settings.request_timeout,
                )
        except requests.RequestException as e:
            raise UpstreamUnavailableError(f"Could not reach SerpAPI: {e}") from e

        self.log.debug("SerpApi response status: %s", response.status_code)

        if not 200 <= response.status_code < 300:
            body = response.text
            self.log.debug("SerpApi error response: %s", body)
            raise UpstreamError(response.status_code, body)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedUpstreamResponseError("SerpAPI response is not valid JSON") from e

        if not isinstance(data, dict):
            raise MalformedUpstreamResponseError("SerpAPI response is not a JSON object")

        self.log.debug("SerpApi response keys: %s", list(data.keys()))
        return data
