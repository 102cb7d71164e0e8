"""Shared fixtures: fake HTTP session factory and transcript provider."""

import json
import logging

import pytest

from youtube_data_mcp.config import Settings
from youtube_data_mcp.service import YouTubeDataService


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text=None, cookies=None):
        self.status_code = status_code
        self._json_data = json_data
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text
        self.cookies = dict(cookies or {})

    def json(self):
        if self._json_data is None:
            return json.loads(self.text)
        return self._json_data


class FakeSession:
    """Stands in for requests.Session; keeps its own cookie jar."""

    def __init__(self, http):
        self.http = http
        self.cookies = {}
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True
        return False

    def get(self, url, params=None, headers=None, timeout=None):
        self.http.calls.append({
            "url": url,
            "params": dict(params or {}),
            "timeout": timeout,
            "cookies": dict(self.cookies),
        })
        if not self.http.responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self.http.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        self.cookies.update(response.cookies)
        return response


class FakeHttp:
    """Session factory; replays queued responses in order across sessions."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.sessions = []

    def queue(self, response):
        self.responses.append(response)

    def __call__(self):
        session = FakeSession(self)
        self.sessions.append(session)
        return session


class FakeTranscriptExtractor:
    def __init__(self, segments=None, error=None):
        self.segments = segments or []
        self.error = error
        self.calls = []

    def extract(self, video_id, lang="en"):
        self.calls.append((video_id, lang))
        if self.error:
            raise self.error
        return self.segments


@pytest.fixture
def quiet_log():
    log = logging.getLogger("youtube_data_mcp.tests")
    log.addHandler(logging.NullHandler())
    log.propagate = False
    return log


@pytest.fixture
def settings():
    return Settings(serpapi_key="test-key")


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def transcript_extractor():
    return FakeTranscriptExtractor()


@pytest.fixture
def service(settings, http, transcript_extractor, quiet_log):
    return YouTubeDataService(
        settings,
        session_factory=http,
        transcript_extractor=transcript_extractor,
        log=quiet_log,
    )
