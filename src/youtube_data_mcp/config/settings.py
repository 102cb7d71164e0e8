"""
Configuration settings for YouTube Data MCP.

Settings are built once at startup (environment, optional .env file and an
optional YAML/JSON file) and passed to the components that need them.
"""

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv


@dataclass
class Settings:
    """Configuration settings for the YouTube data server."""

    # SerpApi credentials and endpoint
    serpapi_key: Optional[str] = None
    serpapi_base_url: str = "https://serpapi.com/search.json"
    serpapi_engine: str = "youtube_video"

    # Public watch page used for best-effort metadata
    watch_url_template: str = "https://www.youtube.com/watch?v={video_id}"

    # Tool defaults
    default_lang: str = "en"
    default_comment_limit: int = 100

    # Network; None leaves the transport's own behavior in place
    request_timeout: Optional[float] = None

    # Behavior
    log_level: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        return bool(self.serpapi_key)

    @classmethod
    def from_env(cls, base: Optional["Settings"] = None) -> "Settings":
        """
        Build settings from the process environment.

        Args:
            base: Settings to start from. Values present in the environment
                  override it.

        Returns:
            New Settings instance.
        """
        load_dotenv()
        settings = base or cls()

        timeout = os.getenv("YDM_REQUEST_TIMEOUT")
        return cls(
            serpapi_key=os.getenv("SERPAPI_KEY") or settings.serpapi_key,
            serpapi_base_url=os.getenv("SERPAPI_BASE_URL", settings.serpapi_base_url),
            serpapi_engine=settings.serpapi_engine,
            watch_url_template=settings.watch_url_template,
            default_lang=settings.default_lang,
            default_comment_limit=settings.default_comment_limit,
            request_timeout=float(timeout) if timeout else settings.request_timeout,
            log_level=os.getenv("YDM_LOG_LEVEL", settings.log_level),
        )

    @classmethod
    def from_file(cls, path: str) -> "Settings":
        """Load Settings from a YAML or JSON file."""
        path = Path(path)

        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix in ('.yaml', '.yml'):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        if not isinstance(data, dict):
            raise ValueError("Settings file must contain a mapping")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict:
        return {
            "serpapi_key": "***" if self.serpapi_key else None,
            "serpapi_base_url": self.serpapi_base_url,
            "serpapi_engine": self.serpapi_engine,
            "watch_url_template": self.watch_url_template,
            "default_lang": self.default_lang,
            "default_comment_limit": self.default_comment_limit,
            "request_timeout": self.request_timeout,
            "log_level": self.log_level,
        }


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Build the process settings.

    File values are the base; environment variables override them.

    Args:
        config_path: Optional YAML or JSON settings file.

    Returns:
        Settings instance.
    """
    base = Settings.from_file(config_path) if config_path else None
    return Settings.from_env(base)


DEFAULT_SETTINGS = Settings()
