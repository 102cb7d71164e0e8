"""Configuration for YouTube Data MCP."""

from .settings import Settings, DEFAULT_SETTINGS, load_settings

__all__ = ["Settings", "DEFAULT_SETTINGS", "load_settings"]
