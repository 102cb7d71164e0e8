"""
MCP server exposing the YouTube data tools.

Every tool returns a single text payload: the pretty-printed result on
success, or a one-line ``Error: <message>`` on failure. Nothing is raised
to the host.
"""

import json
import logging
from typing import Any, Callable, Literal, Optional

from fastmcp import FastMCP

from .errors import YouTubeDataError
from .service import YouTubeDataService

logger = logging.getLogger(__name__)

SERVER_NAME = "YouTube Data MCP"


def render_result(result: Any) -> str:
    """Render a model (or plain data) as pretty-printed JSON."""
    data = result.to_dict() if hasattr(result, "to_dict") else result
    return json.dumps(data, ensure_ascii=False, indent=2)


def render_error(error: BaseException) -> str:
    message = " ".join(str(error).split()) or "Unknown error"
    return f"Error: {message}"


def call_tool(func: Callable[..., Any], **kwargs) -> str:
    """Run one handler and render its outcome as text."""
    try:
        return render_result(func(**kwargs))
    except YouTubeDataError as e:
        logger.error("%s failed: %s", func.__name__, e)
        return render_error(e)
    except Exception as e:
        logger.exception("Unexpected error in %s", func.__name__)
        return render_error(e)


def create_server(service: YouTubeDataService) -> FastMCP:
    """
    Build the FastMCP server and register the four tools.

    Tool and parameter names (``pageToken`` included) are part of the
    protocol surface and keep their camelCase spelling.
    """
    mcp = FastMCP(
        SERVER_NAME,
        instructions="Extract YouTube transcripts and comments for analysis",
    )

    @mcp.tool(name="getTranscript")
    def get_transcript(url: str, lang: str = "en") -> str:
        """Get transcript/subtitles from a YouTube video.

        Args:
            url: YouTube video URL or video ID
            lang: Language code for transcript (e.g., "en", "ko", "ja")
        """
        return call_tool(service.get_transcript, url=url, lang=lang)

    @mcp.tool(name="getVideoInfo")
    def get_video_info(url: str) -> str:
        """Get basic information about a YouTube video.

        Args:
            url: YouTube video URL or video ID
        """
        return call_tool(service.get_video_info, url=url)

    @mcp.tool(name="getReplies")
    def get_replies(
        url: Optional[str] = None,
        limit: int = 100,
        sort: Literal["relevance", "time"] = "relevance",
        pageToken: Optional[str] = None,
    ) -> str:
        """Get comments/replies from a YouTube video using SerpAPI.

        Args:
            url: YouTube video URL or video ID
            limit: Maximum number of comments to retrieve
            sort: Sort order for comments
            pageToken: Token for pagination (from previous response)
        """
        return call_tool(
            service.get_comments, url=url, limit=limit, sort=sort, page_token=pageToken
        )

    @mcp.tool(name="getCommentReplies")
    def get_comment_replies(pageToken: str) -> str:
        """Get replies for a specific YouTube comment using SerpAPI.

        Args:
            pageToken: Reply token from a comment to get its replies
        """
        return call_tool(service.get_comment_replies, page_token=pageToken)

    return mcp


def run_server(service: YouTubeDataService) -> None:
    """Serve the tools over stdio until the host disconnects."""
    mcp = create_server(service)
    logger.info("%s server running on stdio", SERVER_NAME)
    mcp.run(transport="stdio")
