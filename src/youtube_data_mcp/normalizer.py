"""
Mapping of SerpApi youtube_video responses into the output models.

One function per response shape. Each one declares its defaults in one
place and never fails on missing fields; only a response that is not a
JSON object is rejected.
"""

from typing import Any, Mapping, Optional

from .errors import MalformedUpstreamResponseError
from .models.video import (
    Comment,
    CommentsPage,
    RepliesPage,
    SortingToken,
    VideoInfo,
)

DEFAULT_COMMENT_LIMIT = 100
ANONYMOUS_AUTHOR = "Anonymous"


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise MalformedUpstreamResponseError("SerpAPI response is not a JSON object")
    return data


def _channel_name(entry: Mapping[str, Any]) -> Optional[str]:
    channel = entry.get("channel")
    if isinstance(channel, Mapping):
        return channel.get("name")
    return None


def _sorting_tokens(raw: Any) -> Optional[list[SortingToken]]:
    if not isinstance(raw, list):
        return None
    return [
        SortingToken(title=str(item.get("title") or ""), token=str(item.get("token") or ""))
        for item in raw
        if isinstance(item, Mapping)
    ]


def normalize_video_info(video_id: str, data: Any) -> VideoInfo:
    """Map a video info response to :class:`VideoInfo`."""
    data = _require_mapping(data)
    return VideoInfo(
        video_id=video_id,
        title=data.get("title"),
        view_count=data.get("views"),
        publish_date=data.get("published_date"),
        channel_name=_channel_name(data),
        comment_count=data.get("extracted_comment_count"),
        comments_next_page_token=data.get("comments_next_page_token"),
        comments_sorting_tokens=_sorting_tokens(data.get("comments_sorting_token")),
    )


def _base_comment(entry: Mapping[str, Any], is_reply: bool) -> Comment:
    return Comment(
        comment_id=entry.get("comment_id") or "",
        author=_channel_name(entry) or ANONYMOUS_AUTHOR,
        text=entry.get("content") or "",
        time=entry.get("published_date") or "",
        likes=entry.get("extracted_vote_count") or 0,
        is_reply=is_reply,
    )


def normalize_comment(entry: Mapping[str, Any]) -> Comment:
    """Map one top-level comment entry."""
    comment = _base_comment(entry, is_reply=False)
    comment.replies = entry.get("replies_count") or 0
    comment.replies_token = entry.get("replies_next_page_token") or None
    return comment


def normalize_reply(entry: Mapping[str, Any]) -> Comment:
    """Map one reply entry."""
    return _base_comment(entry, is_reply=True)


def normalize_comments_page(
    data: Any,
    fallback_video_id: str = "",
    limit: int = DEFAULT_COMMENT_LIMIT,
) -> CommentsPage:
    """
    Map a comments page response to :class:`CommentsPage`.

    Args:
        data: Decoded SerpApi response.
        fallback_video_id: Video ID to use when the response carries none.
        limit: Maximum number of comments to keep, in upstream order.

    Returns:
        CommentsPage; empty when the response has no comment list.
    """
    data = _require_mapping(data)
    page = CommentsPage(
        video_id=data.get("video_id") or fallback_video_id,
        video_title=data.get("title"),
        next_page_token=data.get("comments_next_page_token") or None,
    )

    entries = data.get("comments")
    if not isinstance(entries, list):
        return page

    valid = [entry for entry in entries if isinstance(entry, Mapping)]
    page.comments = [normalize_comment(entry) for entry in valid[:limit]]
    return page


def normalize_replies_page(data: Any) -> RepliesPage:
    """Map a replies page response to :class:`RepliesPage`."""
    data = _require_mapping(data)
    page = RepliesPage(
        parent_comment_id=data.get("comment_parent_id") or "",
        next_page_token=data.get("replies_next_page_token") or None,
    )

    entries = data.get("replies")
    if not isinstance(entries, list):
        return page

    page.replies = [normalize_reply(entry) for entry in entries if isinstance(entry, Mapping)]
    return page


def select_comments_token(info: VideoInfo, sort: str = "relevance") -> Optional[str]:
    """
    Pick the page token for the first comments page.

    ``sort="time"`` uses the "Newest first" sorting token when the video
    offers one; anything else, or a video without it, falls back to the
    default (relevance) token.
    """
    if sort == "time" and info.comments_sorting_tokens:
        for option in info.comments_sorting_tokens:
            if "newest" in option.title.lower():
                return option.token
    return info.comments_next_page_token
