"""
Video data models for the YouTube data tools.

Field names follow Python conventions; ``to_dict`` produces the camelCase
payload returned to the MCP host. Optional fields are left out of the
payload when absent.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


def _compact(data: dict) -> dict:
    """Drop keys whose value is None."""
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class SortingToken:
    """A comment sort order label paired with its opaque page token."""
    title: str
    token: str

    def to_dict(self) -> dict:
        return {"title": self.title, "token": self.token}


@dataclass
class VideoInfo:
    """Video information returned by the SerpApi youtube_video engine."""
    video_id: str
    title: Optional[str] = None
    view_count: Optional[str] = None
    publish_date: Optional[str] = None
    channel_name: Optional[str] = None
    comment_count: Optional[int] = None
    comments_next_page_token: Optional[str] = None
    comments_sorting_tokens: Optional[list[SortingToken]] = None

    def to_dict(self) -> dict:
        sorting = None
        if self.comments_sorting_tokens is not None:
            sorting = [t.to_dict() for t in self.comments_sorting_tokens]
        return _compact({
            "videoId": self.video_id,
            "title": self.title,
            "viewCount": self.view_count,
            "publishDate": self.publish_date,
            "channelName": self.channel_name,
            "commentCount": self.comment_count,
            "commentsNextPageToken": self.comments_next_page_token,
            "commentsSortingTokens": sorting,
        })


@dataclass
class PageMetadata:
    """Best-effort metadata scraped from the public watch page."""
    video_id: str
    title: Optional[str] = None
    channel_name: Optional[str] = None
    published_at: Optional[str] = None
    view_count: Optional[str] = None

    def to_dict(self) -> dict:
        return _compact({
            "id": self.video_id,
            "title": self.title,
            "channelName": self.channel_name,
            "publishedAt": self.published_at,
            "viewCount": self.view_count,
        })


@dataclass
class Comment:
    """A top-level comment or a reply."""
    comment_id: str
    author: str
    text: str
    time: str
    likes: int
    replies: Optional[int] = None
    replies_token: Optional[str] = None
    is_reply: bool = False

    def to_dict(self) -> dict:
        result = {
            "commentId": self.comment_id,
            "author": self.author,
            "text": self.text,
            "time": self.time,
            "likes": self.likes,
        }
        if not self.is_reply:
            # repliesToken stays explicit: null means "no replies"
            result["replies"] = self.replies
            result["repliesToken"] = self.replies_token
        return result


@dataclass
class CommentsPage:
    """One page of top-level comments."""
    video_id: str
    comments: list[Comment] = field(default_factory=list)
    video_title: Optional[str] = None
    next_page_token: Optional[str] = None

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    def to_dict(self) -> dict:
        return _compact({
            "videoId": self.video_id,
            "videoTitle": self.video_title,
            "comments": [c.to_dict() for c in self.comments],
            "commentCount": self.comment_count,
            "nextPageToken": self.next_page_token,
        })


@dataclass
class RepliesPage:
    """One page of replies to a comment."""
    parent_comment_id: str
    replies: list[Comment] = field(default_factory=list)
    next_page_token: Optional[str] = None

    @property
    def reply_count(self) -> int:
        return len(self.replies)

    def to_dict(self) -> dict:
        return _compact({
            "parentCommentId": self.parent_comment_id,
            "replies": [r.to_dict() for r in self.replies],
            "replyCount": self.reply_count,
            "nextPageToken": self.next_page_token,
        })


@dataclass
class TranscriptResult:
    """Transcript of a video together with its page metadata."""
    video_info: PageMetadata
    segments: list[dict[str, Any]]
    language: str

    @property
    def full_text(self) -> str:
        return " ".join(str(s.get("text", "")) for s in self.segments)

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    def to_dict(self) -> dict:
        return {
            "videoInfo": self.video_info.to_dict(),
            "transcript": self.segments,
            "fullText": self.full_text,
            "language": self.language,
        }
