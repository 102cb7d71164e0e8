"""Tests for SerpApi response normalization."""

import pytest

from youtube_data_mcp.errors import MalformedUpstreamResponseError
from youtube_data_mcp.models.video import SortingToken, VideoInfo
from youtube_data_mcp.normalizer import (
    normalize_comments_page,
    normalize_replies_page,
    normalize_video_info,
    select_comments_token,
)


class TestNormalizeVideoInfo:
    def test_field_mapping(self):
        data = {
            "title": "T",
            "views": "1,234",
            "published_date": "Jan 1, 2024",
            "channel": {"name": "Chan"},
            "extracted_comment_count": 17,
            "comments_next_page_token": "NEXT",
            "comments_sorting_token": [
                {"title": "Top comments", "token": "A"},
                {"title": "Newest first", "token": "B"},
            ],
        }

        info = normalize_video_info("abc12345678", data)

        assert info.video_id == "abc12345678"
        assert info.title == "T"
        assert info.view_count == "1,234"
        assert info.publish_date == "Jan 1, 2024"
        assert info.channel_name == "Chan"
        assert info.comment_count == 17
        assert info.comments_next_page_token == "NEXT"
        assert info.comments_sorting_tokens == [
            SortingToken("Top comments", "A"),
            SortingToken("Newest first", "B"),
        ]

    def test_empty_response(self):
        info = normalize_video_info("abc12345678", {})
        assert info.to_dict() == {"videoId": "abc12345678"}

    def test_non_object_is_malformed(self):
        with pytest.raises(MalformedUpstreamResponseError):
            normalize_video_info("abc12345678", ["not", "an", "object"])


def _entries(count):
    return [{"comment_id": f"c{i}", "content": f"text {i}"} for i in range(count)]


class TestNormalizeCommentsPage:
    def test_missing_comments_is_empty_page(self):
        page = normalize_comments_page({"title": "T"}, "abc12345678")

        assert page.comment_count == 0
        assert page.comments == []
        assert page.video_id == "abc12345678"
        assert page.video_title == "T"

    def test_non_list_comments_is_empty_page(self):
        page = normalize_comments_page({"comments": "nope"}, "abc12345678")
        assert page.to_dict()["comments"] == []
        assert page.to_dict()["commentCount"] == 0

    def test_truncates_to_limit_in_order(self):
        page = normalize_comments_page({"comments": _entries(150)}, "abc12345678", limit=100)

        assert page.comment_count == 100
        assert [c.comment_id for c in page.comments] == [f"c{i}" for i in range(100)]

    def test_non_object_entries_do_not_count_toward_limit(self):
        entries = ["junk", 5, None, *_entries(3)]
        page = normalize_comments_page({"comments": entries}, limit=2)

        assert [c.comment_id for c in page.comments] == ["c0", "c1"]

    def test_default_limit_is_100(self):
        page = normalize_comments_page({"comments": _entries(120)})
        assert page.comment_count == 100

    def test_defaults_for_missing_entry_fields(self):
        page = normalize_comments_page({"comments": [{}]}, "abc12345678")

        comment = page.comments[0].to_dict()

        assert comment == {
            "commentId": "",
            "author": "Anonymous",
            "text": "",
            "time": "",
            "likes": 0,
            "replies": 0,
            "repliesToken": None,
        }

    def test_entry_mapping(self):
        data = {
            "video_id": "zzz12345678",
            "comments_next_page_token": "PAGE2",
            "comments": [{
                "comment_id": "c1",
                "channel": {"name": "Alice"},
                "content": "great video",
                "published_date": "2 days ago",
                "extracted_vote_count": 12,
                "replies_count": 3,
                "replies_next_page_token": "R1",
            }],
        }

        page = normalize_comments_page(data, "abc12345678")

        assert page.video_id == "zzz12345678"
        assert page.next_page_token == "PAGE2"
        assert page.comments[0].to_dict() == {
            "commentId": "c1",
            "author": "Alice",
            "text": "great video",
            "time": "2 days ago",
            "likes": 12,
            "replies": 3,
            "repliesToken": "R1",
        }

    def test_empty_next_page_token_is_dropped(self):
        page = normalize_comments_page({"comments": [], "comments_next_page_token": ""})
        assert "nextPageToken" not in page.to_dict()

    def test_non_object_is_malformed(self):
        with pytest.raises(MalformedUpstreamResponseError):
            normalize_comments_page("oops")


class TestNormalizeRepliesPage:
    def test_replies_mapping(self):
        data = {
            "comment_parent_id": "c1",
            "replies_next_page_token": "MORE",
            "replies": [{"comment_id": "r1", "content": "hi", "channel": {"name": "Bob"}}],
        }

        page = normalize_replies_page(data)

        assert page.parent_comment_id == "c1"
        assert page.reply_count == 1
        assert page.next_page_token == "MORE"
        assert page.replies[0].to_dict() == {
            "commentId": "r1",
            "author": "Bob",
            "text": "hi",
            "time": "",
            "likes": 0,
        }

    def test_missing_replies_is_empty_page(self):
        page = normalize_replies_page({})

        assert page.to_dict() == {"parentCommentId": "", "replies": [], "replyCount": 0}

    def test_non_object_is_malformed(self):
        with pytest.raises(MalformedUpstreamResponseError):
            normalize_replies_page(None)


class TestSelectCommentsToken:
    @pytest.fixture
    def info(self):
        return VideoInfo(
            video_id="abc12345678",
            comments_next_page_token="DEFAULT",
            comments_sorting_tokens=[
                SortingToken("Top comments", "A"),
                SortingToken("Newest first", "B"),
            ],
        )

    def test_time_sort_uses_newest_token(self, info):
        assert select_comments_token(info, "time") == "B"

    def test_relevance_sort_uses_default_token(self, info):
        assert select_comments_token(info, "relevance") == "DEFAULT"

    def test_label_match_is_case_insensitive(self, info):
        info.comments_sorting_tokens = [SortingToken("NEWEST FIRST", "N")]
        assert select_comments_token(info, "time") == "N"

    def test_time_sort_falls_back_without_newest_option(self, info):
        info.comments_sorting_tokens = [SortingToken("Top comments", "A")]
        assert select_comments_token(info, "time") == "DEFAULT"

    def test_time_sort_without_sorting_tokens(self):
        info = VideoInfo(video_id="abc12345678", comments_next_page_token="DEFAULT")
        assert select_comments_token(info, "time") == "DEFAULT"
