"""Optional parameters of the tweet lookup and the user timelines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from tweetapi.fields import Exclude, format_time, join_fields
from tweetapi.objects import MediaField, PlaceField, PollField
from tweetapi.tweets import TweetField
from tweetapi.users import UserField


def _list_params(lists: Iterable[tuple[str, list[Any]]]) -> dict[str, str]:
    return {key: join_fields(values) for key, values in lists if values}


def _timeline_params(
    query: dict[str, str],
    start_time: datetime | None,
    end_time: datetime | None,
    max_results: int,
    pagination_token: str,
    since_id: str,
    until_id: str,
) -> dict[str, str]:
    if start_time is not None:
        query["start_time"] = format_time(start_time)
    if end_time is not None:
        query["end_time"] = format_time(end_time)
    if max_results > 0:
        query["max_results"] = str(max_results)
    if pagination_token:
        query["pagination_token"] = pagination_token
    if since_id:
        query["since_id"] = since_id
    if until_id:
        query["until_id"] = until_id
    return query


@dataclass
class TweetLookupOpts:
    """Optional parameters of the tweet lookup."""

    expansions: list[Any] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _list_params(
            [
                ("expansions", self.expansions),
                ("media.fields", self.media_fields),
                ("place.fields", self.place_fields),
                ("poll.fields", self.poll_fields),
                ("tweet.fields", self.tweet_fields),
                ("user.fields", self.user_fields),
            ]
        )


@dataclass
class UserTweetTimelineOpts:
    """Optional parameters of the user tweet timeline."""

    expansions: list[Any] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    excludes: list[Exclude] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    max_results: int = 0
    pagination_token: str = ""
    since_id: str = ""
    until_id: str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        query = _list_params(
            [
                ("expansions", self.expansions),
                ("media.fields", self.media_fields),
                ("place.fields", self.place_fields),
                ("poll.fields", self.poll_fields),
                ("tweet.fields", self.tweet_fields),
                ("user.fields", self.user_fields),
                ("exclude", self.excludes),
            ]
        )
        return _timeline_params(
            query,
            self.start_time,
            self.end_time,
            self.max_results,
            self.pagination_token,
            self.since_id,
            self.until_id,
        )


@dataclass
class UserMentionTimelineOpts:
    """Optional parameters of the user mention timeline."""

    expansions: list[Any] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    max_results: int = 0
    pagination_token: str = ""
    since_id: str = ""
    until_id: str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        query = _list_params(
            [
                ("expansions", self.expansions),
                ("media.fields", self.media_fields),
                ("place.fields", self.place_fields),
                ("poll.fields", self.poll_fields),
                ("tweet.fields", self.tweet_fields),
                ("user.fields", self.user_fields),
            ]
        )
        return _timeline_params(
            query,
            self.start_time,
            self.end_time,
            self.max_results,
            self.pagination_token,
            self.since_id,
            self.until_id,
        )