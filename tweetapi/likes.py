"""Options and responses for the tweets a user likes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tweetapi.fields import join_fields
from tweetapi.objects import MediaField, Model, PlaceField, PollField
from tweetapi.tweets import TweetField, TweetRaw
from tweetapi.users import UserField


@dataclass
class UserLikesData(Model):
    """Whether the tweet is liked."""

    liked: bool = False


@dataclass
class UserLikesResponse(Model):
    """Response to liking a tweet."""

    data: UserLikesData | None = None


@dataclass
class DeleteUserLikesResponse(Model):
    """Response to unliking a tweet."""

    data: UserLikesData | None = None


@dataclass
class UserLikesMeta(Model):
    """Paging data of a liked tweets lookup."""

    result_count: int = 0
    next_token: str = ""
    previous_token: str = ""


@dataclass
class UserLikesLookupResponse:
    """Response of a liked tweets lookup."""

    raw: TweetRaw
    meta: UserLikesMeta | None = None


@dataclass
class UserLikesLookupOpts:
    """Options of the liked tweets lookup."""

    expansions: list[Any] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        lists = [
            ("expansions", self.expansions),
            ("media.fields", self.media_fields),
            ("place.fields", self.place_fields),
            ("poll.fields", self.poll_fields),
            ("tweet.fields", self.tweet_fields),
            ("user.fields", self.user_fields),
        ]
        query = {key: join_fields(values) for key, values in lists if values}
        if self.max_results > 0:
            query["max_results"] = str(self.max_results)
        if self.pagination_token:
            query["pagination_token"] = self.pagination_token
        return query