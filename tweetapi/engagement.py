"""Options and responses for tweet likes, user blocks and user mutes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from tweetapi.fields import join_fields
from tweetapi.objects import Model


def _build_params(
    lists: Iterable[tuple[str, list[str]]], max_results: int, pagination_token: str
) -> dict[str, str]:
    query = {key: join_fields(values) for key, values in lists if values}
    if max_results > 0:
        query["max_results"] = str(max_results)
    if pagination_token:
        query["pagination_token"] = pagination_token
    return query


@dataclass
class TweetLikesMeta(Model):
    """Paging data of a liking users lookup."""

    result_count: int = 0
    next_token: str = ""
    previous_token: str = ""


@dataclass
class TweetLikesLookupOpts:
    """Options of the liking users lookup."""

    expansions: list[str] = field(default_factory=list)
    tweet_fields: list[str] = field(default_factory=list)
    user_fields: list[str] = field(default_factory=list)
    media_fields: list[str] = field(default_factory=list)
    place_fields: list[str] = field(default_factory=list)
    poll_fields: list[str] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _build_params(
            [
                ("expansions", self.expansions),
                ("tweet.fields", self.tweet_fields),
                ("user.fields", self.user_fields),
                ("media.fields", self.media_fields),
                ("place.fields", self.place_fields),
                ("poll.fields", self.poll_fields),
            ],
            self.max_results,
            self.pagination_token,
        )


@dataclass
class UserBlocksLookupOpts:
    """Options of the blocked users lookup."""

    expansions: list[str] = field(default_factory=list)
    tweet_fields: list[str] = field(default_factory=list)
    user_fields: list[str] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _build_params(
            [
                ("expansions", self.expansions),
                ("tweet.fields", self.tweet_fields),
                ("user.fields", self.user_fields),
            ],
            self.max_results,
            self.pagination_token,
        )


@dataclass
class UserBlocksLookupMeta(Model):
    """Paging data of a blocked users lookup."""

    result_count: int = 0
    next_token: str = ""
    previous_token: str = ""


@dataclass
class UserBlocksData(Model):
    """Whether the user is blocked."""

    blocking: bool = False


@dataclass
class UserBlocksResponse(Model):
    """Response to blocking a user."""

    data: UserBlocksData | None = None


@dataclass
class UserDeleteBlocksResponse(Model):
    """Response to unblocking a user."""

    data: UserBlocksData | None = None


@dataclass
class UserMutesLookupOpts:
    """Options of the muted users lookup."""

    expansions: list[str] = field(default_factory=list)
    tweet_fields: list[str] = field(default_factory=list)
    user_fields: list[str] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _build_params(
            [
                ("expansions", self.expansions),
                ("tweet.fields", self.tweet_fields),
                ("user.fields", self.user_fields),
            ],
            self.max_results,
            self.pagination_token,
        )


@dataclass
class UserMutesLookupMeta(Model):
    """Paging data of a muted users lookup."""

    result_count: int = 0
    next_token: str = ""
    previous_token: str = ""


@dataclass
class UserMutesData(Model):
    """Whether the user is muted."""

    muting: bool = False


@dataclass
class UserMutesResponse(Model):
    """Response to muting a user."""

    data: UserMutesData | None = None


@dataclass
class UserDeleteMutesResponse(Model):
    """Response to unmuting a user."""

    data: UserMutesData | None = None