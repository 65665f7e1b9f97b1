"""Options and responses of the list lookups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from tweetapi.errors import ErrorObj
from tweetapi.fields import join_fields
from tweetapi.objects import Model
from tweetapi.tweets import TweetField, TweetRaw
from tweetapi.users import ListField, ListObj, UserField, UserObj

_OMIT = {"omitempty": True}


def _build_params(
    lists: Iterable[tuple[str, list[Any]]], max_results: int = 0, pagination_token: str = ""
) -> dict[str, str]:
    query = {key: join_fields(values) for key, values in lists if values}
    if max_results > 0:
        query["max_results"] = str(max_results)
    if pagination_token:
        query["pagination_token"] = pagination_token
    return query


@dataclass
class ListLookupOpts:
    """Options of the list lookup."""

    expansions: list[Any] = field(default_factory=list)
    list_fields: list[ListField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _build_params(
            [
                ("expansions", self.expansions),
                ("list.fields", self.list_fields),
                ("user.fields", self.user_fields),
            ]
        )


@dataclass
class ListRawIncludes(Model):
    """Objects expanded alongside lists."""

    users: list[UserObj] = field(default_factory=list, metadata=_OMIT)


@dataclass
class ListRaw(Model):
    """Raw response of a single list lookup."""

    list_obj: ListObj | None = field(default=None, metadata={"json": "data"})
    includes: ListRawIncludes | None = field(default=None, metadata=_OMIT)
    errors: list[ErrorObj] = field(default_factory=list, metadata=_OMIT)


@dataclass
class ListLookupResponse:
    """Response of the list lookup."""

    raw: ListRaw


@dataclass
class UserListLookupOpts:
    """Options of the owned lists lookup."""

    expansions: list[Any] = field(default_factory=list)
    list_fields: list[ListField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _build_params(
            [
                ("expansions", self.expansions),
                ("list.fields", self.list_fields),
                ("user.fields", self.user_fields),
            ],
            self.max_results,
            self.pagination_token,
        )


@dataclass
class UserListRaw(Model):
    """Raw response of the owned lists lookup."""

    lists: list[ListObj] = field(default_factory=list, metadata={"json": "data"})
    includes: ListRawIncludes | None = field(default=None, metadata=_OMIT)
    errors: list[ErrorObj] = field(default_factory=list, metadata=_OMIT)


@dataclass
class UserListLookupMeta(Model):
    """Paging data of the owned lists lookup."""

    result_count: int = 0
    previous_token: str = ""
    next_token: str = ""


@dataclass
class UserListLookupResponse:
    """Response of the owned lists lookup."""

    raw: UserListRaw
    meta: UserListLookupMeta | None = None


@dataclass
class ListTweetLookupOpts:
    """Options of the list tweets lookup."""

    expansions: list[Any] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
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
class ListTweetLookupMeta(Model):
    """Paging data of the list tweets lookup."""

    result_count: int = 0
    previous_token: str = ""
    next_token: str = ""


@dataclass
class ListTweetLookupResponse:
    """Response of the list tweets lookup."""

    raw: TweetRaw
    meta: ListTweetLookupMeta | None = None


@dataclass
class UserListMembershipsOpts:
    """Options of the list memberships lookup."""

    expansions: list[Any] = field(default_factory=list)
    list_fields: list[ListField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _build_params(
            [
                ("expansions", self.expansions),
                ("list.fields", self.list_fields),
                ("user.fields", self.user_fields),
            ],
            self.max_results,
            self.pagination_token,
        )


@dataclass
class UserListMembershipsRaw(Model):
    """Raw response of the list memberships lookup."""

    lists: list[ListObj] = field(default_factory=list, metadata={"json": "data"})
    includes: ListRawIncludes | None = field(default=None, metadata=_OMIT)
    errors: list[ErrorObj] = field(default_factory=list, metadata=_OMIT)


@dataclass
class UserListMembershipsMeta(Model):
    """Paging data of the list memberships lookup."""

    result_count: int = 0
    previous_token: str = ""
    next_token: str = ""


@dataclass
class UserListMembershipsResponse:
    """Response of the list memberships lookup."""

    raw: UserListMembershipsRaw
    meta: UserListMembershipsMeta | None = None


@dataclass
class ListUserMembersOpts:
    """Options of the list members lookup."""

    expansions: list[Any] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
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
class ListUserMembersMeta(Model):
    """Paging data of the list members lookup."""

    result_count: int = 0
    previous_token: str = ""
    next_token: str = ""