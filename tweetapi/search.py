"""Recent search options and search stream rules."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from tweetapi.errors import PARAMETER_ERROR_MESSAGE, ErrorObj, ParameterError
from tweetapi.fields import format_time, join_fields
from tweetapi.objects import MediaField, Model, PlaceField, PollField
from tweetapi.tweets import TweetField, TweetRaw
from tweetapi.users import UserField

_OMIT = {"omitempty": True}


@dataclass
class TweetRecentSearchOpts:
    """Optional parameters of the recent search."""

    expansions: list[Any] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    max_results: int = 0
    next_token: str = ""
    since_id: str = ""
    until_id: str = ""

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
        if self.start_time is not None:
            query["start_time"] = format_time(self.start_time)
        if self.end_time is not None:
            query["end_time"] = format_time(self.end_time)
        if self.max_results > 0:
            query["max_results"] = str(self.max_results)
        if self.next_token:
            query["next_token"] = self.next_token
        if self.since_id:
            query["since_id"] = self.since_id
        if self.until_id:
            query["until_id"] = self.until_id
        return query


@dataclass
class TweetRecentSearchMeta(Model):
    """Paging data of a recent search."""

    newest_id: str = ""
    oldest_id: str = ""
    result_count: int = 0
    next_token: str = ""


@dataclass
class TweetRecentSearchResponse:
    """Response of a recent search."""

    raw: TweetRaw
    meta: TweetRecentSearchMeta | None = None


@dataclass
class TweetSearchStreamRule(Model):
    """A filter rule of the search stream."""

    value: str = ""
    tag: str = field(default="", metadata=_OMIT)

    def validate(self) -> None:
        """Raise ParameterError if the rule has no value."""
        if not self.value:
            raise ParameterError(
                "tweet search stream rule value is required: " + PARAMETER_ERROR_MESSAGE
            )


def validate_rules(rules: Iterable[TweetSearchStreamRule]) -> None:
    """Validate every rule, raising for the first invalid one."""
    for rule in rules:
        rule.validate()


def validate_rule_ids(rule_ids: Iterable[str]) -> None:
    """Raise ParameterError if any rule id is empty."""
    for rule_id in rule_ids:
        if not rule_id:
            raise ParameterError("tweet search rule id is required " + PARAMETER_ERROR_MESSAGE)


@dataclass
class TweetSearchStreamRuleEntity(TweetSearchStreamRule):
    """A filter rule together with its id."""

    id: str = ""


@dataclass
class TweetSearchStreamRuleSummary(Model):
    """Counts of rules changed by a request."""

    created: int = 0
    not_created: int = 0
    deleted: int = 0
    not_deleted: int = 0


@dataclass
class TweetSearchStreamRuleMeta(Model):
    """Metadata of a rules request."""

    sent: datetime | None = None
    summary: TweetSearchStreamRuleSummary = field(default_factory=TweetSearchStreamRuleSummary)


@dataclass
class TweetSearchStreamRulesResponse(Model):
    """Response listing the active rules."""

    rules: list[TweetSearchStreamRuleEntity] = field(
        default_factory=list, metadata={"json": "data"}
    )
    meta: TweetSearchStreamRuleMeta | None = None
    errors: list[ErrorObj] = field(default_factory=list, metadata=_OMIT)


@dataclass
class TweetSearchStreamAddRuleResponse(Model):
    """Response to adding rules."""

    rules: list[TweetSearchStreamRuleEntity] = field(
        default_factory=list, metadata={"json": "data"}
    )
    meta: TweetSearchStreamRuleMeta | None = None
    errors: list[ErrorObj] = field(default_factory=list, metadata=_OMIT)


@dataclass
class TweetSearchStreamDeleteRuleResponse(Model):
    """Response to deleting rules."""

    meta: TweetSearchStreamRuleMeta | None = None
    errors: list[ErrorObj] = field(default_factory=list, metadata=_OMIT)