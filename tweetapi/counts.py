"""Options and responses of the recent tweet counts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from tweetapi.fields import format_time
from tweetapi.objects import Model


class Granularity(str, Enum):
    """How the count time series is grouped."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"


@dataclass
class TweetRecentCountsOpts:
    """Optional parameters of the recent tweet counts."""

    start_time: datetime | None = None
    end_time: datetime | None = None
    since_id: str = ""
    until_id: str = ""
    granularity: Granularity | str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        query: dict[str, str] = {}
        if self.start_time is not None:
            query["start_time"] = format_time(self.start_time)
        if self.end_time is not None:
            query["end_time"] = format_time(self.end_time)
        if self.since_id:
            query["since_id"] = self.since_id
        if self.until_id:
            query["until_id"] = self.until_id
        granularity = (
            self.granularity.value
            if isinstance(self.granularity, Enum)
            else self.granularity
        )
        if granularity:
            query["granularity"] = granularity
        return query


@dataclass
class TweetCount(Model):
    """Number of tweets in one time slot."""

    start: str = ""
    end: str = ""
    tweet_count: int = 0


@dataclass
class TweetRecentCountsMeta(Model):
    """Totals of the recent counts."""

    total_tweet_count: int = 0


@dataclass
class TweetRecentCountsResponse(Model):
    """Response of the recent tweet counts."""

    tweet_counts: list[TweetCount] = field(default_factory=list, metadata={"json": "data"})
    meta: TweetRecentCountsMeta | None = None