"""Expansions, exclusions and helpers for building query parameters."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from enum import Enum


class Expansion(str, Enum):
    """Objects referenced in the payload that can be expanded."""

    ATTACHMENTS_POLL_IDS = "attachments.poll_ids"
    ATTACHMENTS_MEDIA_KEYS = "attachments.media_keys"
    AUTHOR_ID = "author_id"
    ENTITIES_MENTIONS_USERNAME = "entities.mentions.username"
    GEO_PLACE_ID = "geo.place_id"
    IN_REPLY_TO_USER_ID = "in_reply_to_user_id"
    REFERENCED_TWEETS_ID = "referenced_tweets.id"
    REFERENCED_TWEETS_ID_AUTHOR_ID = "referenced_tweets.id.author_id"
    PINNED_TWEET_ID = "pinned_tweet_id"
    OWNER_ID = "owner_id"


class Exclude(str, Enum):
    """Kinds of tweets that can be excluded from a timeline."""

    RETWEETS = "retweets"
    REPLIES = "replies"


def join_fields(fields: Iterable[str | Enum]) -> str:
    """Join field names or enum members into a comma separated string."""
    return ",".join(item.value if isinstance(item, Enum) else str(item) for item in fields)


def format_time(value: datetime) -> str:
    """Format a datetime as RFC 3339 with second precision.

    Naive datetimes are taken to be UTC; a zero offset is written as ``Z``.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=timezone.utc)
    stamp = value.strftime("%Y-%m-%dT%H:%M:%S")
    offset = value.utcoffset()
    total = int(offset.total_seconds()) if offset is not None else 0
    if total == 0:
        return stamp + "Z"
    sign = "+" if total > 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{stamp}{sign}{hours:02d}:{minutes:02d}"