"""User and list objects returned by the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tweetapi.objects import EntitiesObj, Model, WithHeldObj

_OMIT = {"omitempty": True}


class UserField(str, Enum):
    """Optional fields of the user object."""

    CREATED_AT = "created_at"
    DESCRIPTION = "description"
    ENTITIES = "entities"
    ID = "id"
    LOCATION = "location"
    NAME = "name"
    PINNED_TWEET_ID = "pinned_tweet_id"
    PROFILE_IMAGE_URL = "profile_image_url"
    PROTECTED = "protected"
    PUBLIC_METRICS = "public_metrics"
    URL = "url"
    USERNAME = "username"
    VERIFIED = "verified"
    WITHHELD = "withheld"


@dataclass
class UserMetricsObj(Model):
    """Activity counts of a user."""

    followers: int = field(default=0, metadata={"json": "followers_count"})
    following: int = field(default=0, metadata={"json": "following_count"})
    tweets: int = field(default=0, metadata={"json": "tweet_count"})
    listed: int = field(default=0, metadata={"json": "listed_count"})


@dataclass
class UserObj(Model):
    """Account metadata describing a user."""

    id: str = ""
    name: str = ""
    username: str = ""
    created_at: str = field(default="", metadata=_OMIT)
    description: str = field(default="", metadata=_OMIT)
    entities: EntitiesObj | None = field(default=None, metadata=_OMIT)
    location: str = field(default="", metadata=_OMIT)
    pinned_tweet_id: str = field(default="", metadata=_OMIT)
    profile_image_url: str = field(default="", metadata=_OMIT)
    protected: bool = field(default=False, metadata=_OMIT)
    public_metrics: UserMetricsObj | None = field(default=None, metadata=_OMIT)
    url: str = field(default="", metadata=_OMIT)
    verified: bool = field(default=False, metadata=_OMIT)
    withheld: WithHeldObj | None = field(default=None, metadata=_OMIT)


class ListField(str, Enum):
    """Optional fields of the list object."""

    CREATED_AT = "created_at"
    FOLLOWER_COUNT = "follower_count"
    MEMBER_COUNT = "member_count"
    PRIVATE = "private"
    DESCRIPTION = "description"
    OWNER_ID = "owner_id"


@dataclass
class ListObj(Model):
    """Metadata of a list."""

    id: str = ""
    name: str = ""
    created_at: str = ""
    description: str = ""
    follower_count: int = 0
    member_count: int = 0
    private: bool = False
    owner_id: str = ""