"""Tweet objects, raw tweet responses and tweet dictionaries."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from tweetapi.errors import ErrorObj
from tweetapi.objects import EntitiesObj, EntityMentionObj, MediaObj, Model, PlaceObj, PollObj, WithHeldObj
from tweetapi.users import UserObj

_OMIT = {"omitempty": True}

_T = TypeVar("_T")


class TweetField(str, Enum):
    """Optional fields of the tweet object."""

    ID = "id"
    TEXT = "text"
    ATTACHMENTS = "attachments"
    AUTHOR_ID = "author_id"
    CONTEXT_ANNOTATIONS = "context_annotations"
    CONVERSATION_ID = "conversation_id"
    CREATED_AT = "created_at"
    ENTITIES = "entities"
    GEO = "geo"
    IN_REPLY_TO_USER_ID = "in_reply_to_user_id"
    LANGUAGE = "lang"
    NON_PUBLIC_METRICS = "non_public_metrics"
    PUBLIC_METRICS = "public_metrics"
    ORGANIC_METRICS = "organic_metrics"
    PROMOTED_METRICS = "promoted_metrics"
    POSSIBLY_SENSITIVE = "possibly_sensitive"
    REFERENCED_TWEETS = "referenced_tweets"
    SOURCE = "source"
    WITHHELD = "withheld"


@dataclass
class TweetAttachmentsObj(Model):
    """Attachments present in a tweet."""

    media_keys: list[str] = field(default_factory=list)
    poll_ids: list[str] = field(default_factory=list)


@dataclass
class TweetContextObj(Model):
    """Domain or entity of a context annotation."""

    id: str = ""
    name: str = ""
    description: str = ""


@dataclass
class TweetContextAnnotationObj(Model):
    """A context annotation of a tweet."""

    domain: TweetContextObj = field(default_factory=TweetContextObj)
    entity: TweetContextObj = field(default_factory=TweetContextObj)


@dataclass
class TweetGeoCoordinatesObj(Model):
    """Coordinates of the location tagged in a tweet."""

    type: str = ""
    coordinates: list[float] = field(default_factory=list)


@dataclass
class TweetGeoObj(Model):
    """Location tagged in a tweet."""

    place_id: str = ""
    coordinates: TweetGeoCoordinatesObj = field(default_factory=TweetGeoCoordinatesObj)


@dataclass
class TweetMetricsObj(Model):
    """Engagement metrics of a tweet."""

    impressions: int = field(default=0, metadata={"json": "impression_count"})
    url_link_clicks: int = 0
    user_profile_clicks: int = 0
    likes: int = field(default=0, metadata={"json": "like_count"})
    replies: int = field(default=0, metadata={"json": "reply_count"})
    retweets: int = field(default=0, metadata={"json": "retweet_count"})
    quotes: int = field(default=0, metadata={"json": "quote_count"})


@dataclass
class TweetReferencedTweetObj(Model):
    """A tweet this tweet refers to."""

    type: str = ""
    id: str = ""


@dataclass
class TweetObj(Model):
    """The primary object of the tweet endpoints."""

    id: str = ""
    text: str = ""
    attachments: TweetAttachmentsObj | None = field(default=None, metadata=_OMIT)
    author_id: str = field(default="", metadata=_OMIT)
    context_annotations: list[TweetContextAnnotationObj] = field(
        default_factory=list, metadata=_OMIT
    )
    conversation_id: str = field(default="", metadata=_OMIT)
    created_at: str = field(default="", metadata=_OMIT)
    entities: EntitiesObj | None = field(default=None, metadata=_OMIT)
    geo: TweetGeoObj | None = field(default=None, metadata=_OMIT)
    in_reply_to_user_id: str = field(default="", metadata=_OMIT)
    language: str = field(default="", metadata={"json": "lang", "omitempty": True})
    non_public_metrics: TweetMetricsObj | None = field(default=None, metadata=_OMIT)
    organic_metrics: TweetMetricsObj | None = field(default=None, metadata=_OMIT)
    possibly_sensitive: bool = field(
        default=False, metadata={"json": "possiby_sensitive", "omitempty": True}
    )
    promoted_metrics: TweetMetricsObj | None = field(default=None, metadata=_OMIT)
    public_metrics: TweetMetricsObj | None = field(default=None, metadata=_OMIT)
    referenced_tweets: list[TweetReferencedTweetObj] = field(
        default_factory=list, metadata=_OMIT
    )
    source: str = field(default="", metadata=_OMIT)
    withheld: WithHeldObj | None = field(default=None, metadata=_OMIT)


@dataclass
class TweetRawIncludes(Model):
    """Objects expanded alongside the tweets of a response."""

    tweets: list[TweetObj] = field(default_factory=list, metadata=_OMIT)
    users: list[UserObj] = field(default_factory=list, metadata=_OMIT)
    places: list[PlaceObj] = field(default_factory=list, metadata=_OMIT)
    media: list[MediaObj] = field(default_factory=list, metadata=_OMIT)
    polls: list[PollObj] = field(default_factory=list, metadata=_OMIT)
    _index: dict[str, dict[str, Any]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def _indexed(
        self, name: str, items: Iterable[_T], key: Callable[[_T], str]
    ) -> dict[str, _T]:
        if name not in self._index:
            self._index[name] = {key(item): item for item in items}
        return self._index[name]

    def users_by_id(self) -> dict[str, UserObj]:
        """Map of user id to user; built once and cached."""
        return self._indexed("users_by_id", self.users, lambda user: user.id)

    def users_by_username(self) -> dict[str, UserObj]:
        """Map of username to user; built once and cached."""
        return self._indexed("users_by_username", self.users, lambda user: user.username)

    def polls_by_id(self) -> dict[str, PollObj]:
        """Map of poll id to poll; built once and cached."""
        return self._indexed("polls_by_id", self.polls, lambda poll: poll.id)

    def media_by_keys(self) -> dict[str, MediaObj]:
        """Map of media key to media; built once and cached."""
        return self._indexed("media_by_keys", self.media, lambda media: media.media_key)

    def places_by_id(self) -> dict[str, PlaceObj]:
        """Map of place id to place; built once and cached."""
        return self._indexed("places_by_id", self.places, lambda place: place.id)

    def tweets_by_id(self) -> dict[str, TweetObj]:
        """Map of tweet id to referenced tweet; built once and cached."""
        return self._indexed("tweets_by_id", self.tweets, lambda tweet: tweet.id)


@dataclass
class TweetMention:
    """A mention in a tweet and the user it refers to."""

    mention: EntityMentionObj
    user: UserObj


@dataclass
class TweetReference:
    """A referenced tweet and its dictionary."""

    reference: TweetReferencedTweetObj
    tweet_dictionary: TweetDictionary


@dataclass
class TweetDictionary:
    """A tweet together with the objects it references."""

    tweet: TweetObj
    author: UserObj | None = None
    in_reply_user: UserObj | None = None
    place: PlaceObj | None = None
    attachment_polls: list[PollObj] = field(default_factory=list)
    attachment_media: list[MediaObj] = field(default_factory=list)
    mentions: list[TweetMention] = field(default_factory=list)
    referenced_tweets: list[TweetReference] = field(default_factory=list)


def create_tweet_dictionary(
    tweet: TweetObj, includes: TweetRawIncludes | None
) -> TweetDictionary:
    """Resolve the objects a tweet references from the response includes."""
    dictionary = TweetDictionary(tweet=tweet)
    if includes is None:
        return dictionary

    users = includes.users_by_id()
    dictionary.author = users.get(tweet.author_id)
    dictionary.in_reply_user = users.get(tweet.in_reply_to_user_id)

    if tweet.entities is not None:
        names = includes.users_by_username()
        dictionary.mentions = [
            TweetMention(mention=mention, user=names[mention.username])
            for mention in tweet.entities.mentions
            if mention.username in names
        ]

    if tweet.attachments is not None:
        polls = includes.polls_by_id()
        dictionary.attachment_polls = [
            polls[poll_id] for poll_id in tweet.attachments.poll_ids if poll_id in polls
        ]
        media = includes.media_by_keys()
        dictionary.attachment_media = [
            media[key] for key in tweet.attachments.media_keys if key in media
        ]

    if tweet.geo is not None:
        dictionary.place = includes.places_by_id().get(tweet.geo.place_id)

    tweets = includes.tweets_by_id()
    dictionary.referenced_tweets = [
        TweetReference(
            reference=reference,
            tweet_dictionary=create_tweet_dictionary(tweets[reference.id], includes),
        )
        for reference in tweet.referenced_tweets
        if reference.id in tweets
    ]
    return dictionary


@dataclass
class TweetRaw(Model):
    """The raw response of the tweet endpoints."""

    tweets: list[TweetObj] = field(default_factory=list, metadata={"json": "data"})
    includes: TweetRawIncludes | None = field(default=None, metadata=_OMIT)
    errors: list[ErrorObj] = field(default_factory=list, metadata=_OMIT)
    _dictionaries: dict[str, TweetDictionary] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def from_single(cls, data: Mapping[str, Any]) -> TweetRaw:
        """Build from a response whose ``data`` holds one tweet rather than a list.

        A response without ``data`` gives no tweets.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        tweet = data.get("data")
        includes = data.get("includes")
        return cls(
            tweets=[TweetObj.from_dict(tweet)] if tweet is not None else [],
            includes=TweetRawIncludes.from_dict(includes) if includes is not None else None,
            errors=[ErrorObj.from_dict(item) for item in data.get("errors") or []],
        )

    def tweet_dictionaries(self) -> dict[str, TweetDictionary]:
        """Map of tweet id to its dictionary; built once and cached."""
        if self._dictionaries is None:
            self._dictionaries = {
                tweet.id: create_tweet_dictionary(tweet, self.includes) for tweet in self.tweets
            }
        return self._dictionaries


@dataclass
class UserTimelineMeta(Model):
    """Paging data of a timeline."""

    result_count: int = 0
    newest_id: str = ""
    oldest_id: str = ""
    next_token: str = ""
    previous_token: str = ""


@dataclass
class TweetLookupResponse:
    """Response of a tweet lookup."""

    raw: TweetRaw


@dataclass
class UserTweetTimelineResponse:
    """Response of a user tweet timeline."""

    raw: TweetRaw
    meta: UserTimelineMeta | None = None


@dataclass
class UserMentionTimelineResponse:
    """Response of a user mention timeline."""

    raw: TweetRaw
    meta: UserTimelineMeta | None = None