"""Request and response objects for creating and deleting tweets and lists."""

from __future__ import annotations

from dataclasses import dataclass, field

from tweetapi.errors import PARAMETER_ERROR_MESSAGE, ParameterError
from tweetapi.objects import Model

_OMIT = {"omitempty": True}


@dataclass
class CreateTweetGeo(Model):
    """Geo information for a new tweet."""

    place_id: str = field(default="", metadata=_OMIT)


@dataclass
class CreateTweetMedia(Model):
    """Previously uploaded media to attach; tagged users require media ids."""

    ids: list[str] = field(default_factory=list, metadata={"json": "media_ids", "omitempty": True})
    tagged_user_ids: list[str] = field(default_factory=list, metadata=_OMIT)

    def validate(self) -> None:
        """Raise ParameterError if users are tagged without media ids."""
        if self.tagged_user_ids and not self.ids:
            raise ParameterError(
                "media ids are required if tagged user ids are present "
                + PARAMETER_ERROR_MESSAGE
            )


@dataclass
class CreateTweetPoll(Model):
    """A poll posted as the tweet."""

    duration_minutes: int = field(default=0, metadata=_OMIT)
    options: list[str] = field(default_factory=list, metadata=_OMIT)

    def validate(self) -> None:
        """Raise ParameterError if options are given without a positive duration."""
        if self.options and self.duration_minutes <= 0:
            raise ParameterError(
                "poll duration minutes are required with options " + PARAMETER_ERROR_MESSAGE
            )


@dataclass
class CreateTweetReply(Model):
    """Reply settings of a new tweet."""

    exclude_reply_user_ids: list[str] = field(default_factory=list, metadata=_OMIT)
    in_reply_to_tweet_id: str = field(default="", metadata=_OMIT)

    def validate(self) -> None:
        """Raise ParameterError if excluded users are given without the replied tweet."""
        if self.exclude_reply_user_ids and not self.in_reply_to_tweet_id:
            raise ParameterError(
                "in reply to tweet is needs to be present if excluded reply user ids are present "
                + PARAMETER_ERROR_MESSAGE
            )


@dataclass
class CreateTweetRequest(Model):
    """Details of a tweet to create."""

    direct_message_deep_link: str = field(default="", metadata=_OMIT)
    for_super_followers_only: bool = field(default=False, metadata=_OMIT)
    quote_tweet_id: str = field(default="", metadata=_OMIT)
    text: str = field(default="", metadata=_OMIT)
    reply_settings: str = field(default="", metadata=_OMIT)
    geo: CreateTweetGeo | None = field(default=None, metadata=_OMIT)
    media: CreateTweetMedia | None = field(default=None, metadata=_OMIT)
    poll: CreateTweetPoll | None = field(default=None, metadata=_OMIT)
    reply: CreateTweetReply | None = field(default=None, metadata=_OMIT)

    def validate(self) -> None:
        """Raise ParameterError if the request cannot be sent."""
        for part in (self.media, self.poll, self.reply):
            if part is None:
                continue
            try:
                part.validate()
            except ParameterError as err:
                raise ParameterError(f"create tweet error: {err}") from err
        if (self.media is None or not self.media.ids) and not self.text:
            raise ParameterError(
                "create tweet text is required if no media ids " + PARAMETER_ERROR_MESSAGE
            )


@dataclass
class CreateTweetData(Model):
    """The tweet created."""

    id: str = ""
    text: str = ""


@dataclass
class CreateTweetResponse(Model):
    """Response to creating a tweet."""

    tweet: CreateTweetData | None = field(default=None, metadata={"json": "data"})


@dataclass
class DeleteTweetData(Model):
    """Whether the tweet was deleted."""

    deleted: bool = False


@dataclass
class DeleteTweetResponse(Model):
    """Response to deleting a tweet."""

    tweet: DeleteTweetData | None = field(default=None, metadata={"json": "data"})


@dataclass
class ListMetaData(Model):
    """Metadata of a list to create or update; unset values are sent as null."""

    name: str | None = None
    description: str | None = None
    private: bool | None = None


@dataclass
class ListCreateData(Model):
    """The list created."""

    id: str = ""
    name: str = ""


@dataclass
class ListCreateResponse(Model):
    """Response to creating a list."""

    data: ListCreateData | None = None


@dataclass
class ListUpdateData(Model):
    """Whether the list was updated."""

    updated: bool = False


@dataclass
class ListUpdateResponse(Model):
    """Response to updating a list."""

    data: ListUpdateData | None = None


@dataclass
class ListDeleteData(Model):
    """Whether the list was deleted."""

    deleted: bool = False


@dataclass
class ListDeleteResponse(Model):
    """Response to deleting a list."""

    data: ListDeleteData | None = None


@dataclass
class ListMemberData(Model):
    """Whether the user is a member of the list."""

    member: bool = field(default=False, metadata={"json": "is_member"})


@dataclass
class ListAddMemberResponse(Model):
    """Response to adding a list member."""

    data: ListMemberData | None = None


@dataclass
class ListRemoveMemberResponse(Model):
    """Response to removing a list member."""

    data: ListMemberData | None = None