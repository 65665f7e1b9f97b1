"""API endpoint paths."""

from __future__ import annotations

from enum import Enum

ID_TAG = "{id}"


class Endpoint(str, Enum):
    """A path of the API, relative to the host."""

    TWEET_LOOKUP = "2/tweets"
    TWEET_CREATE = "2/tweets"
    TWEET_DELETE = "2/tweets/{id}"
    USER_LOOKUP = "2/users"
    USER_NAME_LOOKUP = "2/users/by"
    USER_AUTH_LOOKUP = "2/users/me"
    USER_MANAGE_RETWEET = "2/users/{id}/retweets"
    USER_BLOCKS = "2/users/{id}/blocking"
    USER_MUTES = "2/users/{id}/muting"
    USER_RETWEET_LOOKUP = "2/tweets/{id}/retweeted_by"
    TWEET_RECENT_SEARCH = "2/tweets/search/recent"
    TWEET_RECENT_COUNTS = "2/tweets/counts/recent"
    USER_FOLLOWING = "2/users/{id}/following"
    USER_FOLLOWERS = "2/users/{id}/followers"
    USER_TWEET_TIMELINE = "2/users/{id}/tweets"
    USER_MENTION_TIMELINE = "2/users/{id}/mentions"
    TWEET_HIDE_REPLIES = "2/tweets/{id}/hidden"
    TWEET_LIKES = "2/tweets/{id}/liking_users"
    USER_LIKED_TWEET = "2/users/{id}/liked_tweets"
    USER_LIKES = "2/users/{id}/likes"
    TWEET_SAMPLE_STREAM = "2/tweets/sample/stream"
    TWEET_SEARCH_STREAM_RULES = "2/tweets/search/stream/rules"
    TWEET_SEARCH_STREAM = "2/tweets/search/stream"
    LIST_LOOKUP = "2/lists/{id}"
    USER_LIST_LOOKUP = "2/users/{id}/owned_lists"
    LIST_TWEET_LOOKUP = "2/lists/{id}/tweets"
    LIST_CREATE = "2/lists"
    LIST_UPDATE = "2/lists/{id}"
    LIST_DELETE = "2/lists/{id}"
    LIST_MEMBER = "2/lists/{id}/members"
    USER_LIST_MEMBER = "2/users/{id}/list_memberships"

    def url(self, host: str) -> str:
        """Full URL of the endpoint on the given host."""
        return f"{host}/{self.value}"

    def url_id(self, host: str, id: str) -> str:
        """Full URL with every ``{id}`` placeholder replaced by ``id``."""
        return self.url(host).replace(ID_TAG, id)