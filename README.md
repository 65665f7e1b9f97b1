# tweetapi

tweetapi holds the data models, query options and response decoding for the Twitter v2 API. It makes no network calls of its own: you send requests with any HTTP library, and the package builds the query parameters and request bodies, decodes the JSON responses into dataclasses, and connects tweets to the objects expanded alongside them.

## Installation

```
pip install tweetapi
```

Python 3.10 or later is required. The package depends on nothing outside the standard library.

## Modules

- `tweetapi.endpoints` – `Endpoint`, the API paths, with `url(host)` and `url_id(host, id)`.
- `tweetapi.fields` – the `Expansion` and `Exclude` enums, `join_fields` and `format_time` (RFC 3339, `Z` for UTC).
- `tweetapi.objects` – the `Model` base class (`from_dict`, `to_dict`) and the entity, media, place and poll objects with their `MediaField`, `PlaceField` and `PollField` enums.
- `tweetapi.users` – `UserObj`, `UserMetricsObj`, `ListObj` and the `UserField` and `ListField` enums.
- `tweetapi.tweets` – `TweetObj` and its parts, `TweetRaw`, `TweetRawIncludes`, `TweetDictionary`, `create_tweet_dictionary` and the lookup and timeline responses.
- `tweetapi.options` – options for the tweet lookup and the user tweet and mention timelines.
- `tweetapi.search` – recent search options and responses, search stream rules and their validation.
- `tweetapi.counts` – recent tweet count options, `Granularity` and the count responses.
- `tweetapi.likes` – liked tweets options and responses.
- `tweetapi.engagement` – liking users, blocks and mutes options and responses.
- `tweetapi.lists` – list lookup options and responses.
- `tweetapi.manage` – request and response objects for creating and deleting tweets and lists.
- `tweetapi.errors` – `ParameterError`, `HTTPError`, `ErrorResponse`, `ApiError` and `ErrorObj`.

## Building query parameters

Each options class has a `params()` method. It returns a dict of query parameters and leaves out every option that is not set.

```python
from tweetapi.options import UserTweetTimelineOpts
from tweetapi.fields import Expansion, Exclude
from tweetapi.tweets import TweetField

opts = UserTweetTimelineOpts(
    expansions=[Expansion.AUTHOR_ID],
    tweet_fields=[TweetField.CREATED_AT, TweetField.PUBLIC_METRICS],
    excludes=[Exclude.RETWEETS],
    max_results=50,
)
params = opts.params()
# {"expansions": "author_id", "tweet.fields": "created_at,public_metrics",
#  "exclude": "retweets", "max_results": "50"}
```

Endpoint paths come from `Endpoint`:

```python
from tweetapi.endpoints import Endpoint

url = Endpoint.USER_TWEET_TIMELINE.url_id("https://api.twitter.com", "2244994945")
# "https://api.twitter.com/2/users/2244994945/tweets"
```

## Request bodies

Request objects are dataclasses; `to_dict()` gives the JSON body, leaving out empty optional fields. Call `validate()` first to catch input the API would reject:

```python
from tweetapi.manage import CreateTweetRequest, CreateTweetPoll
from tweetapi.errors import ParameterError

request = CreateTweetRequest(text="Lunch?", poll=CreateTweetPoll(options=["yes", "no"]))
try:
    request.validate()
except ParameterError as exc:
    print(exc)  # the poll has options but no duration
```

Search stream rules are checked with `TweetSearchStreamRule.validate()`, `validate_rules(rules)` and `validate_rule_ids(rule_ids)`.

## Decoding responses

Every model has `from_dict`, which ignores unknown keys:

```python
from tweetapi.tweets import TweetRaw

raw = TweetRaw.from_dict(response_json)
for tweet_id, dictionary in raw.tweet_dictionaries().items():
    print(tweet_id, dictionary.author.username if dictionary.author else None)
```

Use `TweetRaw.from_single(data)` for responses whose `data` holds one tweet instead of a list.

`create_tweet_dictionary(tweet, includes)` takes one tweet and the response's includes. It returns the tweet together with its author, the user it replies to, its place, polls, media, mentioned users and referenced tweets (each resolved recursively). `TweetRawIncludes` offers cached lookups: `users_by_id()`, `users_by_username()`, `polls_by_id()`, `media_by_keys()`, `places_by_id()` and `tweets_by_id()`.

## Errors

When an API call fails, decode the body with `ErrorResponse.from_dict(data, status_code)` and raise the result. If the body is not JSON, raise `HTTPError(status, status_code, url)` instead. `ParameterError` (a `ValueError`) reports invalid input.

## What the package does not do

- It sends no HTTP requests and holds no credentials; there is no client class.
- It has no reader for the sample or filtered streaming endpoints: splitting a streaming body into tweets and system messages is left to the caller, though each tweet record can be decoded with `TweetRaw.from_single`.
- It has no response models for user lookups, followers, following or retweeting users.