from datetime import datetime, timezone

from tweetapi.fields import Exclude, Expansion
from tweetapi.objects import MediaField, PlaceField, PollField
from tweetapi.options import TweetLookupOpts, UserMentionTimelineOpts, UserTweetTimelineOpts
from tweetapi.tweets import TweetField
from tweetapi.users import UserField


def test_lookup_empty_options_give_no_params():
    assert TweetLookupOpts().params() == {}


def test_lookup_joins_fields_with_commas():
    opts = TweetLookupOpts(
        expansions=[Expansion.AUTHOR_ID, Expansion.GEO_PLACE_ID],
        media_fields=[MediaField.URL],
        place_fields=[PlaceField.COUNTRY],
        poll_fields=[PollField.OPTIONS],
        tweet_fields=[TweetField.CREATED_AT, TweetField.LANGUAGE],
        user_fields=[UserField.USERNAME],
    )
    assert opts.params() == {
        "expansions": "author_id,geo.place_id",
        "media.fields": "url",
        "place.fields": "country",
        "poll.fields": "options",
        "tweet.fields": "created_at,lang",
        "user.fields": "username",
    }


def test_tweet_timeline_all_options():
    start = datetime(2021, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    opts = UserTweetTimelineOpts(
        excludes=[Exclude.RETWEETS, Exclude.REPLIES],
        start_time=start,
        end_time=start,
        max_results=50,
        pagination_token="next",
        since_id="1",
        until_id="9",
    )
    params = opts.params()
    assert params["exclude"] == "retweets,replies"
    assert params["start_time"] == params["end_time"] == "2021-01-02T03:04:05Z"
    assert params["max_results"] == "50"
    assert params["pagination_token"] == "next"
    assert params["since_id"] == "1"
    assert params["until_id"] == "9"


def test_tweet_timeline_zero_max_results_is_left_out():
    params = UserTweetTimelineOpts(max_results=0, since_id="5").params()
    assert "max_results" not in params
    assert params == {"since_id": "5"}


def test_mention_timeline_has_no_exclude_and_skips_unset():
    opts = UserMentionTimelineOpts(tweet_fields=[TweetField.ID], until_id="7")
    assert opts.params() == {"tweet.fields": "id", "until_id": "7"}


def test_mention_timeline_time_offset_is_kept():
    from datetime import timedelta

    start = datetime(2021, 6, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    params = UserMentionTimelineOpts(start_time=start).params()
    assert params["start_time"].endswith("+02:00")
    assert set(params) == {"start_time"}