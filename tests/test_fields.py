from datetime import datetime, timedelta, timezone

import pytest

from tweetapi.fields import Exclude, Expansion, format_time, join_fields


def test_join_expansions():
    assert join_fields([Expansion.AUTHOR_ID, Expansion.GEO_PLACE_ID]) == "author_id,geo.place_id"


def test_join_excludes():
    assert join_fields([Exclude.RETWEETS, Exclude.REPLIES]) == "retweets,replies"


def test_join_plain_strings_and_empty():
    assert join_fields(["a", Expansion.OWNER_ID]) == "a,owner_id"
    assert join_fields([]) == ""


def test_expansion_lookup_by_value():
    assert Expansion("referenced_tweets.id.author_id") is Expansion.REFERENCED_TWEETS_ID_AUTHOR_ID
    with pytest.raises(ValueError):
        Expansion("not_an_expansion")


def test_format_time_utc_uses_z():
    parsed = datetime.fromisoformat("2017-01-11T18:12:52+00:00")
    assert format_time(parsed) == "2017-01-11T18:12:52Z"


def test_format_time_naive_is_utc():
    naive = datetime(2017, 1, 11, 18, 12, 52)
    assert format_time(naive) == format_time(naive.replace(tzinfo=timezone.utc))


def test_format_time_offset_round_trip():
    tz = timezone(timedelta(hours=-5, minutes=-30))
    value = datetime(2021, 3, 4, 5, 6, 7, 891011, tzinfo=tz)
    text = format_time(value)
    assert text.endswith("-05:30")
    assert datetime.fromisoformat(text) == value.replace(microsecond=0)