from datetime import datetime, timezone

import pytest

from tweetapi.counts import (
    Granularity,
    TweetCount,
    TweetRecentCountsMeta,
    TweetRecentCountsOpts,
    TweetRecentCountsResponse,
)


def test_empty_options_give_no_params():
    assert TweetRecentCountsOpts().params() == {}


@pytest.mark.parametrize(
    "granularity, expected",
    [(Granularity.MINUTE, "minute"), (Granularity.HOUR, "hour"), (Granularity.DAY, "day")],
)
def test_granularity_value_is_sent(granularity, expected):
    assert TweetRecentCountsOpts(granularity=granularity).params() == {"granularity": expected}


def test_all_options():
    moment = datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    params = TweetRecentCountsOpts(
        start_time=moment, end_time=moment, since_id="10", until_id="20"
    ).params()
    assert params == {
        "start_time": "2021-03-04T05:06:07Z",
        "end_time": "2021-03-04T05:06:07Z",
        "since_id": "10",
        "until_id": "20",
    }


def test_response_decodes_counts_and_meta():
    data = {
        "data": [
            {"start": "2021-05-01T00:00:00.000Z", "end": "2021-05-01T01:00:00.000Z", "tweet_count": 3},
            {"start": "2021-05-01T01:00:00.000Z", "end": "2021-05-01T02:00:00.000Z", "tweet_count": 4},
        ],
        "meta": {"total_tweet_count": 7},
    }
    response = TweetRecentCountsResponse.from_dict(data)
    assert [count.tweet_count for count in response.tweet_counts] == [3, 4]
    assert response.meta == TweetRecentCountsMeta(total_tweet_count=7)
    assert response.tweet_counts[0].start == "2021-05-01T00:00:00.000Z"


def test_response_round_trip():
    response = TweetRecentCountsResponse(
        tweet_counts=[TweetCount(start="a", end="b", tweet_count=2)],
        meta=TweetRecentCountsMeta(total_tweet_count=2),
    )
    assert TweetRecentCountsResponse.from_dict(response.to_dict()) == response
    assert "data" in response.to_dict()


def test_response_rejects_wrong_count_type():
    with pytest.raises(TypeError):
        TweetRecentCountsResponse.from_dict({"data": [{"tweet_count": "many"}]})