from datetime import datetime, timezone

import pytest

from tweetapi.errors import PARAMETER_ERROR_MESSAGE, ParameterError
from tweetapi.fields import Expansion
from tweetapi.search import (
    TweetRecentSearchMeta,
    TweetRecentSearchOpts,
    TweetRecentSearchResponse,
    TweetSearchStreamAddRuleResponse,
    TweetSearchStreamDeleteRuleResponse,
    TweetSearchStreamRule,
    TweetSearchStreamRuleEntity,
    TweetSearchStreamRulesResponse,
    validate_rule_ids,
    validate_rules,
)
from tweetapi.tweets import TweetField, TweetObj, TweetRaw


def test_empty_opts_give_no_params():
    assert TweetRecentSearchOpts().params() == {}


def test_opts_params_order_and_values():
    opts = TweetRecentSearchOpts(
        expansions=[Expansion.AUTHOR_ID],
        tweet_fields=[TweetField.CREATED_AT, TweetField.TEXT],
        start_time=datetime(2021, 5, 1, 12, 0, 0, tzinfo=timezone.utc),
        max_results=10,
        next_token="abc",
        since_id="100",
        until_id="200",
    )
    params = opts.params()
    assert list(params) == [
        "expansions",
        "tweet.fields",
        "start_time",
        "max_results",
        "next_token",
        "since_id",
        "until_id",
    ]
    assert params["tweet.fields"] == "created_at,text"
    assert params["start_time"] == "2021-05-01T12:00:00Z"
    assert params["max_results"] == "10"
    assert params["until_id"] == "200"


def test_zero_max_results_is_left_out():
    assert "max_results" not in TweetRecentSearchOpts(max_results=0, since_id="1").params()


def test_rule_validate_requires_value():
    with pytest.raises(ParameterError) as info:
        TweetSearchStreamRule(tag="cats").validate()
    assert PARAMETER_ERROR_MESSAGE in str(info.value)


def test_validate_rules():
    validate_rules([TweetSearchStreamRule(value="cat")])
    with pytest.raises(ParameterError):
        validate_rules([TweetSearchStreamRule(value="cat"), TweetSearchStreamRule()])


def test_validate_rule_ids():
    validate_rule_ids(["1", "2"])
    with pytest.raises(ParameterError):
        validate_rule_ids(["1", ""])


def test_rule_to_dict_omits_empty_tag():
    assert TweetSearchStreamRule(value="cat has:images").to_dict() == {"value": "cat has:images"}
    assert TweetSearchStreamRule(value="dog", tag="dogs").to_dict() == {
        "value": "dog",
        "tag": "dogs",
    }


def test_rule_entity_round_trip():
    data = {"id": "12", "value": "dog", "tag": "dogs"}
    entity = TweetSearchStreamRuleEntity.from_dict(data)
    assert entity.id == "12"
    assert entity.value == "dog"
    assert entity.to_dict() == data


def test_rules_response_from_dict():
    response = TweetSearchStreamRulesResponse.from_dict(
        {
            "data": [{"id": "1", "value": "cat"}, {"id": "2", "value": "dog", "tag": "d"}],
            "meta": {"sent": "2021-05-01T12:00:00.000Z"},
        }
    )
    assert [rule.id for rule in response.rules] == ["1", "2"]
    assert response.meta.sent == datetime(2021, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert response.errors == []


def test_add_rule_response_summary():
    response = TweetSearchStreamAddRuleResponse.from_dict(
        {
            "data": [{"id": "7", "value": "cat"}],
            "meta": {"summary": {"created": 1, "not_created": 2}},
        }
    )
    assert response.meta.summary.created == 1
    assert response.meta.summary.not_created == 2
    assert response.rules[0].value == "cat"


def test_delete_rule_response_summary():
    response = TweetSearchStreamDeleteRuleResponse.from_dict(
        {"meta": {"summary": {"deleted": 3, "not_deleted": 0}}}
    )
    assert response.meta.summary.deleted == 3
    assert response.meta.summary.not_deleted == 0


def test_recent_search_response_holds_parts():
    raw = TweetRaw(tweets=[TweetObj(id="1", text="hi")])
    meta = TweetRecentSearchMeta.from_dict({"newest_id": "1", "oldest_id": "1", "result_count": 1})
    response = TweetRecentSearchResponse(raw=raw, meta=meta)
    assert response.raw.tweets[0].text == "hi"
    assert response.meta.result_count == 1