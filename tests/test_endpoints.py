from tweetapi.endpoints import Endpoint

HOST = "https://api.example.com"


def test_url_joins_host_and_path():
    assert Endpoint.TWEET_LOOKUP.url(HOST) == HOST + "/2/tweets"
    assert Endpoint.TWEET_RECENT_SEARCH.url(HOST) == HOST + "/2/tweets/search/recent"


def test_url_id_replaces_placeholder():
    assert Endpoint.USER_FOLLOWING.url_id(HOST, "2244994945") == HOST + "/2/users/2244994945/following"
    assert "{id}" not in Endpoint.LIST_MEMBER.url_id(HOST, "84839422")


def test_url_id_without_placeholder_matches_url():
    assert Endpoint.USER_AUTH_LOOKUP.url_id(HOST, "1") == Endpoint.USER_AUTH_LOOKUP.url(HOST)


def test_shared_paths_are_aliases():
    assert Endpoint.TWEET_CREATE is Endpoint.TWEET_LOOKUP
    assert Endpoint.LIST_UPDATE is Endpoint.LIST_LOOKUP
    assert Endpoint.LIST_DELETE.url_id(HOST, "7") == Endpoint.LIST_LOOKUP.url_id(HOST, "7")