import pytest

from tweetapi.objects import (
    EntitiesObj,
    EntityMentionObj,
    MediaMetricsObj,
    MediaObj,
    PlaceGeoObj,
    PlaceObj,
    PollObj,
    PollOptionObj,
    WithHeldObj,
)

MEDIA_JSON = {
    "duration_ms": 46947,
    "type": "video",
    "height": 1080,
    "media_key": "13_1263145212760805376",
    "public_metrics": {"view_count": 6909260},
    "preview_image_url": "https://media.example.com/preview.jpg",
    "width": 1920,
}

PLACE_JSON = {
    "geo": {
        "type": "Feature",
        "bbox": [-74.026675, 40.683935, -73.910408, 40.877483],
        "properties": {},
    },
    "country_code": "US",
    "name": "Manhattan",
    "id": "01a9a39529b27f36",
    "place_type": "city",
    "country": "United States",
    "full_name": "Manhattan, NY",
}


def test_media_from_dict():
    media = MediaObj.from_dict(MEDIA_JSON)
    assert media == MediaObj(
        media_key="13_1263145212760805376",
        type="video",
        duration_ms=46947,
        height=1080,
        width=1920,
        public_metrics=MediaMetricsObj(view_count=6909260),
        preview_image_url="https://media.example.com/preview.jpg",
    )


def test_media_round_trip():
    media = MediaObj.from_dict(MEDIA_JSON)
    assert MediaObj.from_dict(media.to_dict()) == media


def test_media_omits_empty_optional_fields():
    assert MediaObj().to_dict() == {"media_key": "", "type": "", "url": "", "duration_ms": 0}


def test_place_nested_geo():
    place = PlaceObj.from_dict(PLACE_JSON)
    assert place.geo == PlaceGeoObj(
        type="Feature",
        bbox=[-74.026675, 40.683935, -73.910408, 40.877483],
        properties={},
    )
    assert place.full_name == "Manhattan, NY"
    assert place.contained_within == []
    assert PlaceObj.from_dict(place.to_dict()) == place


def test_poll_options_decoded():
    poll = PollObj.from_dict(
        {
            "id": "1199786642468413448",
            "voting_status": "closed",
            "duration_minutes": 1440,
            "options": [
                {"position": 1, "label": "C Sharp", "votes": 795},
                {"position": 2, "label": "C Hashtag", "votes": 156},
            ],
            "end_datetime": "2019-11-28T20:26:41.000Z",
        }
    )
    assert poll.options == [
        PollOptionObj(position=1, label="C Sharp", votes=795),
        PollOptionObj(position=2, label="C Hashtag", votes=156),
    ]
    assert poll.end_datetime == "2019-11-28T20:26:41.000Z"


def test_entities_mentions_inherit_positions():
    entities = EntitiesObj.from_dict(
        {"mentions": [{"start": 15, "end": 23, "username": "MongoDB"}]}
    )
    assert entities.mentions == [EntityMentionObj(start=15, end=23, username="MongoDB")]
    assert entities.annotations == []


def test_null_and_unknown_keys_keep_defaults():
    held = WithHeldObj.from_dict({"copyright": None, "country_codes": ["US"], "extra": 1})
    assert held == WithHeldObj(copyright=False, country_codes=["US"])


def test_type_mismatch_raises():
    with pytest.raises(TypeError):
        MediaObj.from_dict({"duration_ms": "long"})
    with pytest.raises(TypeError):
        PollOptionObj.from_dict({"position": True})


def test_non_object_raises():
    with pytest.raises(TypeError):
        PlaceObj.from_dict(["Manhattan"])