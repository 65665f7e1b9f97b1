"""JSON-mapped data models shared across the API: entities, media, places and polls.

Model fields map to JSON keys of the same name unless a field's metadata gives
``{"json": "<key>"}``; ``{"omitempty": True}`` leaves empty values out of
``to_dict``.
"""

from __future__ import annotations

import functools
import inspect
import types
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Union, get_args, get_origin

from tweetapi.fields import format_time

_OMIT = {"omitempty": True}

_NONE_TYPE = type(None)
_BUILTIN_NAMES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "None": _NONE_TYPE,
    "NoneType": _NONE_TYPE,
    "Any": Any,
    "object": object,
    "datetime": datetime,
}
_LIST_NAMES = {"list", "List", "Sequence", "MutableSequence"}
_DICT_NAMES = {"dict", "Dict", "Mapping", "MutableMapping"}


def _split_top(text: str, sep: str) -> list[str]:
    """Split an annotation string on a separator outside of brackets."""
    parts: list[str] = []
    depth = 0
    start = 0
    for pos, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == sep and depth == 0:
            parts.append(text[start:pos].strip())
            start = pos + 1
    parts.append(text[start:].strip())
    return parts


def _collapse_union(options: list[Any]) -> Any:
    real = [option for option in options if option is not _NONE_TYPE]
    return real[0] if len(real) == 1 else Any


def _lookup(name: str, module: Any) -> Any:
    head, *rest = name.split(".")
    if module is not None and hasattr(module, head):
        target = getattr(module, head)
    elif head in _BUILTIN_NAMES:
        target = _BUILTIN_NAMES[head]
    else:
        raise NameError(f"cannot resolve annotation {name!r}")
    for attr in rest:
        target = getattr(target, attr)
    return target


def _resolve(text: str, module: Any) -> Any:
    """Turn an annotation string into a type without evaluating code."""
    text = text.strip().strip("'\"").strip()
    options = _split_top(text, "|")
    if len(options) > 1:
        return _collapse_union([_resolve(option, module) for option in options])
    head, bracket, rest = text.partition("[")
    if not bracket:
        return _lookup(text, module)
    if not rest.endswith("]"):
        raise NameError(f"malformed annotation {text!r}")
    args = [_resolve(arg, module) for arg in _split_top(rest[:-1], ",")]
    name = head.strip().rpartition(".")[2]
    if name in _LIST_NAMES:
        return list[args[0]]
    if name in _DICT_NAMES and len(args) == 2:
        return dict[args[0], args[1]]
    if name == "Optional":
        return _collapse_union([args[0], _NONE_TYPE])
    if name == "Union":
        return _collapse_union(args)
    return Any


def _defining_module(cls: type, name: str) -> Any:
    for klass in cls.__mro__:
        if name in klass.__dict__.get("__annotations__", {}):
            return inspect.getmodule(klass)
    return inspect.getmodule(cls)


@functools.cache
def _hints(cls: type) -> dict[str, Any]:
    hints: dict[str, Any] = {}
    for f in fields(cls):
        tp = f.type
        if isinstance(tp, str):
            tp = _resolve(tp, _defining_module(cls, f.name))
        hints[f.name] = tp
    return hints


def _parse_time(value: Any, key: str) -> datetime:
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} expects a time string, got {type(value).__name__}")
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    return datetime.fromisoformat(text)


def _decode(tp: Any, value: Any, key: str) -> Any:
    if value is None:
        return None
    origin = get_origin(tp)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(tp) if arg is not _NONE_TYPE]
        return _decode(args[0], value, key) if len(args) == 1 else value
    if origin is list:
        if not isinstance(value, list):
            raise TypeError(f"field {key!r} expects a JSON array, got {type(value).__name__}")
        (item_type,) = get_args(tp) or (Any,)
        return [_decode(item_type, item, key) for item in value]
    if origin is dict:
        if not isinstance(value, Mapping):
            raise TypeError(f"field {key!r} expects a JSON object, got {type(value).__name__}")
        key_type, value_type = get_args(tp) or (Any, Any)
        return {
            _decode(key_type, k, key): _decode(value_type, v, key) for k, v in value.items()
        }
    if not isinstance(tp, type):
        return value
    if issubclass(tp, Model):
        return tp.from_dict(value)
    if issubclass(tp, Enum):
        return tp(value)
    if tp is datetime:
        return _parse_time(value, key)
    if tp is bool:
        if not isinstance(value, bool):
            raise TypeError(f"field {key!r} expects a boolean, got {type(value).__name__}")
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"field {key!r} expects an integer, got {type(value).__name__}")
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"field {key!r} expects a number, got {type(value).__name__}")
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise TypeError(f"field {key!r} expects a string, got {type(value).__name__}")
        return value
    return value


def _encode(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_time(value)
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, Mapping):
        return {_encode(k): _encode(v) for k, v in value.items()}
    return value


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (Model, datetime)):
        return False
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    return False


@dataclass
class Model:
    """Base for dataclasses that map to and from JSON objects."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """Build an instance from a decoded JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        hints = _hints(cls)
        kwargs = {}
        for f in fields(cls):
            if not f.init:
                continue
            key = f.metadata.get("json", f.name)
            value = data.get(key)
            if value is None:
                continue
            kwargs[f.name] = _decode(hints[f.name], value, key)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Encode the instance as a JSON-ready dictionary."""
        out: dict[str, Any] = {}
        for f in fields(self):
            if not f.init:
                continue
            value = getattr(self, f.name)
            if f.metadata.get("omitempty") and _is_empty(value):
                continue
            out[f.metadata.get("json", f.name)] = _encode(value)
        return out


@dataclass
class EntityObj(Model):
    """Start and end positions of a piece of text."""

    start: int = 0
    end: int = 0


@dataclass
class EntityAnnotationObj(EntityObj):
    """An annotation recognised in the text."""

    probability: float = 0.0
    type: str = ""
    normalized_text: str = ""


@dataclass
class EntityURLObj(EntityObj):
    """Text recognised as a URL."""

    url: str = ""
    expanded_url: str = ""
    display_url: str = ""
    status: int = 0
    title: str = ""
    description: str = ""
    unwound_url: str = ""


@dataclass
class EntityTagObj(EntityObj):
    """Text recognised as a hashtag or cashtag."""

    tag: str = ""


@dataclass
class EntityMentionObj(EntityObj):
    """Text recognised as a user mention."""

    username: str = ""


@dataclass
class EntitiesObj(Model):
    """Text that has a special meaning."""

    annotations: list[EntityAnnotationObj] = field(default_factory=list)
    urls: list[EntityURLObj] = field(default_factory=list)
    hashtags: list[EntityTagObj] = field(default_factory=list)
    mentions: list[EntityMentionObj] = field(default_factory=list)
    cashtags: list[EntityTagObj] = field(default_factory=list)


@dataclass
class WithHeldObj(Model):
    """Withholding details."""

    copyright: bool = False
    country_codes: list[str] = field(default_factory=list)


class MediaField(str, Enum):
    """Optional fields of the media object."""

    DURATION_MS = "duration_ms"
    HEIGHT = "height"
    MEDIA_KEY = "media_key"
    PREVIEW_IMAGE_URL = "preview_image_url"
    TYPE = "type"
    URL = "url"
    WIDTH = "width"
    PUBLIC_METRICS = "public_metrics"
    NON_PUBLIC_METRICS = "non_public_metrics"
    ORGANIC_METRICS = "organic_metrics"
    PROMOTED_METRICS = "promoted_metrics"


@dataclass
class MediaMetricsObj(Model):
    """Engagement metrics for media content."""

    playback_0_count: int = 0
    playback_100_count: int = 0
    playback_25_count: int = 0
    playback_50_count: int = 0
    playback_75_count: int = 0
    view_count: int = 0


@dataclass
class MediaObj(Model):
    """An image, GIF or video attached to a tweet."""

    media_key: str = ""
    type: str = ""
    url: str = ""
    duration_ms: int = 0
    height: int = field(default=0, metadata=_OMIT)
    non_public_metrics: MediaMetricsObj | None = field(default=None, metadata=_OMIT)
    organic_metrics: MediaMetricsObj | None = field(default=None, metadata=_OMIT)
    preview_image_url: str = field(default="", metadata=_OMIT)
    promoted_metrics: MediaMetricsObj | None = field(default=None, metadata=_OMIT)
    public_metrics: MediaMetricsObj | None = field(default=None, metadata=_OMIT)
    width: int = field(default=0, metadata=_OMIT)


class PlaceField(str, Enum):
    """Optional fields of the place object."""

    CONTAINED_WITHIN = "contained_within"
    COUNTRY = "country"
    COUNTRY_CODE = "country_code"
    FULL_NAME = "full_name"
    GEO = "geo"
    ID = "id"
    NAME = "name"
    PLACE_TYPE = "place_type"


@dataclass
class PlaceGeoObj(Model):
    """Place details in GeoJSON form."""

    type: str = ""
    bbox: list[float] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class PlaceObj(Model):
    """A place tagged in a tweet."""

    full_name: str = field(default="", metadata=_OMIT)
    id: str = ""
    contained_within: list[str] = field(default_factory=list, metadata=_OMIT)
    country: str = field(default="", metadata=_OMIT)
    country_code: str = field(default="", metadata=_OMIT)
    geo: PlaceGeoObj | None = field(default=None, metadata=_OMIT)
    name: str = ""
    place_type: str = field(default="", metadata=_OMIT)


class PollField(str, Enum):
    """Optional fields of the poll object."""

    DURATION_MINUTES = "duration_minutes"
    END_DATETIME = "end_datetime"
    ID = "id"
    OPTIONS = "options"
    VOTING_STATUS = "voting_status"


@dataclass
class PollOptionObj(Model):
    """One choice of a poll."""

    position: int = 0
    label: str = ""
    votes: int = 0


@dataclass
class PollObj(Model):
    """A poll included in a tweet."""

    id: str = ""
    options: list[PollOptionObj] = field(default_factory=list, metadata=_OMIT)
    duration_minutes: int = field(default=0, metadata=_OMIT)
    end_datetime: str = field(default="", metadata=_OMIT)
    voting_status: str = field(default="", metadata=_OMIT)