"""Decoding of live-room websocket command payloads into dataclasses.

Decoding follows the rules of the server's JSON: missing keys keep the
field's zero value, unknown keys are ignored, ``null`` leaves a field
untouched, keys match case-insensitively when no exact match exists, and
a value of the wrong JSON type is an error.
"""

from __future__ import annotations

import dataclasses
import inspect
import json
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_MISSING = object()

_SIMPLE_TYPES = {
    "int": int,
    "str": str,
    "bool": bool,
    "float": float,
    "Any": Any,
    "typing.Any": Any,
    "list": list,
    "List": list,
    "typing.List": list,
}

_LIST_PREFIXES = ("list[", "List[", "typing.List[")

_field_types_cache: dict[type, dict[str, Any]] = {}


def decode(cls, payload):
    """Build an instance of the dataclass ``cls`` from a decoded JSON object."""
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a dataclass type")
    return _convert(cls, payload, cls.__name__)


def decode_json(cls, text):
    """Parse JSON ``text`` (str or bytes) and decode it into ``cls``."""
    return decode(cls, json.loads(text))


def _lookup(mapping: Mapping, key: str) -> Any:
    if key in mapping:
        return mapping[key]
    folded = key.casefold()
    return next(
        (value for name, value in mapping.items()
         if isinstance(name, str) and name.casefold() == folded),
        _MISSING,
    )


def _resolve(annotation: Any, owner: type) -> Any:
    """Turn a field annotation, possibly a string, into a type."""
    if not isinstance(annotation, str):
        return annotation
    text = annotation.strip()
    if text in _SIMPLE_TYPES:
        return _SIMPLE_TYPES[text]
    for prefix in _LIST_PREFIXES:
        if text.startswith(prefix) and text.endswith("]"):
            return list[_resolve(text[len(prefix):-1], owner)]
    module = inspect.getmodule(owner)
    namespace = vars(module) if module is not None else {}
    found = namespace.get(text)
    if found is None:
        raise TypeError(f"{owner.__name__}: cannot resolve field type {text!r}")
    return found


def _field_types(tp: type) -> dict[str, Any]:
    types = _field_types_cache.get(tp)
    if types is None:
        types = {f.name: _resolve(f.type, tp) for f in dataclasses.fields(tp)}
        _field_types_cache[tp] = types
    return types


def _convert(tp: Any, value: Any, path: str) -> Any:
    if tp is Any:
        return value
    if dataclasses.is_dataclass(tp):
        if not isinstance(value, Mapping):
            raise ValueError(f"{path}: expected an object, got {type(value).__name__}")
        hints = _field_types(tp)
        kwargs = {}
        for f in dataclasses.fields(tp):
            key = f.metadata.get("json", f.name)
            raw = _lookup(value, key)
            hint = hints[f.name]
            if raw is _MISSING or (raw is None and hint is not Any):
                continue
            kwargs[f.name] = _convert(hint, raw, f"{path}.{key}")
        return tp(**kwargs)
    if tp is list or typing.get_origin(tp) is list:
        if not isinstance(value, list):
            raise ValueError(f"{path}: expected an array, got {type(value).__name__}")
        (item_type,) = typing.get_args(tp) or (Any,)
        return [_convert(item_type, item, f"{path}[{n}]") for n, item in enumerate(value)]
    if tp is bool:
        if isinstance(value, bool):
            return value
    elif tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif tp is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif tp is str:
        if isinstance(value, str):
            return value
    else:
        raise TypeError(f"{path}: unsupported field type {tp!r}")
    raise ValueError(f"{path}: cannot decode {type(value).__name__} into {tp.__name__}")


@dataclass
class WatchedChangeData:
    """Count of viewers who have watched the room."""

    num: int = 0
    text_small: str = ""
    text_large: str = ""


@dataclass
class WatchedChange:
    """``WATCHED_CHANGE`` command."""

    cmd: str = ""
    data: WatchedChangeData = field(default_factory=WatchedChangeData)