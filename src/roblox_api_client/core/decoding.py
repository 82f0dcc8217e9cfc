"""Field level decoding shared by the resource parsers.

Identifiers arrive either as JSON numbers or as JSON strings and are always
exposed as canonical strings. Relation fields such as ``"users/123"`` are
reduced to the bare identifier.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from .errors import RobloxDecodeError
from .response_parsing import JsonObject

USER_RESOURCE_PREFIX = "users/"
GROUP_RESOURCE_PREFIX = "groups/"

_MISSING = object()

_ID_RE = re.compile(r"[0-9]+")
_INTEGER_RE = re.compile(r"-?[0-9]+")


def decode_id(value: object, *, name: str = "id") -> str:
    if isinstance(value, bool):
        raise RobloxDecodeError(f"{name} must be a string or integer")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            raise RobloxDecodeError(f"{name} must not be empty")
        if not _ID_RE.fullmatch(text):
            raise RobloxDecodeError(f"{name} must be numeric")
        return text
    raise RobloxDecodeError(f"{name} must be a string or integer")


def strip_resource_prefix(value: str, prefix: str = USER_RESOURCE_PREFIX) -> str:
    """Return the bare identifier of a ``<resource>/<id>`` reference."""

    return value.removeprefix(prefix)


def require_object(value: object, *, name: str) -> JsonObject:
    if not isinstance(value, dict):
        raise RobloxDecodeError(f"{name} must be an object")
    return value


def require_list(
    payload: Mapping[str, object],
    key: str,
    *,
    allow_missing: bool = True,
) -> list[JsonObject]:
    raw = payload.get(key, _MISSING)
    if raw is _MISSING or raw is None:
        if allow_missing:
            return []
        raise RobloxDecodeError(f"{key} is required")
    if not isinstance(raw, list):
        raise RobloxDecodeError(f"{key} must be a list")
    for item in raw:
        if not isinstance(item, dict):
            raise RobloxDecodeError(f"{key} element must be an object")
    return raw


def require_id(payload: Mapping[str, object], key: str = "id") -> str:
    if key not in payload or payload[key] is None:
        raise RobloxDecodeError(f"{key} is required")
    return decode_id(payload[key], name=key)


def require_str(payload: Mapping[str, object], key: str) -> str:
    value = payload.get(key)
    if value is None:
        raise RobloxDecodeError(f"{key} is required")
    if not isinstance(value, str):
        raise RobloxDecodeError(f"{key} must be a string")
    return value


def optional_str(payload: Mapping[str, object], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RobloxDecodeError(f"{key} must be a string")
    return value


def optional_bool(payload: Mapping[str, object], key: str) -> bool:
    value = payload.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise RobloxDecodeError(f"{key} must be a boolean")
    return value


def optional_int(payload: Mapping[str, object], key: str) -> int:
    """Decode a count that may be encoded as a JSON number or string."""

    value = payload.get(key)
    if value is None:
        return 0
    if isinstance(value, bool):
        raise RobloxDecodeError(f"{key} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
        return int(value.strip())
    raise RobloxDecodeError(f"{key} must be an integer")


def require_int(payload: Mapping[str, object], key: str) -> int:
    if payload.get(key) is None:
        raise RobloxDecodeError(f"{key} is required")
    return optional_int(payload, key)


__all__ = [
    "USER_RESOURCE_PREFIX",
    "GROUP_RESOURCE_PREFIX",
    "decode_id",
    "strip_resource_prefix",
    "require_object",
    "require_list",
    "require_id",
    "require_str",
    "optional_str",
    "optional_bool",
    "optional_int",
    "require_int",
]
