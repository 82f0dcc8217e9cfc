"""Response body parsing helpers."""

from __future__ import annotations

import json

from .errors import RobloxDecodeError

JsonObject = dict[str, object]


def parse_json_payload(raw_body: str) -> JsonObject:
    """Parse a raw response body and map parse failures to domain errors."""

    try:
        payload = json.loads(raw_body)
    except (TypeError, ValueError) as exc:
        raise RobloxDecodeError("response body is not valid JSON", body=raw_body) from exc

    if not isinstance(payload, dict):
        raise RobloxDecodeError("response JSON root must be an object", body=raw_body)
    return payload


__all__ = [
    "JsonObject",
    "parse_json_payload",
]
