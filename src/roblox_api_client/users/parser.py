"""Parsers from users JSON payloads into typed models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.decoding import (
    optional_bool,
    optional_str,
    require_id,
    require_list,
    require_object,
    require_str,
)
from ..core.errors import RobloxDecodeError
from ..core.resolution import LegacyCandidate
from ..core.response_parsing import JsonObject
from .models import User

if TYPE_CHECKING:
    from ..client import RobloxClient


def parse_user(payload: JsonObject, *, client: "RobloxClient | None" = None) -> User:
    return User(
        id=require_id(payload),
        username=require_str(payload, "name"),
        display_name=optional_str(payload, "displayName"),
        premium=optional_bool(payload, "premium"),
        locale=optional_str(payload, "locale"),
        created_at=optional_str(payload, "createTime"),
        about=optional_str(payload, "about"),
        client=client,
    )


def parse_username_candidates(payload: JsonObject) -> list[LegacyCandidate]:
    return [
        LegacyCandidate(id=require_id(item), name=require_str(item, "name"))
        for item in require_list(payload, "data")
    ]


def parse_thumbnail_operation(payload: JsonObject) -> str:
    """Return the image URI of a finished generateThumbnail operation."""

    if payload.get("done") is False:
        raise RobloxDecodeError("thumbnail operation is not done")
    response = require_object(payload.get("response"), name="response")
    return require_str(response, "imageUri")


__all__ = [
    "parse_user",
    "parse_username_candidates",
    "parse_thumbnail_operation",
]
