"""Parsers from groups JSON payloads into typed models."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ..core.decoding import (
    GROUP_RESOURCE_PREFIX,
    USER_RESOURCE_PREFIX,
    decode_id,
    optional_bool,
    optional_int,
    optional_str,
    require_id,
    require_int,
    require_list,
    require_object,
    require_str,
    strip_resource_prefix,
)
from ..core.errors import RobloxDecodeError
from ..core.resolution import LegacyCandidate
from ..core.response_parsing import JsonObject
from .models import Group, LegacyRole, Role

if TYPE_CHECKING:
    from ..client import RobloxClient

logger = logging.getLogger("roblox_api_client")

_FRACTION_RE = re.compile(r"\.(\d+)")


@dataclass(slots=True, frozen=True)
class MembershipRecord:
    """Membership as listed by the server, before user and role are resolved."""

    user_id: str
    role_id: str


@dataclass(slots=True, frozen=True)
class JoinRequestRecord:
    user_id: str
    create_time: str | None


def parse_group(payload: JsonObject, *, client: "RobloxClient | None" = None) -> Group:
    owner = optional_str(payload, "owner")
    return Group(
        id=require_id(payload),
        name=require_str(payload, "displayName"),
        description=optional_str(payload, "description"),
        owner_id=strip_resource_prefix(owner, USER_RESOURCE_PREFIX) if owner else None,
        member_count=optional_int(payload, "memberCount"),
        public_entry=optional_bool(payload, "publicEntryAllowed"),
        locked=optional_bool(payload, "locked"),
        created_at=optional_str(payload, "createTime"),
        client=client,
    )


def parse_group_candidates(payload: JsonObject) -> list[LegacyCandidate]:
    return [
        LegacyCandidate(id=require_id(item), name=require_str(item, "name"))
        for item in require_list(payload, "data")
    ]


def parse_role(
    payload: JsonObject,
    *,
    group_id: str,
    client: "RobloxClient | None" = None,
) -> Role:
    return Role(
        id=require_id(payload),
        group_id=group_id,
        name=require_str(payload, "displayName"),
        rank=require_int(payload, "rank"),
        description=optional_str(payload, "description"),
        member_count=optional_int(payload, "memberCount"),
        client=client,
    )


def parse_role_page(
    payload: JsonObject,
    *,
    group_id: str,
    client: "RobloxClient | None" = None,
) -> list[Role]:
    return [
        parse_role(item, group_id=group_id, client=client)
        for item in require_list(payload, "groupRoles")
    ]


def parse_legacy_role(payload: JsonObject) -> LegacyRole:
    return LegacyRole(
        id=require_id(payload),
        name=require_str(payload, "name"),
        rank=require_int(payload, "rank"),
    )


def find_legacy_role(payload: JsonObject, *, group_id: str) -> LegacyRole | None:
    """Pick the role held in ``group_id`` out of a user's legacy group-roles listing."""

    for item in require_list(payload, "data"):
        group = require_object(item.get("group"), name="group")
        if decode_id(group.get("id"), name="group.id") != group_id:
            continue
        return parse_legacy_role(require_object(item.get("role"), name="role"))
    return None


def parse_membership_page(payload: JsonObject, *, group_id: str) -> list[MembershipRecord]:
    role_prefix = f"{GROUP_RESOURCE_PREFIX}{group_id}/roles/"
    return [
        MembershipRecord(
            user_id=strip_resource_prefix(require_str(item, "user"), USER_RESOURCE_PREFIX),
            role_id=strip_resource_prefix(require_str(item, "role"), role_prefix),
        )
        for item in require_list(payload, "groupMemberships")
    ]


def parse_member_ids(payload: JsonObject) -> list[str]:
    return [
        strip_resource_prefix(require_str(item, "user"), USER_RESOURCE_PREFIX)
        for item in require_list(payload, "groupMemberships")
    ]


def parse_join_request_page(payload: JsonObject) -> list[JoinRequestRecord]:
    return [
        JoinRequestRecord(
            user_id=strip_resource_prefix(require_str(item, "user"), USER_RESOURCE_PREFIX),
            create_time=optional_str(item, "createTime"),
        )
        for item in require_list(payload, "groupJoinRequests")
    ]


def parse_group_icon(payload: JsonObject) -> str:
    data = require_list(payload, "data")
    if not data:
        raise RobloxDecodeError("group icon response contains no data")
    return require_str(data[0], "imageUrl")


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp such as ``2024-05-01T10:20:30.123456789Z``.

    Fractions beyond microseconds are truncated. Raises ``ValueError``.
    """

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp has no UTC offset: {value!r}")
    return parsed


def parse_join_request_time(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return parse_rfc3339(value)
    except ValueError:
        logger.warning("invalid join request timestamp value=%r", value)
        return None


__all__ = [
    "MembershipRecord",
    "JoinRequestRecord",
    "parse_group",
    "parse_group_candidates",
    "parse_role",
    "parse_role_page",
    "parse_legacy_role",
    "find_legacy_role",
    "parse_membership_page",
    "parse_member_ids",
    "parse_join_request_page",
    "parse_group_icon",
    "parse_rfc3339",
    "parse_join_request_time",
]
