from __future__ import annotations

from datetime import datetime, timezone

import pytest

from roblox_api_client.core.errors import RobloxDecodeError
from roblox_api_client.groups.parser import (
    find_legacy_role,
    parse_group,
    parse_group_candidates,
    parse_group_icon,
    parse_join_request_page,
    parse_join_request_time,
    parse_member_ids,
    parse_membership_page,
    parse_rfc3339,
    parse_role_page,
)
from tests.shared.payloads import make_group_payload, make_membership_page


def test_parse_group_fixture(fixture_loader):
    group = parse_group(fixture_loader("cloud_group.json"))
    assert group.id == "36098297"
    assert group.name == "Obby Makers Guild"
    assert group.owner_id == "369780411"
    assert group.member_count == 1503
    assert group.public_entry is False
    assert group.locked is False


def test_parse_group_id_is_invariant_under_wire_representation():
    assert parse_group(make_group_payload(7)).id == parse_group(make_group_payload("7")).id == "7"


def test_parse_group_without_owner():
    assert parse_group(make_group_payload(7, owner=None)).owner_id is None


def test_parse_group_keeps_unprefixed_owner():
    assert parse_group(make_group_payload(7, owner="12")).owner_id == "12"


def test_parse_group_candidates_fixture(fixture_loader):
    candidates = parse_group_candidates(fixture_loader("legacy_group_lookup.json"))
    assert [c.id for c in candidates] == ["36098297", "5551234"]
    assert candidates[0].name == "Obby Makers Guild"


def test_parse_role_page_uses_current_shape(fixture_loader):
    roles = parse_role_page(fixture_loader("group_roles_page.json"), group_id="36098297")
    assert [(r.id, r.name, r.rank) for r in roles] == [
        ("110001", "Guest", 0),
        ("110002", "Member", 1),
        ("110255", "Owner", 255),
    ]
    assert roles[1].member_count == 1499
    assert all(r.group_id == "36098297" for r in roles)


def test_current_role_shape_does_not_accept_legacy_payload():
    with pytest.raises(RobloxDecodeError, match="displayName is required"):
        parse_role_page({"groupRoles": [{"id": 1, "name": "Member", "rank": 1}]}, group_id="7")


def test_find_legacy_role_fixture(fixture_loader):
    role = find_legacy_role(fixture_loader("legacy_user_group_roles.json"), group_id="36098297")
    assert role is not None
    assert (role.id, role.name, role.rank) == ("110255", "Owner", 255)


def test_find_legacy_role_returns_none_when_not_a_member(fixture_loader):
    assert find_legacy_role(fixture_loader("legacy_user_group_roles.json"), group_id="1") is None


def test_parse_membership_page_strips_prefixes():
    records = parse_membership_page(make_membership_page(7, [(1, 99), (2, 100)]), group_id="7")
    assert [(r.user_id, r.role_id) for r in records] == [("1", "99"), ("2", "100")]


def test_parse_member_ids():
    assert parse_member_ids(make_membership_page(7, [(1, 99), (2, 99)])) == ["1", "2"]


def test_parse_join_request_page_fixture(fixture_loader):
    records = parse_join_request_page(fixture_loader("group_join_requests.json"))
    assert [r.user_id for r in records] == ["1001", "1002", "1003"]
    assert records[1].create_time == "yesterday afternoon"


def test_parse_group_icon_fixture(fixture_loader):
    assert parse_group_icon(fixture_loader("group_icon.json")).endswith("/Png/noFilter")


def test_parse_group_icon_rejects_empty_data():
    with pytest.raises(RobloxDecodeError):
        parse_group_icon({"data": []})


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2025-02-04T11:00:00Z", datetime(2025, 2, 4, 11, 0, tzinfo=timezone.utc)),
        (
            "2025-02-03T08:15:30.123456789Z",
            datetime(2025, 2, 3, 8, 15, 30, 123456, tzinfo=timezone.utc),
        ),
        ("2025-02-03T08:15:30.5+00:00", datetime(2025, 2, 3, 8, 15, 30, 500000, tzinfo=timezone.utc)),
    ],
)
def test_parse_rfc3339(value, expected):
    assert parse_rfc3339(value) == expected


@pytest.mark.parametrize("value", ["yesterday afternoon", "2025-02-04T11:00:00", "", "2025-13-01T00:00:00Z"])
def test_parse_rfc3339_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_rfc3339(value)


def test_parse_join_request_time_defaults_invalid_to_none():
    assert parse_join_request_time("not a time") is None
    assert parse_join_request_time(None) is None
