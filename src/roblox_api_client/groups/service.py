"""Group accessors."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING, TypeVar

from ..config import EndpointConfig, PaginationConfig
from ..core.errors import (
    ERR_INVALID_GROUP_NAME,
    ERR_NO_GROUP_ID,
    ERR_NO_GROUP_NAME,
    ERR_NO_ROLE_ID,
    ERR_NO_USER_ID,
    ERR_USER_HAS_NO_ROLE,
    RobloxApiError,
    RobloxUserHasNoRoleError,
)
from ..core.pagination import Paginator
from ..core.resolution import LegacyCandidate, resolve_by_key
from ..core.response_parsing import parse_json_payload
from ..core.transport import SyncTransport
from ..core.validators import ensure_id, path_segment
from ..users.service import UsersService
from .models import Group, JoinRequest, LegacyRole, Membership, Role
from .parser import (
    JoinRequestRecord,
    MembershipRecord,
    find_legacy_role,
    parse_group,
    parse_group_candidates,
    parse_group_icon,
    parse_join_request_page,
    parse_join_request_time,
    parse_member_ids,
    parse_membership_page,
    parse_role,
    parse_role_page,
)
from .requests import JoinRequestAction, MembershipRoleUpdate

if TYPE_CHECKING:
    from ..client import RobloxClient

logger = logging.getLogger("roblox_api_client")

T = TypeVar("T")


class GroupsService:
    """Accessors for Open Cloud groups and the legacy groups/thumbnails APIs."""

    def __init__(
        self,
        transport: SyncTransport,
        *,
        endpoints: EndpointConfig,
        pagination: PaginationConfig,
        users: UsersService,
        owner: "RobloxClient | None" = None,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        self._transport = transport
        self._endpoints = endpoints
        self._pagination = pagination
        self._users = users
        self._owner = owner
        self._paginator = Paginator(
            transport,
            interval_seconds=pagination.page_interval_seconds,
            clock=clock,
            sleeper=sleeper,
        )

    def _group_url(self, group_id: str) -> str:
        return f"{self._endpoints.cloud_api_url}groups/{path_segment(group_id)}"

    def get_group_by_id(self, group_id: str) -> Group:
        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        payload = parse_json_payload(self._transport.get(self._group_url(group_id)))
        return parse_group(payload, client=self._owner)

    def get_group_by_name(self, name: str) -> Group:
        """Look a group up by exact (case-sensitive) name.

        Relies on the legacy ``groups.roblox.com/v1/groups/search/lookup``
        endpoint. The lookup name replaces the Open Cloud display name.
        """

        return resolve_by_key(
            name,
            empty_message=ERR_NO_GROUP_NAME,
            invalid_message=ERR_INVALID_GROUP_NAME,
            lookup_candidates=self._lookup_group_names,
            fetch_canonical=self.get_group_by_id,
            overlay=_overlay_group_name,
        )

    def get_group_icon(self, group_id: str, *, large: bool = False, circular: bool = False) -> str:
        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        raw = self._transport.get(
            f"{self._endpoints.thumbnails_url}/v1/groups/icons",
            params={
                "groupIds": group_id,
                "format": "Png",
                "size": "420x420" if large else "150x150",
                "isCircular": "true" if circular else "false",
            },
        )
        return parse_group_icon(parse_json_payload(raw))

    def list_member_ids(self, group_id: str) -> list[str]:
        """Return the user id of every member.

        The Open Cloud API serves at most 100 memberships per page, so large
        groups take a long time to list.
        """

        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        return self._paginator.collect(
            f"{self._group_url(group_id)}/memberships",
            page_size=self._pagination.membership_page_size,
            extract_items=parse_member_ids,
            map_item=_identity,
        )

    def list_memberships(self, group_id: str) -> list[Membership]:
        """Return every member with their resolved user and role.

        Each member costs two extra requests. Members whose user or role
        lookup fails are left out of the result without raising, so a
        returned list may be incomplete.
        """

        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)

        def resolve(record: MembershipRecord) -> Membership:
            user = self._users.get_user_by_id(record.user_id)
            role = self.get_role(group_id, record.role_id)
            return Membership(group_id=group_id, user=user, role=role, client=self._owner)

        return self._paginator.collect(
            f"{self._group_url(group_id)}/memberships",
            page_size=self._pagination.membership_page_size,
            extract_items=lambda payload: parse_membership_page(payload, group_id=group_id),
            map_item=resolve,
        )

    def list_roles(self, group_id: str) -> list[Role]:
        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        return self._paginator.collect(
            f"{self._group_url(group_id)}/roles",
            page_size=self._pagination.role_page_size,
            extract_items=lambda payload: parse_role_page(
                payload,
                group_id=group_id,
                client=self._owner,
            ),
            map_item=_identity,
        )

    def get_role(self, group_id: str, role_id: str) -> Role:
        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        role_id = ensure_id(role_id, message=ERR_NO_ROLE_ID)
        raw = self._transport.get(f"{self._group_url(group_id)}/roles/{path_segment(role_id)}")
        return parse_role(parse_json_payload(raw), group_id=group_id, client=self._owner)

    def get_user_role(self, group_id: str, user_id: str) -> LegacyRole:
        """Return the role ``user_id`` holds in ``group_id`` (legacy role shape)."""

        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        user_id = ensure_id(user_id, message=ERR_NO_USER_ID)
        raw = self._transport.get(
            f"{self._endpoints.groups_url}/v1/users/{path_segment(user_id)}/groups/roles"
        )
        role = find_legacy_role(parse_json_payload(raw), group_id=group_id)
        if role is None:
            raise RobloxUserHasNoRoleError(ERR_USER_HAS_NO_ROLE)
        return role

    def update_member_role(self, group_id: str, user_id: str, role_id: str) -> None:
        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        user_id = ensure_id(user_id, message=ERR_NO_USER_ID)
        role_id = ensure_id(role_id, message=ERR_NO_ROLE_ID)
        body = MembershipRoleUpdate.for_member(group_id, user_id, role_id)
        self._transport.patch(
            f"{self._group_url(group_id)}/memberships/{path_segment(user_id)}",
            body.to_payload(),
        )
        logger.info("member role updated group=%s user=%s role=%s", group_id, user_id, role_id)

    def remove_member(self, group_id: str, user_id: str) -> None:
        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        user_id = ensure_id(user_id, message=ERR_NO_USER_ID)
        self._transport.delete(
            f"{self._endpoints.groups_url}/v1/groups/{path_segment(group_id)}"
            f"/users/{path_segment(user_id)}"
        )
        logger.info("member removed group=%s user=%s", group_id, user_id)

    def list_join_requests(self, group_id: str) -> list[JoinRequest]:
        """Return the pending join requests of a group (single page).

        Requests whose user lookup fails are left out. An unparseable
        ``createTime`` yields ``created_at=None`` and keeps the request.
        """

        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        raw = self._transport.get(f"{self._group_url(group_id)}/join-requests")
        records = parse_join_request_page(parse_json_payload(raw))

        results: list[JoinRequest] = []
        for record in records:
            try:
                results.append(self._resolve_join_request(group_id, record))
            except RobloxApiError as exc:
                logger.warning(
                    "skipping join request group=%s user=%s error=%s",
                    group_id,
                    record.user_id,
                    exc,
                )
        return results

    def accept_join_request(self, group_id: str, user_id: str) -> None:
        self._act_on_join_request(group_id, user_id, JoinRequestAction("accept"))

    def decline_join_request(self, group_id: str, user_id: str) -> None:
        self._act_on_join_request(group_id, user_id, JoinRequestAction("decline"))

    def _act_on_join_request(self, group_id: str, user_id: str, action: JoinRequestAction) -> None:
        group_id = ensure_id(group_id, message=ERR_NO_GROUP_ID)
        user_id = ensure_id(user_id, message=ERR_NO_USER_ID)
        self._transport.post(
            f"{self._group_url(group_id)}/join-requests/{path_segment(user_id)}:{action.action}",
            action.to_payload(),
        )
        logger.info("join request %s group=%s user=%s", action.action, group_id, user_id)

    def _resolve_join_request(self, group_id: str, record: JoinRequestRecord) -> JoinRequest:
        user = self._users.get_user_by_id(record.user_id)
        return JoinRequest(
            group_id=group_id,
            user_id=record.user_id,
            display_name=user.display_name or user.username,
            created_at=parse_join_request_time(record.create_time),
            client=self._owner,
        )

    def _lookup_group_names(self, name: str) -> list[LegacyCandidate]:
        raw = self._transport.get(
            f"{self._endpoints.groups_url}/v1/groups/search/lookup",
            params={"groupName": name},
        )
        candidates = parse_group_candidates(parse_json_payload(raw))
        logger.debug("group name lookup candidates=%s", len(candidates))
        return candidates


def _identity(value: T) -> T:
    return value


def _overlay_group_name(group: Group, candidate: LegacyCandidate) -> Group:
    return replace(group, name=candidate.name)


__all__ = [
    "GroupsService",
]
