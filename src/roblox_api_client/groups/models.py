"""Group domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from ..core.models import ClientBound
from ..users.models import User

if TYPE_CHECKING:
    from ..client import RobloxClient


@dataclass(slots=True, frozen=True)
class Role(ClientBound):
    """Group role in the Open Cloud shape (``displayName``/``rank``)."""

    id: str
    group_id: str
    name: str
    rank: int
    description: str | None = None
    member_count: int = 0
    client: "RobloxClient | None" = field(default=None, repr=False, compare=False)

    def get_group(self) -> "Group":
        return self._bound_client().groups.get_group_by_id(self.group_id)


@dataclass(slots=True, frozen=True)
class LegacyRole:
    """Group role in the legacy groups API shape (``name``/``rank``)."""

    id: str
    name: str
    rank: int


@dataclass(slots=True, frozen=True)
class Membership(ClientBound):
    """A member of a group paired with the role they hold there."""

    group_id: str
    user: User
    role: Role
    client: "RobloxClient | None" = field(default=None, repr=False, compare=False)

    def update_role(self, role_id: str) -> None:
        self._bound_client().groups.update_member_role(self.group_id, self.user.id, role_id)

    def remove(self) -> None:
        self._bound_client().groups.remove_member(self.group_id, self.user.id)


@dataclass(slots=True, frozen=True)
class JoinRequest(ClientBound):
    """Pending request to join a group.

    ``created_at`` is ``None`` when the server sent a timestamp that is not
    valid RFC 3339.
    """

    group_id: str
    user_id: str
    display_name: str | None
    created_at: datetime | None
    client: "RobloxClient | None" = field(default=None, repr=False, compare=False)

    def accept(self) -> None:
        self._bound_client().groups.accept_join_request(self.group_id, self.user_id)

    def decline(self) -> None:
        self._bound_client().groups.decline_join_request(self.group_id, self.user_id)


@dataclass(slots=True, frozen=True)
class Group(ClientBound):
    """A Roblox group as returned by the Open Cloud groups resource."""

    id: str
    name: str
    description: str | None = None
    owner_id: str | None = None
    member_count: int = 0
    public_entry: bool = False
    locked: bool = False
    created_at: str | None = None
    client: "RobloxClient | None" = field(default=None, repr=False, compare=False)

    def get_icon(self, *, large: bool = False, circular: bool = False) -> str:
        return self._bound_client().groups.get_group_icon(self.id, large=large, circular=circular)

    def get_member_ids(self) -> list[str]:
        return self._bound_client().groups.list_member_ids(self.id)

    def get_memberships(self) -> list[Membership]:
        return self._bound_client().groups.list_memberships(self.id)

    def get_roles(self) -> list[Role]:
        return self._bound_client().groups.list_roles(self.id)

    def get_role(self, role_id: str) -> Role:
        return self._bound_client().groups.get_role(self.id, role_id)

    def get_user_role(self, user_id: str) -> LegacyRole:
        return self._bound_client().groups.get_user_role(self.id, user_id)

    def update_member_role(self, user_id: str, role_id: str) -> None:
        self._bound_client().groups.update_member_role(self.id, user_id, role_id)

    def remove_member(self, user_id: str) -> None:
        self._bound_client().groups.remove_member(self.id, user_id)

    def get_join_requests(self) -> list[JoinRequest]:
        return self._bound_client().groups.list_join_requests(self.id)

    def accept_join_request(self, user_id: str) -> None:
        self._bound_client().groups.accept_join_request(self.id, user_id)

    def decline_join_request(self, user_id: str) -> None:
        self._bound_client().groups.decline_join_request(self.id, user_id)


__all__ = [
    "Role",
    "LegacyRole",
    "Membership",
    "JoinRequest",
    "Group",
]
