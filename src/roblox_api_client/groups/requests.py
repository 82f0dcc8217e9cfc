"""Request bodies for group endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(slots=True, frozen=True)
class MembershipRoleUpdate:
    """PATCH body moving a member to another role.

    All three fields are resource paths, e.g. ``groups/7/memberships/1``,
    ``users/1`` and ``groups/7/roles/99``.
    """

    path: str
    user: str
    role: str

    @classmethod
    def for_member(cls, group_id: str, user_id: str, role_id: str) -> "MembershipRoleUpdate":
        return cls(
            path=f"groups/{group_id}/memberships/{user_id}",
            user=f"users/{user_id}",
            role=f"groups/{group_id}/roles/{role_id}",
        )

    def to_payload(self) -> dict[str, object]:
        return {"path": self.path, "user": self.user, "role": self.role}


@dataclass(slots=True, frozen=True)
class JoinRequestAction:
    """Accept or decline a join request. The body is always an empty object."""

    action: Literal["accept", "decline"]

    def to_payload(self) -> dict[str, object]:
        return {}


__all__ = [
    "MembershipRoleUpdate",
    "JoinRequestAction",
]
