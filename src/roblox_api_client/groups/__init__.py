"""Groups resource package."""

from .models import Group, JoinRequest, LegacyRole, Membership, Role
from .requests import JoinRequestAction, MembershipRoleUpdate

__all__ = [
    "Group",
    "Role",
    "LegacyRole",
    "Membership",
    "JoinRequest",
    "MembershipRoleUpdate",
    "JoinRequestAction",
]
