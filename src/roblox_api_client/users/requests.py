"""Request bodies for user endpoints."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class UsernameLookupRequest:
    usernames: tuple[str, ...]
    exclude_banned_users: bool = False

    def to_payload(self) -> dict[str, object]:
        return {
            "usernames": list(self.usernames),
            "excludeBannedUsers": self.exclude_banned_users,
        }


__all__ = [
    "UsernameLookupRequest",
]
