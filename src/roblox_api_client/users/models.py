"""User domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..core.models import ClientBound

if TYPE_CHECKING:
    from ..client import RobloxClient
    from ..groups.models import LegacyRole


@dataclass(slots=True, frozen=True)
class User(ClientBound):
    """A Roblox account as returned by the Open Cloud users resource."""

    id: str
    username: str
    display_name: str | None = None
    premium: bool = False
    locale: str | None = None
    created_at: str | None = None
    about: str | None = None
    client: "RobloxClient | None" = field(default=None, repr=False, compare=False)

    def get_thumbnail(
        self,
        *,
        size: int = 420,
        image_format: str = "PNG",
        shape: str = "ROUND",
    ) -> str:
        return self._bound_client().users.generate_thumbnail(
            self.id,
            size=size,
            image_format=image_format,
            shape=shape,
        )

    def get_group_role(self, group_id: str) -> "LegacyRole":
        return self._bound_client().groups.get_user_role(group_id, self.id)


__all__ = [
    "User",
]
