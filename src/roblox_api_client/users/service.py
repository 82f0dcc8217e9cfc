"""User accessors."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from ..config import EndpointConfig
from ..core.errors import ERR_INVALID_USERNAME, ERR_NO_USER_ID, ERR_NO_USERNAME
from ..core.resolution import LegacyCandidate, resolve_by_key
from ..core.response_parsing import parse_json_payload
from ..core.transport import SyncTransport
from ..core.validators import ensure_id, path_segment
from .models import User
from .parser import parse_thumbnail_operation, parse_user, parse_username_candidates
from .requests import UsernameLookupRequest

if TYPE_CHECKING:
    from ..client import RobloxClient

logger = logging.getLogger("roblox_api_client")


class UsersService:
    """Accessors for Open Cloud users and the legacy username lookup."""

    def __init__(
        self,
        transport: SyncTransport,
        *,
        endpoints: EndpointConfig,
        owner: "RobloxClient | None" = None,
    ) -> None:
        self._transport = transport
        self._endpoints = endpoints
        self._owner = owner

    def _user_url(self, user_id: str) -> str:
        return f"{self._endpoints.cloud_api_url}users/{path_segment(user_id)}"

    def get_user_by_id(self, user_id: str) -> User:
        user_id = ensure_id(user_id, message=ERR_NO_USER_ID)
        payload = parse_json_payload(self._transport.get(self._user_url(user_id)))
        return parse_user(payload, client=self._owner)

    def get_user_by_username(self, username: str) -> User:
        """Look a user up by exact (case-sensitive) username.

        Relies on the legacy ``users.roblox.com/v1/usernames/users`` endpoint.
        """

        return resolve_by_key(
            username,
            empty_message=ERR_NO_USERNAME,
            invalid_message=ERR_INVALID_USERNAME,
            lookup_candidates=self._lookup_usernames,
            fetch_canonical=self.get_user_by_id,
            overlay=_overlay_username,
        )

    def generate_thumbnail(
        self,
        user_id: str,
        *,
        size: int = 420,
        image_format: str = "PNG",
        shape: str = "ROUND",
    ) -> str:
        user_id = ensure_id(user_id, message=ERR_NO_USER_ID)
        raw = self._transport.get(
            f"{self._user_url(user_id)}:generateThumbnail",
            params={"size": str(size), "format": image_format, "shape": shape},
        )
        return parse_thumbnail_operation(parse_json_payload(raw))

    def _lookup_usernames(self, username: str) -> list[LegacyCandidate]:
        body = UsernameLookupRequest(usernames=(username,))
        raw = self._transport.post(
            f"{self._endpoints.users_url}/v1/usernames/users",
            body.to_payload(),
        )
        candidates = parse_username_candidates(parse_json_payload(raw))
        logger.debug("username lookup candidates=%s", len(candidates))
        return candidates


def _overlay_username(user: User, candidate: LegacyCandidate) -> User:
    return replace(user, username=candidate.name)


__all__ = [
    "UsersService",
]
