"""Core model helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import RobloxValidationError

if TYPE_CHECKING:
    from ..client import RobloxClient


class ClientBound:
    """Mixin for entities holding a non-owning reference to the client that fetched them."""

    __slots__ = ()

    client: "RobloxClient | None"

    def _bound_client(self) -> "RobloxClient":
        if self.client is None:
            raise RobloxValidationError(f"{type(self).__name__} is not bound to a client")
        return self.client


__all__ = [
    "ClientBound",
]
