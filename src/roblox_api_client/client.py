"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType

from .config import RobloxClientConfig
from .core.errors import ERR_NO_API_KEY, RobloxClientClosedError, RobloxValidationError
from .core.transport import SyncTransport, SyncTransportClient
from .groups.service import GroupsService
from .users.service import UsersService


def validate_client_config(config: RobloxClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise RobloxValidationError(str(exc)) from exc


class RobloxClient:
    """Public Roblox API client.

    The API key is sent as ``X-API-KEY`` on every request. The client holds no
    mutable per-call state, so one instance can be shared between threads.
    """

    def __init__(
        self,
        api_key: str,
        *,
        config: RobloxClientConfig | None = None,
        http_client: SyncTransportClient | None = None,
        transport: SyncTransport | None = None,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        if not api_key:
            raise RobloxValidationError(ERR_NO_API_KEY)
        self._config = config or RobloxClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config, api_key, client=http_client)
        self._users = UsersService(
            self._transport,
            endpoints=self._config.endpoints,
            owner=self,
        )
        self._groups = GroupsService(
            self._transport,
            endpoints=self._config.endpoints,
            pagination=self._config.pagination,
            users=self._users,
            owner=self,
            clock=clock,
            sleeper=sleeper,
        )
        self._closed = False

    @property
    def config(self) -> RobloxClientConfig:
        return self._config

    @property
    def users(self) -> UsersService:
        self._ensure_open()
        return self._users

    @property
    def groups(self) -> GroupsService:
        self._ensure_open()
        return self._groups

    def _ensure_open(self) -> None:
        if self._closed:
            raise RobloxClientClosedError("RobloxClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "RobloxClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "RobloxClient",
]
