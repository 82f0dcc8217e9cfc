"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_MEMBERSHIP_PAGE_SIZE = 100
MAX_ROLE_PAGE_SIZE = 20


@dataclass(slots=True, frozen=True)
class EndpointConfig:
    """Base URLs for the Open Cloud API and the legacy hosts."""

    cloud_base_url: str = "https://apis.roblox.com/cloud/v"
    cloud_api_version: str = "2"
    users_url: str = "https://users.roblox.com"
    groups_url: str = "https://groups.roblox.com"
    thumbnails_url: str = "https://thumbnails.roblox.com"

    @property
    def cloud_api_url(self) -> str:
        return f"{self.cloud_base_url}{self.cloud_api_version}/"

    def validate(self) -> None:
        for field_name in (
            "cloud_base_url",
            "cloud_api_version",
            "users_url",
            "groups_url",
            "thumbnails_url",
        ):
            if not getattr(self, field_name):
                raise ValueError(f"endpoints.{field_name} must not be empty")


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class PaginationConfig:
    """Paginated listing settings.

    The defaults match the Open Cloud quota of 100 members per page and
    300 requests per minute.
    """

    page_interval_seconds: float = 0.2
    membership_page_size: int = MAX_MEMBERSHIP_PAGE_SIZE
    role_page_size: int = MAX_ROLE_PAGE_SIZE

    def validate(self) -> None:
        if self.page_interval_seconds < 0:
            raise ValueError("pagination.page_interval_seconds must be >= 0")
        if not 1 <= self.membership_page_size <= MAX_MEMBERSHIP_PAGE_SIZE:
            raise ValueError(
                f"pagination.membership_page_size must be between 1 and {MAX_MEMBERSHIP_PAGE_SIZE}"
            )
        if not 1 <= self.role_page_size <= MAX_ROLE_PAGE_SIZE:
            raise ValueError(f"pagination.role_page_size must be between 1 and {MAX_ROLE_PAGE_SIZE}")


@dataclass(slots=True, frozen=True)
class RobloxClientConfig:
    """Runtime configuration for Roblox client."""

    user_agent: str = "roblox-api-client/0.1.0"

    endpoints: EndpointConfig = field(default_factory=EndpointConfig)
    transport: TransportConfig = field(default_factory=TransportConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)

    def validate(self) -> None:
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        self.endpoints.validate()
        self.transport.validate()
        self.pagination.validate()


__all__ = [
    "MAX_MEMBERSHIP_PAGE_SIZE",
    "MAX_ROLE_PAGE_SIZE",
    "EndpointConfig",
    "TransportConfig",
    "PaginationConfig",
    "RobloxClientConfig",
]
