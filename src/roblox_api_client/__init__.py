"""Public package exports for Roblox API client."""

from .client import RobloxClient
from .config import RobloxClientConfig

__all__ = ["RobloxClient", "RobloxClientConfig"]
