"""Users resource package."""

from .models import User
from .requests import UsernameLookupRequest

__all__ = [
    "User",
    "UsernameLookupRequest",
]
