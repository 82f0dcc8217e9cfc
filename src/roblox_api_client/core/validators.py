"""Argument validation applied before any request is sent."""

from __future__ import annotations

from urllib.parse import quote

from .errors import RobloxValidationError


def ensure_id(value: str | int | None, *, message: str) -> str:
    """Return ``value`` as a canonical identifier string or raise ``message``."""

    if value is None or isinstance(value, bool):
        raise RobloxValidationError(message)
    text = str(value).strip()
    if text == "":
        raise RobloxValidationError(message)
    return text


def path_segment(value: str) -> str:
    return quote(value, safe="")


__all__ = [
    "ensure_id",
    "path_segment",
]
