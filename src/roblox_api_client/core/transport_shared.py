"""Request building helpers for the transport."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import RobloxClientConfig

API_KEY_HEADER = "X-API-KEY"


def build_default_headers(config: RobloxClientConfig, api_key: str) -> dict[str, str]:
    return {
        API_KEY_HEADER: api_key,
        "User-Agent": config.user_agent,
        "Accept": "application/json",
    }


def build_default_timeout(config: RobloxClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_request_url(url: str, params: Mapping[str, str] | None = None) -> httpx.URL:
    """Merge ``params`` into the query string already present on ``url``.

    Caller supplied keys replace existing ones.
    """

    parsed = httpx.URL(url)
    if not params:
        return parsed
    return parsed.copy_merge_params(dict(params))


def build_request_headers(
    default_headers: Mapping[str, str],
    extra_headers: Mapping[str, str] | None,
    *,
    has_body: bool,
) -> dict[str, str]:
    headers = dict(extra_headers or {})
    headers.update(default_headers)
    if has_body:
        headers["Content-Type"] = "application/json"
    return headers


__all__ = [
    "API_KEY_HEADER",
    "build_default_headers",
    "build_default_timeout",
    "build_request_url",
    "build_request_headers",
]
