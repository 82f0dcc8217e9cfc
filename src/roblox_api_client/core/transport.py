"""Sync HTTP transport with status evaluation."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from ..config import RobloxClientConfig
from .errors import (
    ERR_NO_API_KEY,
    RobloxClientClosedError,
    RobloxTransportError,
    RobloxValidationError,
    classify_http_error,
)
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    build_request_headers,
    build_request_url,
)

logger = logging.getLogger("roblox_api_client")


class TransportResponse(Protocol):
    status_code: int

    @property
    def text(self) -> str: ...

    def close(self) -> None: ...


class SyncTransportClient(Protocol):
    def request(
        self,
        method: str,
        url: httpx.URL,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> TransportResponse: ...

    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for the Roblox web APIs.

    Every call performs exactly one round trip. Nothing is retried: a
    non-200 response is raised as the matching ``RobloxHttpError``.
    """

    def __init__(
        self,
        config: RobloxClientConfig,
        api_key: str,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        if not api_key:
            raise RobloxValidationError(ERR_NO_API_KEY)
        self._config = config
        self._default_headers = build_default_headers(config, api_key)
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=build_default_timeout(config))

    @property
    def config(self) -> RobloxClientConfig:
        return self._config

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> str:
        """Send one request and return the raw response body."""

        if self._closed:
            raise RobloxClientClosedError("transport is already closed")

        request_url = build_request_url(url, params)
        content = json.dumps(body).encode("utf-8") if body is not None else None
        request_headers = build_request_headers(
            self._default_headers,
            headers,
            has_body=content is not None,
        )
        logger.debug("request start method=%s url=%s", method, request_url)

        try:
            response = self._client.request(
                method,
                request_url,
                content=content,
                headers=request_headers,
            )
        except Exception as exc:
            logger.error(
                "request network error method=%s url=%s error=%s",
                method,
                request_url,
                exc.__class__.__name__,
            )
            raise RobloxTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        try:
            http_status = response.status_code
            raw_body = response.text
        finally:
            response.close()

        logger.debug(
            "response received method=%s url=%s http_status=%s",
            method,
            request_url,
            http_status,
        )
        mapped_error = classify_http_error(http_status, raw_body)
        if mapped_error is not None:
            logger.error(
                "request failed method=%s url=%s http_status=%s",
                method,
                request_url,
                http_status,
            )
            raise mapped_error

        logger.info("request success method=%s url=%s", method, request_url)
        return raw_body

    def get(self, url: str, *, params: Mapping[str, str] | None = None) -> str:
        return self.request("GET", url, params=params)

    def post(
        self,
        url: str,
        body: Mapping[str, Any],
        *,
        params: Mapping[str, str] | None = None,
    ) -> str:
        return self.request("POST", url, params=params, body=body)

    def patch(self, url: str, body: Mapping[str, Any]) -> str:
        return self.request("PATCH", url, body=body)

    def delete(self, url: str) -> str:
        return self.request("DELETE", url)


__all__ = [
    "TransportResponse",
    "SyncTransportClient",
    "SyncTransport",
]
