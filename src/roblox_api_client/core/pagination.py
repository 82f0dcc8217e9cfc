"""Pagination helpers based on nextPageToken.

Termination depends entirely on the server eventually returning an empty
``nextPageToken``. Collecting a very large collection therefore runs for a
long time (one page per ``page_interval_seconds`` at best); callers who need
a deadline must impose it around the whole call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import TypeVar

from .errors import RobloxApiError, RobloxDecodeError
from .response_parsing import JsonObject, parse_json_payload
from .throttling import MinIntervalThrottler
from .transport import SyncTransport

logger = logging.getLogger("roblox_api_client")

R = TypeVar("R")
T = TypeVar("T")


def parse_next_page_token(payload: Mapping[str, object]) -> str | None:
    raw = payload.get("nextPageToken")
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise RobloxDecodeError("nextPageToken must be a string")
    if raw == "":
        return None
    return raw


def iterate_pages(
    fetch_page: Callable[[str | None], JsonObject],
    *,
    throttler: MinIntervalThrottler,
    extract_cursor: Callable[[JsonObject], str | None] = parse_next_page_token,
) -> Iterator[JsonObject]:
    """Yield decoded pages, waiting one throttle interval before each fetch."""

    throttler.start()
    page_token: str | None = None
    while True:
        throttler.wait()
        payload = fetch_page(page_token)
        yield payload

        page_token = extract_cursor(payload)
        if page_token is None:
            return


class Paginator:
    """Assemble a cursor paginated collection into one list."""

    def __init__(
        self,
        transport: SyncTransport,
        *,
        interval_seconds: float,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        self._transport = transport
        self._interval_seconds = interval_seconds
        self._clock = clock
        self._sleep = sleeper

    def collect(
        self,
        url: str,
        *,
        page_size: int,
        extract_items: Callable[[JsonObject], list[R]],
        map_item: Callable[[R], T],
        extract_cursor: Callable[[JsonObject], str | None] = parse_next_page_token,
    ) -> list[T]:
        """Fetch every page of ``url`` and map its items.

        ``extract_items`` decodes the raw page; its errors propagate.

        An item whose ``map_item`` raises ``RobloxApiError`` is skipped and
        logged; the listing carries on. Any error while fetching or decoding a
        page aborts the whole call, including 429 responses.
        """

        throttler = MinIntervalThrottler(
            self._interval_seconds,
            clock=self._clock,
            sleeper=self._sleep,
        )

        def fetch_page(page_token: str | None) -> JsonObject:
            params = {"maxPageSize": str(page_size)}
            if page_token:
                params["pageToken"] = page_token
            return parse_json_payload(self._transport.get(url, params=params))

        results: list[T] = []
        pages = 0
        skipped = 0
        for payload in iterate_pages(fetch_page, throttler=throttler, extract_cursor=extract_cursor):
            pages += 1
            items = extract_items(payload)
            logger.debug("page received url=%s page=%s items=%s", url, pages, len(items))
            for item in items:
                try:
                    results.append(map_item(item))
                except RobloxApiError as exc:
                    skipped += 1
                    logger.warning(
                        "skipping item url=%s page=%s error=%s",
                        url,
                        pages,
                        exc,
                    )

        logger.info(
            "pagination complete url=%s pages=%s items=%s skipped=%s",
            url,
            pages,
            len(results),
            skipped,
        )
        return results


__all__ = [
    "parse_next_page_token",
    "iterate_pages",
    "Paginator",
]
