from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

import httpx

from roblox_api_client.config import PaginationConfig, RobloxClientConfig


class Response:
    def __init__(self, status_code: int, payload: object = None, *, text: str | None = None):
        self.status_code = status_code
        self.text = text if text is not None else ("" if payload is None else json.dumps(payload))
        self.closed = False

    def close(self) -> None:
        self.closed = True


@dataclass
class RecordedCall:
    method: str
    url: httpx.URL
    content: bytes | None
    headers: dict[str, str]
    at: float

    @property
    def route(self) -> str:
        return f"{self.url.host}{self.url.path}"

    def json(self) -> object:
        return json.loads(self.content) if self.content is not None else None


Step = Response | Exception


class SequencedHttpClient:
    """Answers requests with ``steps`` in order, regardless of the URL."""

    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls: list[RecordedCall] = []
        self.responses: list[Response] = []
        self.closed = False

    def request(
        self,
        method: str,
        url: httpx.URL,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        self.calls.append(RecordedCall(method, url, content, dict(headers or {}), 0.0))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        self.responses.append(step)
        return step

    def close(self) -> None:
        self.closed = True


class RoutingHttpClient:
    """Answers requests by ``(method, host + path)``.

    A route mapped to a list serves its responses in order; a route mapped to
    a single response serves it every time.
    """

    def __init__(
        self,
        routes: Mapping[tuple[str, str], Step | list[Step]],
        *,
        clock: Callable[[], float] | None = None,
    ):
        self.routes = {
            key: (list(value) if isinstance(value, list) else value)
            for key, value in routes.items()
        }
        self.calls: list[RecordedCall] = []
        self._clock = clock or (lambda: 0.0)
        self.closed = False

    def request(
        self,
        method: str,
        url: httpx.URL,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        call = RecordedCall(method, url, content, dict(headers or {}), self._clock())
        self.calls.append(call)
        key = (method, call.route)
        if key not in self.routes:
            raise AssertionError(f"Unexpected request: {method} {url}")
        route = self.routes[key]
        step = route.pop(0) if isinstance(route, list) else route
        if isinstance(step, Exception):
            raise step
        return step

    def close(self) -> None:
        self.closed = True

    def calls_to(self, method: str, route: str) -> list[RecordedCall]:
        return [call for call in self.calls if call.method == method and call.route == route]


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def build_config(*, page_interval_seconds: float = 0.2) -> RobloxClientConfig:
    cfg = RobloxClientConfig(
        pagination=PaginationConfig(page_interval_seconds=page_interval_seconds),
    )
    cfg.validate()
    return cfg
