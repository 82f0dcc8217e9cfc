"""Error types and status mapping."""

from __future__ import annotations

ERR_NO_API_KEY = "no api key provided"
ERR_NO_USER_ID = "no user id provided"
ERR_NO_USERNAME = "no username provided"
ERR_INVALID_USERNAME = "invalid username provided"
ERR_NO_GROUP_ID = "no group id provided"
ERR_NO_GROUP_NAME = "no group name provided"
ERR_INVALID_GROUP_NAME = "invalid group name provided"
ERR_NO_ROLE_ID = "no role id provided"
ERR_USER_HAS_NO_ROLE = "this user has no role in the group"

# See https://create.roblox.com/docs/cloud/reference/errors
HTTP_STATUS_DESCRIPTIONS: dict[int, str] = {
    200: "response ok",
    400: "invalid argument passed",
    403: "missing permission scopes",
    404: "resource not found",
    409: "operation aborted",
    429: "too many requests",
    499: "system terminated request",
    500: "the service replied with internal server error",
    503: "the service is currently unavailable",
}


class RobloxApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        body: str | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.body = body
        self.cause = cause


class RobloxTransportError(RobloxApiError):
    """Network/transport-level failure."""


class RobloxClientClosedError(RobloxApiError):
    """Raised when client is used after close."""


class RobloxValidationError(RobloxApiError):
    """Invalid input detected before any request is sent."""


class RobloxInvalidKeyError(RobloxValidationError):
    """Lookup key did not resolve to an entity with exactly that name."""


class RobloxDecodeError(RobloxApiError):
    """Response body is not valid JSON or has an unexpected shape."""


class RobloxUserHasNoRoleError(RobloxApiError):
    """User holds no role in the requested group."""


class RobloxHttpError(RobloxApiError):
    """Non-200 HTTP response."""


class RobloxInvalidArgumentError(RobloxHttpError):
    """400"""


class RobloxPermissionDeniedError(RobloxHttpError):
    """403"""


class RobloxNotFoundError(RobloxHttpError):
    """404"""


class RobloxAbortedError(RobloxHttpError):
    """409"""


class RobloxRateLimitedError(RobloxHttpError):
    """429"""


class RobloxRequestTerminatedError(RobloxHttpError):
    """499"""


class RobloxInternalServerError(RobloxHttpError):
    """500"""


class RobloxServiceUnavailableError(RobloxHttpError):
    """503"""


_HTTP_ERROR_TYPES: dict[int, type[RobloxHttpError]] = {
    400: RobloxInvalidArgumentError,
    403: RobloxPermissionDeniedError,
    404: RobloxNotFoundError,
    409: RobloxAbortedError,
    429: RobloxRateLimitedError,
    499: RobloxRequestTerminatedError,
    500: RobloxInternalServerError,
    503: RobloxServiceUnavailableError,
}


def classify_http_error(http_status: int, body: str | None = None) -> RobloxHttpError | None:
    """Map an HTTP status code to a domain exception.

    Only the status code is inspected. The body is attached for diagnostics
    and used as the message detail for codes outside the known table.
    """

    if http_status == 200:
        return None

    error_type = _HTTP_ERROR_TYPES.get(http_status)
    if error_type is None:
        detail = (body or "").strip() or "unexpected status"
        return RobloxHttpError(
            f"http error {http_status}: {detail}",
            http_status=http_status,
            body=body,
        )
    return error_type(
        f"http error {http_status}: {HTTP_STATUS_DESCRIPTIONS[http_status]}",
        http_status=http_status,
        body=body,
    )


__all__ = [
    "ERR_NO_API_KEY",
    "ERR_NO_USER_ID",
    "ERR_NO_USERNAME",
    "ERR_INVALID_USERNAME",
    "ERR_NO_GROUP_ID",
    "ERR_NO_GROUP_NAME",
    "ERR_INVALID_GROUP_NAME",
    "ERR_NO_ROLE_ID",
    "ERR_USER_HAS_NO_ROLE",
    "HTTP_STATUS_DESCRIPTIONS",
    "RobloxApiError",
    "RobloxTransportError",
    "RobloxClientClosedError",
    "RobloxValidationError",
    "RobloxInvalidKeyError",
    "RobloxDecodeError",
    "RobloxUserHasNoRoleError",
    "RobloxHttpError",
    "RobloxInvalidArgumentError",
    "RobloxPermissionDeniedError",
    "RobloxNotFoundError",
    "RobloxAbortedError",
    "RobloxRateLimitedError",
    "RobloxRequestTerminatedError",
    "RobloxInternalServerError",
    "RobloxServiceUnavailableError",
    "classify_http_error",
]
