"""Name to entity resolution across the legacy and Open Cloud APIs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from .errors import RobloxInvalidKeyError, RobloxValidationError

logger = logging.getLogger("roblox_api_client")

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class LegacyCandidate:
    """Lightweight search hit returned by a legacy lookup endpoint."""

    id: str
    name: str


def resolve_by_key(
    key: str,
    *,
    empty_message: str,
    invalid_message: str,
    lookup_candidates: Callable[[str], Sequence[LegacyCandidate]],
    fetch_canonical: Callable[[str], T],
    overlay: Callable[[T, LegacyCandidate], T],
) -> T:
    """Resolve ``key`` through a legacy lookup, then fetch the canonical record.

    Only the first candidate is compared, case-sensitively, against ``key``.
    A matching entity listed later by the legacy search is not found.
    """

    if not key:
        raise RobloxValidationError(empty_message)

    candidates = lookup_candidates(key)
    if not candidates or candidates[0].name != key:
        logger.debug("legacy lookup did not match key=%s candidates=%s", key, len(candidates))
        raise RobloxInvalidKeyError(invalid_message)

    candidate = candidates[0]
    canonical = fetch_canonical(candidate.id)
    return overlay(canonical, candidate)


__all__ = [
    "LegacyCandidate",
    "resolve_by_key",
]
