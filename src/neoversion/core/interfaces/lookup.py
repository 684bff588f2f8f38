"""Contract of the store lookup service client.

Why Protocol:
- The resolver only needs "give me the store data for this app"; any object
  with a matching coroutine works (HTTP client, fixture, cache wrapper).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from neoversion.core.domain.models import LookupResponse
from neoversion.core.domain.platform import Platform


@runtime_checkable
class StoreLookupClient(Protocol):
    """Minimal contract for a lookup client.

    Design rules:
    - `get_app_version` is async because it performs network I/O.
    - Exactly one request per call, no retries.
    - Every failure surfaces as `LookupServiceError`.
    """

    async def get_app_version(self, platform: Platform, app_id: str) -> LookupResponse:
        """Fetch the store metadata of `app_id` on `platform`."""

        ...
