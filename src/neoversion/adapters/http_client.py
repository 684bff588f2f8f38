"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every lookup request.
- Eases testing: a `transport` (e.g. `httpx.MockTransport`) can be injected.
"""

from __future__ import annotations

import httpx

from neoversion.core.config import NeoVersionSettings


def build_async_client(
    settings: NeoVersionSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the library defaults.

    Why a builder:
    - Centralizes timeouts/headers so every call behaves the same.
    - The caller owns the client; use it as an async context manager.
    """

    settings = settings or NeoVersionSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
