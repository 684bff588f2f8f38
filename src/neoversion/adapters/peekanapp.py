"""Lookup client: Peek-An-App API.

Implementation:
- One GET to ``<api_url>/app-version`` with ``androidAppId`` or ``iOSAppId``.
- The payload carries both store versions; the caller picks one through
  `Platform`.

Notes:
- Transport errors, non-2xx answers and unexpected payloads all become
  `LookupServiceError` (original exception chained).
- No retries. A fresh client is opened per call, so the adapter is stateless.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from neoversion.adapters.http_client import build_async_client
from neoversion.core.config import NeoVersionSettings
from neoversion.core.domain.models import LookupResponse
from neoversion.core.domain.platform import Platform
from neoversion.core.errors import LookupServiceError
from neoversion.core.interfaces.lookup import StoreLookupClient

logger = logging.getLogger(__name__)


class PeekanappClient(StoreLookupClient):
    _endpoint = "app-version"

    def __init__(
        self,
        api_url: str | None = None,
        *,
        settings: NeoVersionSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or NeoVersionSettings()
        self._api_url = (api_url or self._settings.api_url).rstrip("/")
        self._transport = transport

    @property
    def api_url(self) -> str:
        return self._api_url

    async def get_app_version(self, platform: Platform, app_id: str) -> LookupResponse:
        url = f"{self._api_url}/{self._endpoint}"
        params = {platform.query_param: app_id}
        context = {"platform": platform.value, "app_id": app_id}

        logger.debug("Looking up %s app %s at %s", platform.value, app_id, url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise LookupServiceError(
                f"Lookup service answered HTTP {status_code} for {app_id}",
                status_code=status_code,
                **context,
            ) from exc
        except httpx.HTTPError as exc:
            raise LookupServiceError(
                f"Lookup service request failed for {app_id}: {exc}",
                **context,
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise LookupServiceError(
                f"Lookup service returned a non-JSON body for {app_id}",
                status_code=response.status_code,
                **context,
            ) from exc

        try:
            result = LookupResponse.model_validate(payload)
        except ValidationError as exc:
            raise LookupServiceError(
                f"Lookup service returned an unexpected payload for {app_id}",
                status_code=response.status_code,
                **context,
            ) from exc

        logger.debug(
            "Lookup for %s: appstore=%s playstore=%s",
            app_id,
            result.appstore,
            result.playstore,
        )
        return result
