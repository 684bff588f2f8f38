"""Version status resolution.

This module ties the pieces together: pick the platform, pick the app id,
ask the lookup service, normalize both versions and hand back an immutable
`VersionStatus`. Side effects (printing, prompting, opening URLs) stay out
of here so the flow can be reused from the CLI, from an app or from tests.
"""

from __future__ import annotations

import logging

from neoversion.adapters.diagnostics import LoggingReporter
from neoversion.adapters.package_info import PackageInfo, read_package_info
from neoversion.adapters.peekanapp import PeekanappClient
from neoversion.core.config import NeoVersionSettings
from neoversion.core.domain.models import UNKNOWN_STORE_URL, PlatformIdentity, VersionStatus
from neoversion.core.domain.platform import Platform
from neoversion.core.interfaces.diagnostics import NormalizationReporter
from neoversion.core.interfaces.lookup import StoreLookupClient
from neoversion.core.services.versioning import normalize_version

logger = logging.getLogger(__name__)


class VersionStatusResolver:
    """Produces a `VersionStatus` for one app.

    Configuration is fixed at construction time: the per-platform app ids
    (explicit arguments win over `NeoVersionSettings`) and the lookup
    service URL. Instances hold no other state, so concurrent `resolve`
    calls do not interact.
    """

    def __init__(
        self,
        *,
        android_app_id: str | None = None,
        ios_app_id: str | None = None,
        api_url: str | None = None,
        lookup_client: StoreLookupClient | None = None,
        reporter: NormalizationReporter | None = None,
        settings: NeoVersionSettings | None = None,
    ) -> None:
        settings = settings or NeoVersionSettings()
        self._identity = PlatformIdentity(
            android_app_id=android_app_id or settings.android_app_id,
            ios_app_id=ios_app_id or settings.ios_app_id,
        )
        self._api_url = (api_url or settings.api_url).rstrip("/")
        self._lookup = lookup_client or PeekanappClient(self._api_url, settings=settings)
        self._reporter = reporter or LoggingReporter()

    @property
    def identity(self) -> PlatformIdentity:
        return self._identity

    @property
    def api_url(self) -> str:
        return self._api_url

    async def resolve(
        self,
        platform: Platform | str | None,
        local_version_raw: str | None,
        local_package_identifier: str | None = None,
    ) -> VersionStatus:
        """Fetch the store version and compare it with the local one.

        * `platform` is a `Platform` or a runtime name (``sys.platform`` when
          ``None``). Anything but Android/iOS raises `UnsupportedPlatformError`
          before any request is made.
        * `local_version_raw` is the version string as the app reports it.
        * `local_package_identifier` is the app id used when none is
          configured for the platform.

        Lookup failures (`LookupServiceError`) propagate unchanged.
        """

        target = Platform.coerce(platform)

        app_id = self._identity.for_platform(target, local_package_identifier)
        if not app_id:
            raise ValueError(
                f"No {target.value} app id configured and no local package identifier given"
            )

        response = await self._lookup.get_app_version(target, app_id)

        status = VersionStatus(
            local_version=normalize_version(local_version_raw, self._reporter),
            app_store_version=normalize_version(target.store_version(response), self._reporter),
            app_store_url=target.store_url(response) or UNKNOWN_STORE_URL,
        )
        logger.debug(
            "Resolved %s app %s: local=%s store=%s",
            target.value,
            app_id,
            status.local_version,
            status.app_store_version,
        )
        return status


class NeoVersion(VersionStatusResolver):
    """Resolver bound to the running app.

    `package` is either a `PackageInfo` or the name of an installed
    distribution, read through `importlib.metadata` at each call.
    """

    def __init__(
        self,
        package: PackageInfo | str,
        *,
        runtime_platform: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._package = package
        self._runtime_platform = runtime_platform

    @classmethod
    def with_api_url(cls, package: PackageInfo | str, url: str, **kwargs) -> "NeoVersion":
        """Build an instance pointed at a different lookup service URL."""

        return cls(package, api_url=url, **kwargs)

    def package_info(self) -> PackageInfo:
        if isinstance(self._package, PackageInfo):
            return self._package
        return read_package_info(self._package)

    async def get_version_status(self) -> VersionStatus:
        """Version status of the running app on the current platform.

        Only Android and iOS are supported; any other runtime raises
        `UnsupportedPlatformError`.
        """

        platform = Platform.from_runtime(self._runtime_platform)
        info = self.package_info()
        return await self.resolve(platform, info.version, info.package_name)
