"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the edge (lookup service payloads) and immutable
  value objects for everything handed back to callers.
- The models describe *what* a version status is, not *how* it is fetched.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

from neoversion.core.domain.platform import Platform
from neoversion.core.services.versioning import needs_update as _needs_update

UNKNOWN_STORE_URL = "unknown"

NORMALIZED_VERSION_PATTERN = r"^\d+(\.\d+)*$"


class VersionStatus(BaseModel):
    """Local and store versions of an app, plus its store page URL.

    `needs_update` is computed on every read from the two version strings;
    nothing is cached.
    """

    model_config = ConfigDict(frozen=True)

    local_version: str = Field(
        ...,
        pattern=NORMALIZED_VERSION_PATTERN,
        description="Normalized local version (e.g. '1.4.2').",
    )
    app_store_version: str = Field(
        ...,
        pattern=NORMALIZED_VERSION_PATTERN,
        description="Normalized version currently published on the store.",
    )
    app_store_url: str = Field(
        default=UNKNOWN_STORE_URL,
        min_length=1,
        description="Store page URL, or 'unknown' when the lookup service omits it.",
    )

    # Kept out of repr: reading it may raise VersionComparisonError.
    @computed_field(repr=False)  # type: ignore[prop-decorator]
    @property
    def needs_update(self) -> bool:
        return _needs_update(self.local_version, self.app_store_version)


class PlatformIdentity(BaseModel):
    """Per-platform store identifiers configured by the caller.

    Both are optional. When the active platform has none, the local
    package identifier is used instead (see `for_platform`).
    """

    model_config = ConfigDict(frozen=True)

    android_app_id: str | None = Field(
        default=None,
        description="Google Play application id (e.g. 'app.somus.social').",
    )
    ios_app_id: str | None = Field(
        default=None,
        description="App Store bundle id.",
    )

    def for_platform(self, platform: Platform, fallback: str | None) -> str | None:
        """Return the active identifier: configured id first, then `fallback`."""

        configured = self.android_app_id if platform is Platform.ANDROID else self.ios_app_id
        if configured:
            return configured
        return fallback or None


class StoreMeta(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    appstore_url: str | None = Field(
        default=None,
        alias="appstoreUrl",
        description="Canonical App Store URL.",
    )
    playstore_url: str | None = Field(
        default=None,
        alias="playstoreUrl",
        description="Canonical Google Play URL.",
    )


class LookupResponse(BaseModel):
    """Payload of the lookup service.

    Both store versions may come back regardless of the platform that was
    requested; `Platform.store_version` selects the relevant one.
    """

    model_config = ConfigDict(extra="ignore")

    appstore: str | None = Field(
        default=None,
        description="Latest version on the Apple App Store.",
    )
    playstore: str | None = Field(
        default=None,
        description="Latest version on Google Play.",
    )
    meta: StoreMeta = Field(default_factory=StoreMeta)
