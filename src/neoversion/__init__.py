"""neoversion: is the installed app behind its store version?

Public API::

    resolver = VersionStatusResolver(android_app_id="app.somus.social")
    status = await resolver.resolve("android", "1.4.2", "app.somus.social")
    if status.needs_update:
        ...
"""

from neoversion.adapters.package_info import PackageInfo, read_package_info
from neoversion.core.domain.models import (
    UNKNOWN_STORE_URL,
    LookupResponse,
    PlatformIdentity,
    StoreMeta,
    VersionStatus,
)
from neoversion.core.domain.platform import Platform
from neoversion.core.errors import (
    LookupServiceError,
    NeoVersionError,
    NormalizationWarning,
    StoreLaunchError,
    UnsupportedPlatformError,
    VersionComparisonError,
)
from neoversion.core.services.resolver import NeoVersion, VersionStatusResolver
from neoversion.core.services.versioning import FALLBACK_VERSION, needs_update, normalize_version

__all__ = [
    "FALLBACK_VERSION",
    "LookupResponse",
    "LookupServiceError",
    "NeoVersion",
    "NeoVersionError",
    "NormalizationWarning",
    "PackageInfo",
    "Platform",
    "PlatformIdentity",
    "StoreLaunchError",
    "StoreMeta",
    "UNKNOWN_STORE_URL",
    "UnsupportedPlatformError",
    "VersionComparisonError",
    "VersionStatus",
    "VersionStatusResolver",
    "needs_update",
    "normalize_version",
    "read_package_info",
]
