"""Supported store platforms.

Every Android/iOS branch of the library lives here, once: which query
parameter the lookup service expects, which response field carries the
version and which one carries the store URL.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

from neoversion.core.errors import UnsupportedPlatformError

if TYPE_CHECKING:
    from neoversion.core.domain.models import LookupResponse


class Platform(str, Enum):
    """A platform with an app store known to the lookup service."""

    ANDROID = "android"
    IOS = "ios"

    @classmethod
    def from_runtime(cls, name: str | None = None) -> "Platform":
        """Map a runtime platform name (``sys.platform`` by default).

        Raises `UnsupportedPlatformError` for anything that is not Android
        or iOS. There is no fallback platform.
        """

        raw = sys.platform if name is None else name
        key = raw.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise UnsupportedPlatformError(raw)

    @classmethod
    def coerce(cls, value: "Platform | str | None") -> "Platform":
        if isinstance(value, cls):
            return value
        return cls.from_runtime(value)

    @property
    def query_param(self) -> str:
        """Query parameter used by the lookup service for the app id."""

        return "androidAppId" if self is Platform.ANDROID else "iOSAppId"

    @property
    def store_name(self) -> str:
        return "Google Play" if self is Platform.ANDROID else "App Store"

    def store_version(self, response: "LookupResponse") -> str | None:
        """Pick the version published on this platform's store."""

        if self is Platform.ANDROID:
            return response.playstore
        return response.appstore

    def store_url(self, response: "LookupResponse") -> str | None:
        """Pick this platform's store URL, ``None`` when the service omits it."""

        if self is Platform.ANDROID:
            return response.meta.playstore_url
        return response.meta.appstore_url
