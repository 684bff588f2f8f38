"""Error taxonomy of neoversion.

Rules:
- The core never swallows network or platform errors.
- Only normalization irregularities are tolerated: they are *reported*
  (`NormalizationWarning`) and resolved to a safe default.
- Nothing here retries.
"""

from __future__ import annotations


class NeoVersionError(Exception):
    """Base class for every error raised by neoversion."""


class UnsupportedPlatformError(NeoVersionError):
    """The runtime platform is neither Android nor iOS."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Unsupported platform {platform}")
        self.platform = platform


class LookupServiceError(NeoVersionError):
    """The store lookup service could not produce a usable answer.

    Covers transport failures (DNS, TLS, timeouts), non-2xx responses and
    payloads that are not valid JSON or do not match the expected shape.
    """

    def __init__(
        self,
        message: str,
        *,
        platform: str | None = None,
        app_id: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.platform = platform
        self.app_id = app_id
        self.status_code = status_code


class VersionComparisonError(NeoVersionError, ValueError):
    """Two versions cannot be compared component by component."""


class StoreLaunchError(NeoVersionError):
    """The host environment could not open the store URL."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Could not launch app store URL: {url}")
        self.url = url


class NormalizationWarning(UserWarning):
    """A raw version string could not be normalized.

    Never raised by the core; instances are handed to a
    `NormalizationReporter` and the version falls back to ``"0.0.0"``.
    """

    def __init__(self, raw: str | None, reason: str) -> None:
        super().__init__(f"failed to normalize version string: {reason}")
        self.raw = raw
        self.reason = reason
