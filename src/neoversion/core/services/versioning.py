"""Version normalization and comparison.

A *normalized* version is one or more non-negative integers joined by dots
(``1``, ``1.4``, ``1.4.2``). Store and package versions come in every shape
(``v1.4.2-beta+3``, ``1.4.2 (42)``, ``None``), so both sides go through
`normalize_version` before `needs_update` looks at them.
"""

from __future__ import annotations

import re
import warnings
from typing import TYPE_CHECKING

from neoversion.core.errors import NormalizationWarning, VersionComparisonError

if TYPE_CHECKING:
    from neoversion.core.interfaces.diagnostics import NormalizationReporter

FALLBACK_VERSION = "0.0.0"

_VERSION_PATTERN = re.compile(r"\d+(?:\.\d+)*")


def normalize_version(raw: str | None, reporter: NormalizationReporter | None = None) -> str:
    """Extract the first dotted-numeric run of `raw`.

    Falls back to ``"0.0.0"`` when `raw` is ``None`` or holds no digits. The
    fallback is reported as a `NormalizationWarning` to `reporter`, or through
    `warnings.warn` when no reporter is given. Never raises.
    """

    if raw is None:
        _report(NormalizationWarning(raw, "raw version is null"), reporter)
        return FALLBACK_VERSION

    match = _VERSION_PATTERN.search(raw)
    if match is None:
        _report(NormalizationWarning(raw, f"raw version {raw} is invalid"), reporter)
        return FALLBACK_VERSION

    return match.group(0)


def _report(warning: NormalizationWarning, reporter: NormalizationReporter | None) -> None:
    if reporter is None:
        warnings.warn(warning, stacklevel=3)
        return
    reporter.report(warning)


def parse_version(version: str) -> list[int]:
    """Split a normalized version into its integer components."""

    if not _VERSION_PATTERN.fullmatch(version):
        raise VersionComparisonError(f"Not a normalized version: {version!r}")
    return [int(part) for part in version.split(".")]


def needs_update(local_version: str, store_version: str) -> bool:
    """Return True when `store_version` is ahead of `local_version`.

    Components are compared left to right, up to the length of the store
    version, stopping at the first difference. Extra local components are
    ignored, so ``1.2.0.5`` vs ``1.2.0`` is "up to date".

    A local version that runs out of components before a difference is found
    (``1.0`` vs ``1.0.1``) raises `VersionComparisonError` instead of guessing.
    """

    local = parse_version(local_version)
    store = parse_version(store_version)

    for index, store_part in enumerate(store):
        if index >= len(local):
            raise VersionComparisonError(
                f"Local version {local_version!r} has fewer components than "
                f"store version {store_version!r}"
            )
        if local[index] < store_part:
            return True
        if local[index] > store_part:
            return False

    return False
