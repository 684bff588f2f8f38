"""Local package metadata.

Reads the installed distribution through `importlib.metadata`, so a Python
app can ask "which version of me is running?" the same way a mobile app
asks its platform for its package info.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import metadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageInfo:
    """Identifier and raw version of the running app.

    `version` stays raw (``None`` when unknown); normalization happens in
    the resolver.
    """

    package_name: str
    version: str | None = None


def read_package_info(distribution: str) -> PackageInfo:
    """Look up `distribution` among the installed packages.

    A missing distribution is not an error here: the version is left as
    ``None`` and later falls back to ``"0.0.0"``.
    """

    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        logger.debug("Distribution %s is not installed", distribution)
        version = None
    return PackageInfo(package_name=distribution, version=version)
