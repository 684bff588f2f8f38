"""Opens store pages on the host.

Used by the presentation layer only; the core never launches anything.
"""

from __future__ import annotations

import logging
import webbrowser
from typing import Callable

from neoversion.core.domain.models import UNKNOWN_STORE_URL
from neoversion.core.errors import StoreLaunchError

logger = logging.getLogger(__name__)

UrlOpener = Callable[[str], bool]


def can_launch_url(url: str) -> bool:
    """Cheap pre-check: the sentinel and non-http(s) values are not launchable."""

    if not url or url == UNKNOWN_STORE_URL:
        return False
    return url.startswith(("https://", "http://", "market://", "itms-apps://"))


def launch_store_url(url: str, opener: UrlOpener | None = None) -> None:
    """Open `url` with `opener` (`webbrowser.open` by default).

    Raises `StoreLaunchError` when the URL is not launchable or when the
    opener reports failure.
    """

    if not can_launch_url(url):
        raise StoreLaunchError(url)

    opener = opener or webbrowser.open
    logger.debug("Opening store URL %s", url)
    if not opener(url):
        raise StoreLaunchError(url)
