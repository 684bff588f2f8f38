"""Default `NormalizationReporter`: forwards warnings to stdlib logging."""

from __future__ import annotations

import logging

from neoversion.core.errors import NormalizationWarning
from neoversion.core.interfaces.diagnostics import NormalizationReporter


class LoggingReporter(NormalizationReporter):
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("neoversion.normalization")

    def report(self, warning: NormalizationWarning) -> None:
        self._logger.warning("Warning: %s", warning)
