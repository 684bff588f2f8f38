"""Contract for non-fatal diagnostics emitted by the core."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from neoversion.core.errors import NormalizationWarning


@runtime_checkable
class NormalizationReporter(Protocol):
    """Receives normalization irregularities. Must not raise."""

    def report(self, warning: NormalizationWarning) -> None:
        ...
