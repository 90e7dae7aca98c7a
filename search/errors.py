# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-18
# Description: errors.py
# -----------------------------------------------------------------------------
from typing import Sequence

from records.types import RecordKind


class SearchBackendError(RuntimeError):
    """A single kind's lookup failed (store error, bad row, or timeout)."""

    def __init__(self, kind: RecordKind, message: str) -> None:
        super().__init__(f"{kind.value} search failed: {message}")
        self.kind = kind
        self.reason = message


class SearchUnavailableError(RuntimeError):
    """Every kind's lookup failed; there is nothing to show."""

    def __init__(self, failures: Sequence[SearchBackendError]) -> None:
        super().__init__("Search is currently unavailable")
        self.failures = list(failures)
