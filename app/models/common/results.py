"""Outcome of a best-effort cache write."""

from enum import Enum


class WriteResult(str, Enum):
    """What happened to a cache write."""

    WROTE = "wrote"
    SKIPPED = "skipped"  # store not initialized
    FAILED = "failed"

    @property
    def ok(self) -> bool:
        return self is WriteResult.WROTE
