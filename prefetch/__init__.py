"""Prefetch package - background cache warming from the catalog API."""

from prefetch.orchestrator import PrefetchConfig, PrefetchOrchestrator
from prefetch.status import Done, Error, Idle, PrefetchStatus, Running

__all__ = [
    "PrefetchConfig",
    "PrefetchOrchestrator",
    "PrefetchStatus",
    "Idle",
    "Running",
    "Done",
    "Error",
]
