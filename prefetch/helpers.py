"""Prefetch helper functions."""

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")

ITEM_FIELDS = ("works", "entries", "docs", "items")
KEY_FIELDS = ("work_key", "key")
WORK_KEY_MARKER = "/works/"


def find_items(payload: Any) -> list | None:
    """Items array of a listing/search document, under any known field name."""
    if not isinstance(payload, dict):
        return None
    for field in ITEM_FIELDS:
        value = payload.get(field)
        if value is not None:
            return value if isinstance(value, list) else None
    return None


def extract_work_keys(payload: Any, sink: dict[str, None]) -> int:
    """Add every "/works/..." key found in ``payload`` to ``sink``.

    ``sink`` is used as an ordered set. Returns how many keys were new.
    """
    added = 0
    for item in find_items(payload) or []:
        if not isinstance(item, dict):
            continue
        key = next((item[f] for f in KEY_FIELDS if item.get(f) is not None), None)
        if isinstance(key, str) and WORK_KEY_MARKER in key and key not in sink:
            sink[key] = None
            added += 1
    return added


async def run_pool(items: Iterable[T], concurrency: int, worker: Callable[[T], Awaitable[None]]) -> None:
    """Process ``items`` with at most ``concurrency`` workers.

    Workers pull from one shared iterator, so each item is handled exactly
    once and no worker holds more than one item at a time.
    """
    pending = iter(items)

    async def runner() -> None:
        for item in pending:
            await worker(item)

    await asyncio.gather(*(runner() for _ in range(max(1, concurrency))))
