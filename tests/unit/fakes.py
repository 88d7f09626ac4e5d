"""Test doubles: fake clock and in-process catalog client."""

import asyncio
from collections import Counter

import httpx


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeCatalogClient:
    """In-process catalog client recording calls."""

    def __init__(self, pages=None, works=None, authors=None, delay: float = 0):
        self.pages = pages or {}
        self.works = works or {}
        self.authors = authors or {}
        self.delay = delay
        self.search_docs: dict[str, list[dict]] = {}
        self.fail_pages: set = set()
        self.fail_works: set = set()
        self.fail_authors: set = set()
        self.fail_search = False
        self.calls = Counter()
        self.in_flight = 0
        self.max_in_flight = 0

    async def list_genre_page(self, genre: str, limit: int = 10, offset: int = 0) -> dict:
        self.calls["list_genre_page"] += 1
        await asyncio.sleep(self.delay)
        page = offset // limit + 1
        if (genre, page) in self.fail_pages:
            raise httpx.ConnectError("catalog down")
        return self.pages.get((genre, page), {"works": []})

    async def get_work_detail(self, work_key: str) -> dict:
        self.calls["get_work_detail"] += 1
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if work_key in self.fail_works:
                raise httpx.ReadTimeout("slow work")
            return self.works[work_key]
        finally:
            self.in_flight -= 1

    async def get_author_name(self, author_key: str) -> str:
        self.calls["get_author_name"] += 1
        if author_key in self.fail_authors:
            raise httpx.ConnectError("author down")
        return self.authors[author_key]

    async def search(self, query: str, page: int = 1) -> dict:
        self.calls["search"] += 1
        if self.fail_search:
            raise httpx.ConnectError("search down")
        return {"numFound": len(self.search_docs.get(query, [])), "docs": self.search_docs.get(query, [])}


def work(key: str, *author_keys: str, subjects=None) -> dict:
    return {
        "key": key,
        "title": f"Title of {key}",
        "authors": [{"author": {"key": a}, "type": {"key": "/type/author_role"}} for a in author_keys],
        "subjects": subjects or [],
    }
