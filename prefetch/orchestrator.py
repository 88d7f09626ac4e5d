"""Prefetch orchestration - one background pass that warms the cache."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field

from loguru import logger

from app.repositories import CacheStore
from app.services.catalog import build_detail_bundle
from app.services.network import NetworkMonitor
from openlibrary_client import CatalogClient
from prefetch.helpers import extract_work_keys, run_pool
from prefetch.status import Done, Error, Idle, PrefetchStatus, Running
from settings import (
    CACHE_TTL_MS,
    DETAIL_CONCURRENCY,
    DETAILS_PER_PAGE_ESTIMATE,
    PAGE_SIZE,
    PREFETCH_GENRES,
    PREFETCH_PAGES,
)


@dataclass
class PrefetchConfig:
    """Catalog slice to warm and how."""

    genres: tuple[str, ...] = PREFETCH_GENRES
    pages_per_genre: int = PREFETCH_PAGES
    page_size: int = PAGE_SIZE
    ttl_ms: int = CACHE_TTL_MS
    concurrency: int = DETAIL_CONCURRENCY

    @property
    def total_pages(self) -> int:
        return len(self.genres) * self.pages_per_genre

    @property
    def estimated_total(self) -> int:
        """Listing pages plus ~5 details per page; only a progress denominator."""
        return self.total_pages + self.total_pages * DETAILS_PER_PAGE_ESTIMATE


@dataclass
class _RunState:
    total: int
    done: int = 0
    pages: int = 0
    details: int = 0
    work_keys: dict[str, None] = field(default_factory=dict)


class PrefetchOrchestrator:
    """Warms listing pages and work details without overlapping runs."""

    def __init__(
        self,
        store: CacheStore,
        client: CatalogClient,
        network: NetworkMonitor,
        config: PrefetchConfig | None = None,
    ):
        self._store = store
        self._client = client
        self._network = network
        self.config = config or PrefetchConfig()
        self._running = asyncio.Lock()
        self._task: asyncio.Task | None = None
        self._listeners: list[Callable[[PrefetchStatus], None]] = []
        self.status: PrefetchStatus = Idle()

    @property
    def running(self) -> bool:
        return self._running.locked()

    def subscribe(self, listener: Callable[[PrefetchStatus], None]) -> Callable[[], None]:
        """Get every status change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_status(self, status: PrefetchStatus) -> None:
        self.status = status
        for listener in list(self._listeners):
            listener(status)

    def start(self) -> asyncio.Task | None:
        """Schedule a run in the background; None if one is in flight."""
        if self.running or (self._task is not None and not self._task.done()):
            return None
        self._task = asyncio.get_running_loop().create_task(self.run_once())
        return self._task

    async def run_once(self) -> PrefetchStatus:
        """Run one warming pass; a no-op while running or offline."""
        if self._running.locked():
            logger.debug("Prefetch already running, skipping")
            return self.status
        if not self._network.is_online():
            logger.info("Offline, prefetch skipped")
            return self.status

        async with self._running:
            self._set_status(Running(progress=0, total=1, message="Opening cache"))
            try:
                await self._store.init()
                run = _RunState(total=self.config.estimated_total)
                await self._prefetch_pages(run)
                await self._prefetch_details(run)
            except Exception as e:
                logger.error("Prefetch error: {}", e)
                self._set_status(Error(cause=e))
            else:
                logger.info("Prefetch done: {} pages, {} details", run.pages, run.details)
                self._set_status(Done(pages_written=run.pages, details_written=run.details))

        return self.status

    def _bump(self, run: _RunState, message: str) -> None:
        run.done += 1
        self._set_status(Running(progress=run.done, total=run.total, message=message))

    async def _prefetch_pages(self, run: _RunState) -> None:
        """Listing pages, sequentially, genre-major then page-minor."""
        cfg = self.config
        listings = self._store.listings

        for genre in cfg.genres:
            for page in range(1, cfg.pages_per_genre + 1):
                if await listings.is_page_fresh(genre, page, cfg.ttl_ms):
                    run.pages += 1
                    self._bump(run, f"Cache OK: {genre} p{page}")
                    extract_work_keys(await listings.get_page(genre, page), run.work_keys)
                    continue

                try:
                    payload = await self._client.list_genre_page(
                        genre, limit=cfg.page_size, offset=(page - 1) * cfg.page_size
                    )
                except Exception as e:
                    logger.warning("Prefetch page failed: {} p{}: {}", genre, page, e)
                    self._bump(run, f"Failed: {genre} p{page}")
                    continue

                result = await listings.upsert_page(genre, page, payload)
                if result.ok:
                    run.pages += 1
                    self._bump(run, f"Saved: {genre} p{page}")
                else:
                    self._bump(run, f"Not saved: {genre} p{page}")
                extract_work_keys(payload, run.work_keys)

        logger.info("Prefetch pages: {} cached, {} work keys", run.pages, len(run.work_keys))

    async def _prefetch_details(self, run: _RunState) -> None:
        """Work details with a fixed pool of workers."""
        details = self._store.details

        async def fetch_detail(work_key: str) -> None:
            if await details.is_fresh(work_key, self.config.ttl_ms):
                run.details += 1
                self._bump(run, f"Detail OK: {work_key}")
                return

            try:
                bundle = await build_detail_bundle(self._client, work_key)
            except Exception as e:
                logger.warning("Prefetch detail failed: {}: {}", work_key, e)
                self._bump(run, f"Detail failed: {work_key}")
                return

            result = await details.upsert(work_key, bundle)
            if result.ok:
                run.details += 1
                self._bump(run, f"Detail saved: {work_key}")
            else:
                self._bump(run, f"Detail not saved: {work_key}")

        await run_pool(list(run.work_keys), self.config.concurrency, fetch_detail)
