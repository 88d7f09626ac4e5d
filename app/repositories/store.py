"""Cache store - one facade over all record-family repositories."""

from loguru import logger

from app.models import ALL_TABLES
from app.repositories.catalog import CoverRepository, DetailRepository, ListingRepository, SearchRepository
from app.repositories.db import Database
from app.repositories.lists import ListRepository


class CacheStore:
    """Offline cache: listing pages, details, searches, covers and lists.

    All repositories share one ``Database``; any of them lazily triggers its
    initialization on first use.
    """

    def __init__(self, db: Database):
        self.db = db
        self.listings = ListingRepository(db)
        self.details = DetailRepository(db)
        self.searches = SearchRepository(db)
        self.covers = CoverRepository(db)
        self.lists = ListRepository(db)

    async def init(self) -> None:
        """Open the store; raises CacheInitError on failure."""
        await self.db.init()

    async def close(self) -> None:
        await self.db.close()

    async def stats(self) -> dict[str, int]:
        """Row count per table ({} when the store is unavailable)."""
        stats = {}
        for table in ALL_TABLES:
            row = await self.listings.fetchone(f"SELECT COUNT(*) FROM {table}")
            if row is None:
                return {}
            stats[table] = row[0]
        logger.debug("Store stats: {}", stats)
        return stats
