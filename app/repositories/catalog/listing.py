"""Listing repository - cached genre pages."""

from typing import Any

from loguru import logger

from app.models import WriteResult
from app.repositories.base import BaseRepository


class ListingRepository(BaseRepository):
    """Repository for cached genre listing pages."""

    async def upsert_page(self, genre: str, page: int, payload: Any) -> WriteResult:
        """Save one listing page (last writer wins)."""
        result = await self.write(
            """
            INSERT INTO cached_listing_page (genre, page, payload, updated_at)
            VALUES (?, ?, ?, ?)
            ON CONFLICT (genre, page) DO UPDATE SET
                payload = excluded.payload,
                updated_at = excluded.updated_at
            """,
            [genre, page, self.dumps(payload), self.now()],
        )
        if result.ok:
            logger.debug("Listing saved: {} p{}", genre, page)
        return result

    async def get_page(self, genre: str, page: int) -> Any | None:
        """Load a cached listing page."""
        row = await self.fetchone(
            "SELECT payload FROM cached_listing_page WHERE genre = ? AND page = ?",
            [genre, page],
        )
        return self.loads(row[0]) if row else None

    async def has_any_page(self, genre: str) -> bool:
        """Check if any page of a genre is cached."""
        row = await self.fetchone(
            "SELECT COUNT(*) FROM cached_listing_page WHERE genre = ?",
            [genre],
        )
        return bool(row) and row[0] > 0

    async def is_page_fresh(self, genre: str, page: int, max_age_ms: int) -> bool:
        return await self._is_fresh(
            "SELECT updated_at FROM cached_listing_page WHERE genre = ? AND page = ?",
            [genre, page],
            max_age_ms,
        )
