"""Search repository - cached search result pages and offline lookup."""

from loguru import logger

from app.models import WriteResult
from app.repositories.base import BaseRepository


def normalize_query(query: str | None) -> str:
    """Trim and case-fold a query before it is used as a key."""
    return (query or "").strip().casefold()


class SearchRepository(BaseRepository):
    """Repository for cached search results."""

    async def upsert(self, query: str, page: int, items: list[dict]) -> WriteResult:
        """Save the items of one search result page."""
        key = normalize_query(query)
        if not key:
            return WriteResult.SKIPPED

        result = await self.write(
            """
            INSERT INTO cached_search_result (query, page, data, created_at)
            VALUES (?, ?, ?, ?)
            ON CONFLICT (query, page) DO UPDATE SET
                data = excluded.data,
                created_at = excluded.created_at
            """,
            [key, page, self.dumps(items), self.now()],
        )
        if result.ok:
            logger.debug("Search saved: '{}' p{} ({} items)", key, page, len(items))
        return result

    async def get(self, query: str, page: int) -> list[dict] | None:
        row = await self.fetchone(
            "SELECT data FROM cached_search_result WHERE query = ? AND page = ?",
            [normalize_query(query), page],
        )
        return self.loads(row[0]) if row else None

    async def search_similar_offline(self, fragment: str) -> list[dict]:
        """Items from every cached search whose query contains ``fragment``.

        Newest pages come first; items are deduplicated by ``key`` with the
        last occurrence kept in the position of the first.
        """
        needle = normalize_query(fragment)
        if not needle:
            return []

        rows = await self.fetchall(
            """
            SELECT data FROM cached_search_result
            WHERE contains(query, ?::VARCHAR)
            ORDER BY created_at DESC, query, page
            """,
            [needle],
        )

        by_key: dict[str, dict] = {}
        for (data,) in rows:
            items = self.loads(data)
            if not isinstance(items, list):
                continue
            for item in items:
                if isinstance(item, dict) and item.get("key"):
                    by_key[item["key"]] = item

        logger.debug("Offline search '{}': {} pages, {} items", needle, len(rows), len(by_key))
        return list(by_key.values())
