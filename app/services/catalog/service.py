"""Catalog service - live reads with offline fallback to the cache."""

from loguru import logger

from app.models import ListEntry
from app.repositories import CacheStore
from app.services.catalog.details import build_detail_bundle
from app.services.network import NetworkMonitor
from openlibrary_client import CatalogClient
from openlibrary_client.catalog import SearchDocSchema
from settings import CACHE_TTL_MS, PAGE_SIZE


def to_list_entry(doc: dict) -> ListEntry:
    """Build a list entry from a search hit."""
    hit = SearchDocSchema.model_validate(doc)
    return ListEntry(
        work_key=hit.key,
        title=hit.title,
        author=hit.author_name[0] if hit.author_name else None,
        cover_id=hit.cover_id,
        first_publish_year=hit.first_publish_year,
    )


class CatalogService:
    """Request-path reads: network when possible, cache otherwise."""

    def __init__(
        self,
        client: CatalogClient,
        store: CacheStore,
        network: NetworkMonitor,
        page_size: int = PAGE_SIZE,
        ttl_ms: int = CACHE_TTL_MS,
    ):
        self._client = client
        self._store = store
        self._network = network
        self._page_size = page_size
        self._ttl_ms = ttl_ms
        logger.debug("CatalogService initialized")

    async def genre_page(self, genre: str, page: int = 1) -> dict | None:
        """One page of a genre listing, live if possible, else cached."""
        if self._network.is_online():
            try:
                payload = await self._client.list_genre_page(
                    genre, limit=self._page_size, offset=(page - 1) * self._page_size
                )
            except Exception as e:
                logger.warning("Genre {} p{} fetch failed, using cache: {}", genre, page, e)
            else:
                await self._store.listings.upsert_page(genre, page, payload)
                return payload

        return await self._store.listings.get_page(genre, page)

    async def work_detail(self, work_key: str) -> dict | None:
        """Detail bundle: fresh cache, then live, then stale cache."""
        if await self._store.details.is_fresh(work_key, self._ttl_ms):
            return await self._store.details.get(work_key)

        if self._network.is_online():
            try:
                bundle = await build_detail_bundle(self._client, work_key)
            except Exception as e:
                logger.warning("Detail {} fetch failed, using cache: {}", work_key, e)
            else:
                await self._store.details.upsert(work_key, bundle)
                return bundle

        return await self._store.details.get(work_key)

    async def search(self, query: str, page: int = 1) -> list[dict]:
        """Search hits; offline (or on failure) matches earlier searches."""
        query = query.strip()
        if not query:
            return []

        if self._network.is_online():
            try:
                response = await self._client.search(query, page)
            except Exception as e:
                logger.warning("Search '{}' failed, searching offline: {}", query, e)
            else:
                docs = response.get("docs") or []
                await self._store.searches.upsert(query, page, docs)
                return docs

        return await self._store.searches.search_similar_offline(query)
