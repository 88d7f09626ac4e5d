"""Catalog API client - subjects, works, authors, search."""

from openlibrary_client.base import BaseClient
from openlibrary_client.catalog.schemas import AuthorSchema, SearchResponseSchema
from settings import PAGE_SIZE, UNKNOWN_AUTHOR


class CatalogClient(BaseClient):
    """Client for Open Library catalog endpoints."""

    async def list_genre_page(self, genre: str, limit: int = PAGE_SIZE, offset: int = 0) -> dict:
        """GET /subjects/{genre}.json - works of a subject."""
        return await self._get(f"subjects/{genre}.json", {"limit": limit, "offset": offset})

    async def get_work_detail(self, work_key: str) -> dict:
        """GET {work_key}.json - e.g. /works/OL45883W."""
        return await self._get(f"{work_key}.json")

    async def get_author_name(self, author_key: str) -> str:
        """GET {author_key}.json - display name of an author."""
        author = AuthorSchema.model_validate(await self._get(f"{author_key}.json"))
        return author.name or author.personal_name or UNKNOWN_AUTHOR

    async def search(self, query: str, page: int = 1) -> dict:
        """GET /search.json - free-text search; ``docs`` holds the hits."""
        data = await self._get("search.json", {"q": query, "page": page})
        return SearchResponseSchema.model_validate(data).model_dump(by_alias=True)
