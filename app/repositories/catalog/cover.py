"""Cover repository - cached cover images."""

from app.models import WriteResult
from app.repositories.base import BaseRepository


class CoverRepository(BaseRepository):
    """Repository for cached cover image data."""

    async def upsert(self, cover_id: int, image_data: str) -> WriteResult:
        return await self.write(
            """
            INSERT INTO cached_cover (cover_id, image_data, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT (cover_id) DO UPDATE SET
                image_data = excluded.image_data,
                updated_at = excluded.updated_at
            """,
            [cover_id, image_data, self.now()],
        )

    async def get(self, cover_id: int) -> str | None:
        row = await self.fetchone("SELECT image_data FROM cached_cover WHERE cover_id = ?", [cover_id])
        return row[0] if row else None
