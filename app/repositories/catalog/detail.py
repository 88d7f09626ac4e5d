"""Detail repository - cached work detail bundles."""

from typing import Any

from loguru import logger

from app.models import WriteResult
from app.repositories.base import BaseRepository


class DetailRepository(BaseRepository):
    """Repository for cached work details."""

    async def upsert(self, work_key: str, payload: Any) -> WriteResult:
        result = await self.write(
            """
            INSERT INTO cached_detail (work_key, payload, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT (work_key) DO UPDATE SET
                payload = excluded.payload,
                updated_at = excluded.updated_at
            """,
            [work_key, self.dumps(payload), self.now()],
        )
        if result.ok:
            logger.debug("Detail saved: {}", work_key)
        return result

    async def get(self, work_key: str) -> Any | None:
        row = await self.fetchone("SELECT payload FROM cached_detail WHERE work_key = ?", [work_key])
        return self.loads(row[0]) if row else None

    async def is_fresh(self, work_key: str, max_age_ms: int) -> bool:
        return await self._is_fresh(
            "SELECT updated_at FROM cached_detail WHERE work_key = ?",
            [work_key],
            max_age_ms,
        )
