"""Base repository class."""

import json
from typing import Any

import duckdb
from loguru import logger

from app.errors import CacheInitError
from app.models import WriteResult
from app.repositories.db import Database


class BaseRepository:
    """Base repository with common functionality.

    Reads degrade to ``default`` and writes to ``WriteResult.SKIPPED`` when the
    store cannot be initialized, so a missing cache looks like a cache miss.
    """

    def __init__(self, db: Database):
        self._db = db
        logger.debug("{} initialized", self.__class__.__name__)

    def now(self) -> int:
        return self._db.clock()

    async def _ready(self) -> bool:
        """Make sure the store is open (lazily triggering init)."""
        if self._db.initialized:
            return True
        try:
            await self._db.init()
        except CacheInitError as e:
            logger.warning("{}: cache unavailable ({})", self.__class__.__name__, e)
            return False
        return True

    async def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows, [] when unavailable."""
        if not await self._ready():
            return []
        try:
            return await self._db.execute(query, params, fetch="all")
        except (duckdb.Error, CacheInitError) as e:
            logger.warning("Read failed: {}", e)
            return []

    async def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row, None when unavailable."""
        if not await self._ready():
            return None
        try:
            return await self._db.execute(query, params, fetch="one")
        except (duckdb.Error, CacheInitError) as e:
            logger.warning("Read failed: {}", e)
            return None

    async def write(self, query: str, params: list | None = None) -> WriteResult:
        """Execute a write statement, reporting instead of raising."""
        if not await self._ready():
            return WriteResult.SKIPPED
        try:
            await self._db.execute(query, params, fetch=None)
        except duckdb.Error as e:
            logger.error("{}: write failed: {}", self.__class__.__name__, e)
            return WriteResult.FAILED
        return WriteResult.WROTE

    async def _is_fresh(self, query: str, params: list, max_age_ms: int) -> bool:
        """True if the row's timestamp is within ``max_age_ms`` of now."""
        row = await self.fetchone(query, params)
        if not row or row[0] is None:
            return False
        return (self.now() - row[0]) <= max_age_ms

    @staticmethod
    def dumps(document: Any) -> str:
        return json.dumps(document, ensure_ascii=False)

    @staticmethod
    def loads(raw: str | None) -> Any:
        """Parse a stored document; a corrupt blob reads as a miss."""
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt cached payload: {}", e)
            return None
