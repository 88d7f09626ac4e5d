"""DuckDB connection management."""

import asyncio
import time
from collections.abc import Callable
from typing import Any

import duckdb
from loguru import logger

from app.errors import CacheInitError
from app.models import ALL_DDL
from settings import DB_PATH


def now_ms() -> int:
    """Wall clock in epoch milliseconds."""
    return int(time.time() * 1000)


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


class Database:
    """Single shared DuckDB connection with lazy, single-flight initialization.

    Every statement runs on a worker thread while holding one asyncio lock,
    so callers interleave only through this object.
    """

    def __init__(
        self,
        path: str = DB_PATH,
        clock: Callable[[], int] = now_ms,
        connect: Callable[..., duckdb.DuckDBPyConnection] = duckdb.connect,
    ):
        self.path = path
        self.clock = clock
        self._connect = connect
        self._conn: duckdb.DuckDBPyConnection | None = None
        self._pending: asyncio.Task | None = None
        self._lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._conn is not None

    async def init(self) -> None:
        """Open the connection and apply the schema once.

        Concurrent callers share the in-flight attempt. A failed attempt is
        reported to all of its waiters and the next call starts over.
        """
        if self._conn is not None:
            return

        if self._pending is None:
            self._pending = asyncio.get_running_loop().create_task(self._open())
            self._pending.add_done_callback(self._clear_pending)

        await asyncio.shield(self._pending)

    def _clear_pending(self, task: asyncio.Task) -> None:
        if self._pending is task:
            self._pending = None

    async def _open(self) -> None:
        def open_and_migrate() -> duckdb.DuckDBPyConnection:
            conn = self._connect(self.path)
            try:
                init_tables(conn)
            except Exception:
                conn.close()
                raise
            return conn

        try:
            conn = await asyncio.to_thread(open_and_migrate)
        except Exception as e:
            logger.error("DB init failed for {}: {}", self.path, e)
            raise CacheInitError(f"Cannot open cache store {self.path}: {e}") from e

        self._conn = conn
        logger.debug("DB connected: {}", self.path)

    async def execute(self, query: str, params: list | None = None, fetch: str | None = "all") -> Any:
        """Execute SQL and fetch rows (``fetch`` is "all", "one" or None)."""
        if self._conn is None:
            raise CacheInitError("Cache store is not initialized")

        def run():
            cursor = self._conn.execute(query, params) if params else self._conn.execute(query)
            if fetch == "all":
                return cursor.fetchall()
            if fetch == "one":
                return cursor.fetchone()
            return None

        async with self._lock:
            return await asyncio.to_thread(run)

    async def transaction(self, statements: list[tuple[str, list]]) -> None:
        """Run several statements atomically."""
        if self._conn is None:
            raise CacheInitError("Cache store is not initialized")

        def run():
            self._conn.execute("BEGIN TRANSACTION")
            try:
                for query, params in statements:
                    self._conn.execute(query, params)
                self._conn.execute("COMMIT")
            except Exception:
                self._conn.execute("ROLLBACK")
                raise

        async with self._lock:
            await asyncio.to_thread(run)

    async def close(self) -> None:
        """Close the connection; a later init() reopens it."""
        if self._conn is None:
            return
        async with self._lock:
            self._conn.close()
            self._conn = None
        logger.debug("DB connection closed")
