"""Lists repository - user collections and their entries."""

import duckdb
from loguru import logger

from app.errors import validate_list_name
from app.models import CustomList, ListEntry, ListOutcome, ListResult, WriteResult
from app.repositories.base import BaseRepository

ENTRY_COLUMNS = ["work_key", "title", "author", "cover_id", "first_publish_year", "added_at"]


class ListRepository(BaseRepository):
    """Repository for custom lists and list membership."""

    async def list_all(self) -> list[CustomList]:
        """All lists, oldest first."""
        rows = await self.fetchall("SELECT id, name, created_at FROM custom_list ORDER BY created_at, id")
        return [CustomList.from_row(r) for r in rows]

    async def get(self, list_id: int) -> CustomList | None:
        row = await self.fetchone("SELECT id, name, created_at FROM custom_list WHERE id = ?", [list_id])
        return CustomList.from_row(row) if row else None

    async def _name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        if exclude_id is None:
            row = await self.fetchone("SELECT COUNT(*) FROM custom_list WHERE name = ?", [name])
        else:
            row = await self.fetchone(
                "SELECT COUNT(*) FROM custom_list WHERE name = ? AND id <> ?",
                [name, exclude_id],
            )
        return bool(row) and row[0] > 0

    async def create(self, name: str) -> ListResult:
        """Create a list; an existing name is reported as DUPLICATE."""
        name = validate_list_name(name)
        if not await self._ready():
            return ListResult(ListOutcome.SKIPPED)
        if await self._name_taken(name):
            return ListResult(ListOutcome.DUPLICATE)

        created_at = self.now()
        try:
            row = await self._db.execute(
                "INSERT INTO custom_list (name, created_at) VALUES (?, ?) RETURNING id",
                [name, created_at],
                fetch="one",
            )
        except duckdb.ConstraintException:
            logger.debug("List name taken concurrently: {}", name)
            return ListResult(ListOutcome.DUPLICATE)

        logger.info("List created: {} (id={})", name, row[0])
        return ListResult(ListOutcome.CREATED, CustomList(id=row[0], name=name, created_at=created_at))

    async def rename(self, list_id: int, name: str) -> ListOutcome:
        name = validate_list_name(name)
        if not await self._ready():
            return ListOutcome.SKIPPED
        if await self.get(list_id) is None:
            return ListOutcome.NOT_FOUND
        if await self._name_taken(name, exclude_id=list_id):
            return ListOutcome.DUPLICATE

        try:
            await self._db.execute("UPDATE custom_list SET name = ? WHERE id = ?", [name, list_id], fetch=None)
        except duckdb.ConstraintException:
            return ListOutcome.DUPLICATE
        logger.info("List {} renamed to {}", list_id, name)
        return ListOutcome.UPDATED

    async def delete(self, list_id: int) -> WriteResult:
        """Delete a list together with its entries."""
        if not await self._ready():
            return WriteResult.SKIPPED
        try:
            await self._db.transaction(
                [
                    ("DELETE FROM list_entry WHERE list_id = ?", [list_id]),
                    ("DELETE FROM custom_list WHERE id = ?", [list_id]),
                ]
            )
        except duckdb.Error as e:
            logger.error("Failed to delete list {}: {}", list_id, e)
            return WriteResult.FAILED
        logger.info("List {} deleted", list_id)
        return WriteResult.WROTE

    async def entries_of(self, list_id: int) -> list[ListEntry]:
        """Entries of a list, most recently added first."""
        rows = await self.fetchall(
            f"""
            SELECT {", ".join(ENTRY_COLUMNS)} FROM list_entry
            WHERE list_id = ?
            ORDER BY added_at DESC, rowid DESC
            """,
            [list_id],
        )
        return [ListEntry.from_row(r, ENTRY_COLUMNS) for r in rows]

    async def is_member(self, list_id: int, work_key: str) -> bool:
        row = await self.fetchone(
            "SELECT COUNT(*) FROM list_entry WHERE list_id = ? AND work_key = ?",
            [list_id, work_key],
        )
        return bool(row) and row[0] > 0

    async def add_entry(self, list_id: int, entry: ListEntry) -> ListOutcome:
        """Add a work to a list; membership is a set.

        Checks membership first; an insert that still collides (a concurrent
        add of the same work) resolves to DUPLICATE as well. Any other
        constraint violation is FAILED.
        """
        if not await self._ready():
            return ListOutcome.SKIPPED
        if await self.get(list_id) is None:
            return ListOutcome.NOT_FOUND
        if await self.is_member(list_id, entry.work_key):
            return ListOutcome.DUPLICATE

        try:
            await self._db.execute(
                """
                INSERT INTO list_entry
                    (list_id, work_key, title, author, cover_id, first_publish_year, added_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    list_id,
                    entry.work_key,
                    entry.title,
                    entry.author,
                    entry.cover_id,
                    entry.first_publish_year,
                    self.now(),
                ],
                fetch=None,
            )
        except duckdb.ConstraintException as e:
            if await self.is_member(list_id, entry.work_key):
                logger.debug("Concurrent add of {} to list {}", entry.work_key, list_id)
                return ListOutcome.DUPLICATE
            logger.error("Failed to add {} to list {}: {}", entry.work_key, list_id, e)
            return ListOutcome.FAILED

        logger.debug("Added {} to list {}", entry.work_key, list_id)
        return ListOutcome.ADDED

    async def remove_entry(self, list_id: int, work_key: str) -> WriteResult:
        return await self.write(
            "DELETE FROM list_entry WHERE list_id = ? AND work_key = ?",
            [list_id, work_key],
        )
