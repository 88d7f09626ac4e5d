"""List domain entities and operation outcomes."""

from dataclasses import dataclass
from enum import Enum

from app.models.common import BaseEntity


class ListOutcome(str, Enum):
    """Result of a list or membership mutation."""

    CREATED = "created"
    ADDED = "added"
    UPDATED = "updated"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class CustomList(BaseEntity):
    """A named collection of works."""

    id: int
    name: str
    created_at: int


@dataclass
class ListEntry(BaseEntity):
    """A work inside a custom list."""

    work_key: str
    title: str
    author: str | None = None
    cover_id: int | None = None
    first_publish_year: int | None = None
    added_at: int | None = None


@dataclass
class ListResult:
    """Outcome of creating a list, with the list when it was created."""

    outcome: ListOutcome
    custom_list: CustomList | None = None
