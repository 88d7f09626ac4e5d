"""User list models - lists, entries and outcomes."""

from app.models.lists.custom_list import CUSTOM_LIST_DDL, CUSTOM_LIST_SEQUENCE
from app.models.lists.entities import CustomList, ListEntry, ListOutcome, ListResult
from app.models.lists.entry import LIST_ENTRY_DDL

__all__ = [
    "CUSTOM_LIST_SEQUENCE",
    "CUSTOM_LIST_DDL",
    "LIST_ENTRY_DDL",
    "CustomList",
    "ListEntry",
    "ListOutcome",
    "ListResult",
]
