"""Models package - DDL and entities for all record families."""

from app.models.catalog import (
    COVER_DDL,
    DETAIL_DDL,
    LISTING_PAGE_DDL,
    SEARCH_RESULT_DDL,
)
from app.models.common import BaseEntity, WriteResult
from app.models.lists import (
    CUSTOM_LIST_DDL,
    CUSTOM_LIST_SEQUENCE,
    LIST_ENTRY_DDL,
    CustomList,
    ListEntry,
    ListOutcome,
    ListResult,
)

ALL_DDL = [
    # Catalog cache
    LISTING_PAGE_DDL,
    DETAIL_DDL,
    SEARCH_RESULT_DDL,
    COVER_DDL,
    # Lists
    CUSTOM_LIST_SEQUENCE,
    CUSTOM_LIST_DDL,
    LIST_ENTRY_DDL,
]

ALL_TABLES = [
    "cached_listing_page",
    "cached_detail",
    "cached_search_result",
    "cached_cover",
    "custom_list",
    "list_entry",
]

__all__ = [
    # Common
    "BaseEntity",
    "WriteResult",
    # Catalog
    "LISTING_PAGE_DDL",
    "DETAIL_DDL",
    "SEARCH_RESULT_DDL",
    "COVER_DDL",
    # Lists
    "CUSTOM_LIST_SEQUENCE",
    "CUSTOM_LIST_DDL",
    "LIST_ENTRY_DDL",
    "CustomList",
    "ListEntry",
    "ListOutcome",
    "ListResult",
    # All DDL
    "ALL_DDL",
    "ALL_TABLES",
]
