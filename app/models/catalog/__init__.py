"""Catalog cache models - listing pages, details, searches, covers."""

from app.models.catalog.cover import COVER_DDL
from app.models.catalog.detail import DETAIL_DDL
from app.models.catalog.listing import LISTING_PAGE_DDL
from app.models.catalog.search import SEARCH_RESULT_DDL

__all__ = [
    "LISTING_PAGE_DDL",
    "DETAIL_DDL",
    "SEARCH_RESULT_DDL",
    "COVER_DDL",
]
