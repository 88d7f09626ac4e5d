"""Catalog cache repositories."""

from app.repositories.catalog.cover import CoverRepository
from app.repositories.catalog.detail import DetailRepository
from app.repositories.catalog.listing import ListingRepository
from app.repositories.catalog.search import SearchRepository, normalize_query

__all__ = [
    "CoverRepository",
    "DetailRepository",
    "ListingRepository",
    "SearchRepository",
    "normalize_query",
]
