"""Repositories package - data access layer for the local cache."""

from app.repositories.base import BaseRepository
from app.repositories.catalog import (
    CoverRepository,
    DetailRepository,
    ListingRepository,
    SearchRepository,
    normalize_query,
)
from app.repositories.db import Database, init_tables, now_ms
from app.repositories.lists import ListRepository
from app.repositories.store import CacheStore

__all__ = [
    # DB
    "Database",
    "init_tables",
    "now_ms",
    # Base
    "BaseRepository",
    # Catalog
    "ListingRepository",
    "DetailRepository",
    "SearchRepository",
    "CoverRepository",
    "normalize_query",
    # Lists
    "ListRepository",
    # Facade
    "CacheStore",
]
