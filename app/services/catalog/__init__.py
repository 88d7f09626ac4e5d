"""Catalog services - browsing, details and search."""

from app.services.catalog.details import build_detail_bundle
from app.services.catalog.service import CatalogService, to_list_entry

__all__ = ["CatalogService", "build_detail_bundle", "to_list_entry"]
