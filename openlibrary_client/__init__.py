"""Open Library API client package."""

from openlibrary_client.base import BaseClient, safe_request
from openlibrary_client.catalog import CatalogClient

__all__ = [
    # Base
    "BaseClient",
    "safe_request",
    # Clients
    "CatalogClient",
]
