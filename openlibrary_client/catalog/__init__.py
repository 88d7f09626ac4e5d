"""Catalog API client - subjects, works, authors, search."""

from openlibrary_client.catalog.client import CatalogClient
from openlibrary_client.catalog.schemas import (
    AuthorRoleSchema,
    AuthorSchema,
    SearchDocSchema,
    SearchResponseSchema,
    WorkDetailSchema,
)

__all__ = [
    "CatalogClient",
    "AuthorRoleSchema",
    "AuthorSchema",
    "SearchDocSchema",
    "SearchResponseSchema",
    "WorkDetailSchema",
]
