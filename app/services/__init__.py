"""Services package - service class exports."""

from app.services.catalog import CatalogService, build_detail_bundle, to_list_entry
from app.services.covers import CoverService
from app.services.network import NetworkMonitor

__all__ = [
    "CatalogService",
    "CoverService",
    "NetworkMonitor",
    "build_detail_bundle",
    "to_list_entry",
]
