"""Cover image services."""

from app.services.covers.service import CoverService, to_data_url

__all__ = ["CoverService", "to_data_url"]
