"""Common models - base classes and shared result types."""

from app.models.common.base import BaseEntity
from app.models.common.results import WriteResult

__all__ = [
    "BaseEntity",
    "WriteResult",
]
