"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    @classmethod
    def from_row(cls, row: tuple, columns: list[str] | None = None):
        """Build an entity from a DB row (columns default to field order)."""
        names = columns or [f.name for f in fields(cls)]
        return cls(**dict(zip(names, row)))

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)
