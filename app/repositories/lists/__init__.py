"""User list repositories."""

from app.repositories.lists.lists import ListRepository

__all__ = ["ListRepository"]
