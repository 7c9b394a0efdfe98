"""CRUD operations package."""

from taskhub.crud import project, user

__all__ = ["project", "user"]
