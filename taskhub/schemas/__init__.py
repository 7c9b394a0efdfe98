"""Pydantic schemas package."""

from taskhub.schemas import project, user

__all__ = ["project", "user"]
