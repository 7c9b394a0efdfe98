"""SQLAlchemy models package."""

from taskhub.models import project, user

__all__ = [
    "project",
    "user",
]
