"""Core enums for the taskhub application."""

from __future__ import annotations

from enum import Enum


class RoleName(str, Enum):
    """Authorization tiers a user can be assigned to."""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class TaskStatus(str, Enum):
    """Progress states of a task."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class EffortLevel(str, Enum):
    """Rough effort classification of a task."""

    LIGHT = "LIGHT"
    MEDIUM = "MEDIUM"
    HEAVY = "HEAVY"
