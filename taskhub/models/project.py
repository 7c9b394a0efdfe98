"""SQLAlchemy ORM models for projects and their tasks."""

from __future__ import annotations

import datetime

from sqlalchemy import DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskhub.core.enums import TaskStatus
from taskhub.db.base import Base


class Project(Base):
    """Represents a row in the ``projects`` table.

    Projects use UUID strings as primary keys so that seeded rows keep the
    same identifier in every database.
    """

    __tablename__ = "projects"

    # ------------------------------------------------------------------ #
    # Columns                                                             #
    # ------------------------------------------------------------------ #
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc)
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc),
        onupdate=lambda: datetime.datetime.now(datetime.timezone.utc)
    )

    # ------------------------------------------------------------------ #
    # Relationships                                                       #
    # ------------------------------------------------------------------ #
    tasks: Mapped[list[Task]] = relationship(
        "Task", back_populates="project", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"Project(id={self.id!r}, name={self.name!r})"


class Task(Base):
    """Represents a row in the ``tasks`` table."""

    __tablename__ = "tasks"

    # ------------------------------------------------------------------ #
    # Columns                                                             #
    # ------------------------------------------------------------------ #
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    task_code: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment="Human readable code, e.g. 'T1-01'"
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=TaskStatus.NOT_STARTED.value,
        comment="NOT_STARTED, IN_PROGRESS or COMPLETED"
    )
    phase: Mapped[str | None] = mapped_column(String(100))
    effort_hours: Mapped[float | None] = mapped_column(Float)
    effort_level: Mapped[str | None] = mapped_column(
        String(20),
        comment="LIGHT, MEDIUM or HEAVY"
    )
    project_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc)
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc),
        onupdate=lambda: datetime.datetime.now(datetime.timezone.utc)
    )

    # ------------------------------------------------------------------ #
    # Relationships                                                       #
    # ------------------------------------------------------------------ #
    project: Mapped[Project] = relationship("Project", back_populates="tasks")

    def __repr__(self) -> str:
        return (
            "Task("
            f"id={self.id!r}, "
            f"task_code={self.task_code!r}, "
            f"status={self.status!r})"
        )
