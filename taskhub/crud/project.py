"""CRUD operations for projects and tasks."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskhub.models.project import Project, Task
from taskhub.schemas.project import ProjectCreate, ProjectRead, TaskCreate, TaskRead

logger = logging.getLogger(__name__)


# ================================================================== #
# Helper Functions for Schema Conversion                            #
# ================================================================== #

def build_project_read(project_orm: Project) -> ProjectRead:
    """Convert Project ORM to Read schema."""
    return ProjectRead.model_validate(project_orm, from_attributes=True)


def build_task_read(task_orm: Task) -> TaskRead:
    """Convert Task ORM to Read schema."""
    return TaskRead.model_validate(task_orm, from_attributes=True)


def _persist(db: Session, obj: Project | Task) -> None:
    try:
        db.add(obj)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(obj)


# ================================================================== #
# Project Operations                                                 #
# ================================================================== #

def upsert_project(db: Session, project_data: ProjectCreate) -> ProjectRead:
    """Create a project unless one with the same id already exists.

    Args:
        db: Database session
        project_data: Project with fixed UUID

    Returns:
        The stored project schema, unchanged if it already existed
    """
    project_orm = db.get(Project, project_data.id)
    if project_orm is None:
        project_orm = Project(
            id=project_data.id,
            name=project_data.name,
            description=project_data.description,
        )
        _persist(db, project_orm)
        logger.debug(f"Created project {project_orm.id}")

    return build_project_read(project_orm)


def get_project_by_id(db: Session, project_id: str) -> ProjectRead | None:
    """Return a project by primary key, or None if not found."""
    project_orm = db.get(Project, project_id)

    if not project_orm:
        return None

    return build_project_read(project_orm)


def count_projects(db: Session) -> int:
    """Return the number of stored projects."""
    return db.scalar(select(func.count()).select_from(Project)) or 0


# ================================================================== #
# Task Operations                                                    #
# ================================================================== #

def upsert_task(db: Session, task_data: TaskCreate, project_id: str) -> TaskRead:
    """Create a task unless one with the same id already exists.

    Args:
        db: Database session
        task_data: Task with fixed UUID
        project_id: Primary key of the owning project

    Returns:
        The stored task schema, unchanged if it already existed

    Raises:
        IntegrityError: If ``project_id`` does not reference an existing project
    """
    task_orm = db.get(Task, task_data.id)
    if task_orm is None:
        task_orm = Task(
            id=task_data.id,
            task_code=task_data.task_code,
            name=task_data.name,
            status=task_data.status.value,
            phase=task_data.phase,
            effort_hours=task_data.effort_hours,
            effort_level=task_data.effort_level.value if task_data.effort_level else None,
            project_id=project_id,
        )
        _persist(db, task_orm)
        logger.debug(f"Created task {task_orm.task_code} ({task_orm.id})")

    return build_task_read(task_orm)


def get_task_by_id(db: Session, task_id: str) -> TaskRead | None:
    """Return a task by primary key, or None if not found."""
    task_orm = db.get(Task, task_id)

    if not task_orm:
        return None

    return build_task_read(task_orm)


def get_tasks_for_project(db: Session, project_id: str) -> list[TaskRead]:
    """Return all tasks of a project ordered by task code."""
    task_orms = db.scalars(
        select(Task)
        .where(Task.project_id == project_id)
        .order_by(Task.task_code)
    ).all()

    return [build_task_read(task) for task in task_orms]


def count_tasks(db: Session) -> int:
    """Return the number of stored tasks."""
    return db.scalar(select(func.count()).select_from(Task)) or 0
