"""Pydantic schemas for projects and tasks."""

from __future__ import annotations

import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskhub.core.enums import EffortLevel, TaskStatus


def _canonical_uuid(value: str) -> str:
    """Return ``value`` as a lower-case hyphenated UUID string.

    Raises:
        ValueError: If ``value`` is not a UUID.
    """
    try:
        return str(uuid.UUID(str(value)))
    except ValueError as exc:
        raise ValueError(f"Invalid UUID: {value!r}") from exc


# ================================================================== #
# Project Schemas                                                    #
# ================================================================== #

class ProjectCreate(BaseModel):
    """Schema for creating a project with a fixed id."""

    id: str = Field(..., description="Fixed project UUID")
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, description="Free text description")

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator('id')
    def validate_id(cls, v: str) -> str:
        return _canonical_uuid(v)


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: str
    name: str
    description: str | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


# ================================================================== #
# Task Schemas                                                       #
# ================================================================== #

class TaskCreate(BaseModel):
    """Schema for creating a task; the project id is supplied by the caller."""

    id: str = Field(..., description="Fixed task UUID")
    task_code: str = Field(..., min_length=1, max_length=20, description="e.g. 'T1-01'")
    name: str = Field(..., min_length=1, max_length=200)
    status: TaskStatus = Field(default=TaskStatus.NOT_STARTED)
    phase: str | None = Field(None, max_length=100)
    effort_hours: float | None = Field(None, ge=0, description="Estimated effort in hours")
    effort_level: EffortLevel | None = None

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator('id')
    def validate_id(cls, v: str) -> str:
        return _canonical_uuid(v)


class TaskRead(BaseModel):
    """Schema for reading a task exactly as stored.

    Stored rows may predate the current enums, so status and effort level
    are read back as plain strings.
    """

    id: str
    task_code: str
    name: str
    status: str
    phase: str | None = None
    effort_hours: float | None = None
    effort_level: str | None = None
    project_id: str
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
