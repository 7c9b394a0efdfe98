"""Pydantic schemas for roles and users."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.config import ConfigDict

from taskhub.core.enums import RoleName


# ================================================================== #
# Role Schemas                                                       #
# ================================================================== #

class RoleCreate(BaseModel):
    """Schema for creating a role with a fixed id."""

    id: int = Field(..., gt=0, description="Fixed role id")
    name: RoleName = Field(..., description="Role name")


class RoleRead(BaseModel):
    """Schema for reading a role; the name is returned as stored."""

    id: int
    name: str
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


# ================================================================== #
# User Schemas                                                       #
# ================================================================== #

class UserCreate(BaseModel):
    """Schema for creating a user from a plain password.

    The password is hashed by the CRUD layer before it reaches the database.
    """

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    password: str = Field(..., min_length=1, description="Plain password")
    role: RoleName = Field(..., description="Name of the role to assign")

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator('email')
    def validate_email(cls, v: EmailStr) -> str:
        """Normalize email to lowercase."""
        return str(v).lower().strip()


class UserRead(BaseModel):
    """Schema for reading a user as stored; never exposes the password hash."""

    id: int
    email: str
    name: str
    role_id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
