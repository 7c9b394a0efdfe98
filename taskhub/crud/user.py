"""CRUD operations for roles and users."""

from __future__ import annotations

import logging

from pydantic import EmailStr
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskhub.core.enums import RoleName
from taskhub.models.user import Role, User
from taskhub.schemas.user import RoleCreate, RoleRead, UserCreate, UserRead
from taskhub.security.passwords import hash_password

logger = logging.getLogger(__name__)


# ================================================================== #
# Helper Functions for Schema Conversion                            #
# ================================================================== #

def build_role_read(role_orm: Role) -> RoleRead:
    """Convert Role ORM to Read schema."""
    return RoleRead.model_validate(role_orm, from_attributes=True)


def build_user_read(user_orm: User) -> UserRead:
    """Convert User ORM to Read schema."""
    return UserRead.model_validate(user_orm, from_attributes=True)


def _persist(db: Session, obj: Role | User) -> None:
    """Add, commit and refresh ``obj``; roll back and re-raise on failure."""
    try:
        db.add(obj)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(obj)


# ================================================================== #
# Role Operations                                                    #
# ================================================================== #

def upsert_role(db: Session, role_data: RoleCreate) -> RoleRead:
    """Create a role unless one with the same id already exists.

    An existing row is returned unchanged, even if its name differs.

    Args:
        db: Database session
        role_data: Role with fixed id

    Returns:
        The stored role schema

    Raises:
        IntegrityError: If another role already uses the name
    """
    role_orm = db.get(Role, role_data.id)
    if role_orm is None:
        role_orm = Role(id=role_data.id, name=role_data.name.value)
        _persist(db, role_orm)
        logger.debug(f"Created role {role_orm.id} ({role_orm.name})")

    return build_role_read(role_orm)


def get_role_by_name(db: Session, name: RoleName | str) -> RoleRead | None:
    """Return a role by its unique name, or None if not found."""
    value = name.value if isinstance(name, RoleName) else name
    role_orm = db.scalar(select(Role).where(Role.name == value))

    if not role_orm:
        return None

    return build_role_read(role_orm)


def count_roles(db: Session) -> int:
    """Return the number of stored roles."""
    return db.scalar(select(func.count()).select_from(Role)) or 0


# ================================================================== #
# User Operations                                                    #
# ================================================================== #

def get_user_orm_by_email(db: Session, email: str | EmailStr) -> User | None:
    """Return the User ORM object for an email address (case-insensitive)."""
    normalized = str(email).lower()
    return db.scalar(select(User).where(User.email == normalized))


def upsert_user(db: Session, user_data: UserCreate, role_id: int) -> UserRead:
    """Create a user unless one with the same email already exists.

    The plain password is hashed only when a new row is created, so existing
    users keep their name, role and password hash.

    Args:
        db: Database session
        user_data: Validated user payload with plain password
        role_id: Primary key of the role to assign

    Returns:
        The stored user schema

    Raises:
        IntegrityError: If ``role_id`` does not reference an existing role
    """
    user_orm = get_user_orm_by_email(db, user_data.email)
    if user_orm is None:
        user_orm = User(
            email=str(user_data.email),
            name=user_data.name,
            password_hash=hash_password(user_data.password),
            role_id=role_id,
        )
        _persist(db, user_orm)
        logger.debug(f"Created user {user_orm.email}")

    return build_user_read(user_orm)


def get_user_by_email(db: Session, email: str | EmailStr) -> UserRead | None:
    """Return a user by unique e-mail address, or None if not found."""
    user_orm = get_user_orm_by_email(db, email)

    if not user_orm:
        return None

    return build_user_read(user_orm)


def get_user_password_hash(db: Session, email: str | EmailStr) -> str | None:
    """Return the stored password hash for an email address, if any."""
    user_orm = get_user_orm_by_email(db, email)
    return user_orm.password_hash if user_orm else None


def count_users(db: Session) -> int:
    """Return the number of stored users."""
    return db.scalar(select(func.count()).select_from(User)) or 0
