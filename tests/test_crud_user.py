"""Unit tests for role and user upserts."""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskhub.core.enums import RoleName
from taskhub.crud import user as crud_user
from taskhub.models.user import Role, User
from taskhub.schemas.user import RoleCreate, UserCreate
from taskhub.security.passwords import verify_password


@pytest.fixture
def admin_role(db: Session):
    return crud_user.upsert_role(db, RoleCreate(id=1, name=RoleName.ADMIN))


class TestRoleUpsert:
    """Test cases for role upserts."""

    def test_upsert_role_creates_missing_role(self, db: Session):
        """Test a missing role is created with its fixed id."""
        role = crud_user.upsert_role(db, RoleCreate(id=2, name=RoleName.EDITOR))

        assert role.id == 2
        assert role.name == RoleName.EDITOR
        assert role.created_at is not None
        assert crud_user.count_roles(db) == 1

    def test_upsert_role_keeps_existing_row(self, db: Session, admin_role):
        """Test an existing id is returned unchanged."""
        role = crud_user.upsert_role(db, RoleCreate(id=1, name=RoleName.VIEWER))

        assert role.name == RoleName.ADMIN
        assert role.created_at == admin_role.created_at
        assert crud_user.count_roles(db) == 1

    def test_upsert_role_returns_stored_name_outside_enum(self, db: Session):
        """Test an existing role with a legacy name is returned without validation errors."""
        db.add(Role(id=1, name="superuser"))
        db.commit()

        role = crud_user.upsert_role(db, RoleCreate(id=1, name=RoleName.ADMIN))

        assert role.id == 1
        assert role.name == "superuser"

    def test_duplicate_role_name_raises_integrity_error(self, db: Session, admin_role):
        """Test a second id with the same name violates the unique constraint."""
        with pytest.raises(IntegrityError):
            crud_user.upsert_role(db, RoleCreate(id=5, name=RoleName.ADMIN))

        # Session stays usable after the rollback
        assert crud_user.count_roles(db) == 1

    def test_get_role_by_name(self, db: Session, admin_role):
        """Test lookup by name with enum and plain string."""
        assert crud_user.get_role_by_name(db, RoleName.ADMIN).id == 1
        assert crud_user.get_role_by_name(db, "admin").id == 1
        assert crud_user.get_role_by_name(db, "viewer") is None


class TestUserUpsert:
    """Test cases for user upserts."""

    def test_upsert_user_hashes_password(self, db: Session, admin_role):
        """Test the stored password is a verifiable hash, not the plain text."""
        user = crud_user.upsert_user(
            db,
            UserCreate(email="Admin@Example.com", name="Admin", password="admin123",
                       role=RoleName.ADMIN),
            role_id=admin_role.id,
        )

        assert user.email == "admin@example.com"
        assert user.role_id == 1
        assert not hasattr(user, "password_hash")

        stored_hash = crud_user.get_user_password_hash(db, "admin@example.com")
        assert stored_hash != "admin123"
        assert verify_password("admin123", stored_hash)

    def test_upsert_user_does_not_overwrite_existing(self, db: Session, admin_role):
        """Test name and password hash of an existing user are left alone."""
        first = crud_user.upsert_user(
            db,
            UserCreate(email="admin@example.com", name="Original", password="first",
                       role=RoleName.ADMIN),
            role_id=admin_role.id,
        )
        original_hash = crud_user.get_user_password_hash(db, "admin@example.com")

        second = crud_user.upsert_user(
            db,
            UserCreate(email="ADMIN@example.com", name="Changed", password="second",
                       role=RoleName.ADMIN),
            role_id=admin_role.id,
        )

        assert second.id == first.id
        assert second.name == "Original"
        assert crud_user.get_user_password_hash(db, "admin@example.com") == original_hash
        assert crud_user.count_users(db) == 1

    def test_upsert_user_with_unknown_role_raises_integrity_error(self, db: Session):
        """Test the role foreign key is enforced."""
        with pytest.raises(IntegrityError):
            crud_user.upsert_user(
                db,
                UserCreate(email="ghost@example.com", name="Ghost", password="x",
                           role=RoleName.VIEWER),
                role_id=99,
            )

        assert crud_user.count_users(db) == 0

    def test_get_user_by_email_not_found(self, db: Session):
        """Test retrieving a non-existent user returns None."""
        assert crud_user.get_user_by_email(db, "nobody@example.com") is None
        assert crud_user.get_user_password_hash(db, "nobody@example.com") is None

    def test_user_model_rejects_invalid_email(self):
        """Test the ORM validator refuses addresses without '@'."""
        with pytest.raises(ValueError):
            User(email="not-an-email", name="x", password_hash="x", role_id=1)
