"""Tests for schema creation."""

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from taskhub.crud import user as crud_user
from taskhub.db import init_db as init_db_module
from taskhub.db import session as session_module
from taskhub.schemas.user import RoleCreate


def test_init_db_creates_tables(engine, monkeypatch, capsys):
    from taskhub.db.base import Base

    Base.metadata.drop_all(bind=engine)
    monkeypatch.setattr(session_module, "engine", engine)

    init_db_module.init_db()

    assert set(inspect(engine).get_table_names()) == {"roles", "users", "projects", "tasks"}
    assert "Creating tables" in capsys.readouterr().out


def test_init_db_reset_drops_existing_rows(engine, monkeypatch):
    monkeypatch.setattr(session_module, "engine", engine)
    with Session(engine) as db:
        crud_user.upsert_role(db, RoleCreate(id=1, name="admin"))

    init_db_module.init_db(reset=True)

    with Session(engine) as db:
        assert crud_user.count_roles(db) == 0


def test_init_db_without_reset_keeps_rows(engine, monkeypatch):
    monkeypatch.setattr(session_module, "engine", engine)
    with Session(engine) as db:
        crud_user.upsert_role(db, RoleCreate(id=1, name="admin"))

    init_db_module.init_db()

    with Session(engine) as db:
        assert crud_user.count_roles(db) == 1


def test_module_docstring_describes_usage():
    assert init_db_module.__doc__.startswith("Database initialisation utility.")
    assert "taskhub-init-db" in init_db_module.__doc__
