"""Seed script for the taskhub development database.

Usage (CLI):
    python -m taskhub.db.seed_db
    taskhub-seed --log-level DEBUG

Every record is written with a fixed key and is only created when missing,
so running the script against an already seeded database changes nothing.
Each record is committed on its own: a failure stops the run but keeps the
rows written before it.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import asdict, dataclass

import click
from sqlalchemy.orm import Session

from taskhub.core.logging import setup_logging
from taskhub.crud import project as crud_project
from taskhub.crud import user as crud_user
from taskhub.db.seed_data import ADMIN_USER, DEFAULT_PROJECT, ROLES, TASKS, USERS
from taskhub.db.session import SessionLocal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedSummary:
    """Row counts per table after a seeding run."""

    roles: int
    users: int
    projects: int
    tasks: int


def seed_database(db: Session) -> SeedSummary:
    """Ensure all fixed development records exist.

    Roles are written first so user role references resolve, then users,
    the default project and finally its tasks.

    Args:
        db: Open database session; the caller owns and closes it.

    Returns:
        SeedSummary: Row counts once seeding has finished.

    Raises:
        SQLAlchemyError: Propagated unchanged from the first failing write.
    """
    # ---------- roles ----------
    role_ids: dict[str, int] = {}
    for role_data in ROLES:
        role = crud_user.upsert_role(db, role_data)
        role_ids[role_data.name.value] = role.id
    logger.info(f"Roles ensured: {sorted(role_ids)}")

    # ---------- users ----------
    for user_data in USERS:
        crud_user.upsert_user(db, user_data, role_id=role_ids[user_data.role.value])
    logger.info(f"Users ensured: {[str(u.email) for u in USERS]}")

    # ---------- project ----------
    project = crud_project.upsert_project(db, DEFAULT_PROJECT)
    logger.info(f"Project ensured: {project.id}")

    # ---------- tasks ----------
    for task_data in TASKS:
        crud_project.upsert_task(db, task_data, project_id=project.id)
    logger.info(f"Tasks ensured: {[t.task_code for t in TASKS]}")

    return SeedSummary(
        roles=crud_user.count_roles(db),
        users=crud_user.count_users(db),
        projects=crud_project.count_projects(db),
        tasks=crud_project.count_tasks(db),
    )


# ------------------------------------------------------------------------- #
# Command-line interface using `click`                                      #
# ------------------------------------------------------------------------- #
@click.command(help="Seed the database with development records.")
@click.option(
    "--log-level",
    default=None,
    help="Logging level (defaults to the LOG_LEVEL setting).",
)
def main(log_level: str | None) -> None:
    """CLI wrapper: report the outcome and exit non-zero on failure."""
    setup_logging(log_level)
    click.echo("Starting seeding process …")

    db = SessionLocal()
    try:
        summary = seed_database(db)
    except Exception as exc:
        logger.exception("Seeding failed")
        click.echo(f"❌ Seeding failed: {exc}", err=True)
        sys.exit(1)
    finally:
        db.close()

    for table, count in asdict(summary).items():
        click.echo(f"  {table}: {count}")
    click.echo("✅ Seeding complete")
    click.echo(f"{ADMIN_USER.email} / {ADMIN_USER.password}")


if __name__ == "__main__":  # pragma: no cover
    main()
