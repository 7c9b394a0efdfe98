"""Fixed development records written by ``taskhub.db.seed_db``.

Identifiers are fixed so that re-running the seeder finds the existing rows.
"""

from __future__ import annotations

from taskhub.core.enums import EffortLevel, RoleName, TaskStatus
from taskhub.schemas.project import ProjectCreate, TaskCreate
from taskhub.schemas.user import RoleCreate, UserCreate

# ---------- roles ----------
ROLES: list[RoleCreate] = [
    RoleCreate(id=1, name=RoleName.ADMIN),
    RoleCreate(id=2, name=RoleName.EDITOR),
    RoleCreate(id=3, name=RoleName.VIEWER),
]

# ---------- users ----------
USERS: list[UserCreate] = [
    UserCreate(email="admin@example.com", name="システム管理者",
               password="admin123", role=RoleName.ADMIN),
    UserCreate(email="editor@example.com", name="テスト編集者",
               password="editor123", role=RoleName.EDITOR),
    UserCreate(email="viewer@example.com", name="テスト閲覧者",
               password="viewer123", role=RoleName.VIEWER),
]

# Credentials printed after a successful run
ADMIN_USER: UserCreate = USERS[0]

# ---------- project ----------
DEFAULT_PROJECT = ProjectCreate(
    id="00000000-0000-0000-0000-000000000001",
    name="デフォルトプロジェクト",
    description="初期プロジェクト",
)

# ---------- tasks ----------
TASKS: list[TaskCreate] = [
    TaskCreate(id="00000000-0000-0000-0000-000000000101", task_code="T1-01", name="要件定義",
               status=TaskStatus.COMPLETED, phase="第1段階", effort_hours=8,
               effort_level=EffortLevel.MEDIUM),
    TaskCreate(id="00000000-0000-0000-0000-000000000102", task_code="T1-02", name="DB設計",
               status=TaskStatus.IN_PROGRESS, phase="第1段階", effort_hours=16,
               effort_level=EffortLevel.HEAVY),
    TaskCreate(id="00000000-0000-0000-0000-000000000103", task_code="T2-01", name="UI実装",
               status=TaskStatus.NOT_STARTED, phase="第2段階", effort_hours=24,
               effort_level=EffortLevel.HEAVY),
]
