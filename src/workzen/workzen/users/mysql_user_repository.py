from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import UPDATABLE_FIELDS, User
from .repository import UserRepository

_COLUMNS = """
    user_id, login_id, name, email, password_hash, role, department,
    year_of_joining, basic_salary, hra, other_earnings, annual_leave, sick_leave,
    mobile, company, manager, location, about, hobbies, is_active, created_at
"""

_INSERTABLE = ("login_id", "password_hash") + UPDATABLE_FIELDS


def _row_to_user(r: dict) -> User:
    return User(
        user_id=int(r["user_id"]),
        login_id=r["login_id"],
        name=r["name"],
        email=r["email"],
        password_hash=r["password_hash"],
        role=Role(r["role"]),
        department=r["department"],
        year_of_joining=int(r["year_of_joining"]),
        basic_salary=int(r.get("basic_salary") or 0),
        hra=int(r.get("hra") or 0),
        other_earnings=int(r.get("other_earnings") or 0),
        annual_leave=int(r.get("annual_leave") or 0),
        sick_leave=int(r.get("sick_leave") or 0),
        mobile=r.get("mobile"),
        company=r.get("company"),
        manager=r.get("manager"),
        location=r.get("location"),
        about=r.get("about"),
        hobbies=r.get("hobbies"),
        is_active=bool(r.get("is_active", True)),
        created_at=r.get("created_at"),
    )


def _db_value(value: Any) -> Any:
    if isinstance(value, Role):
        return value.value
    return value


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_login_id(self, login_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE login_id=%s", (login_id,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY user_id ASC")
            return [_row_to_user(r) for r in fetchall(cur)]

    def count_joined_in(self, year: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM users WHERE year_of_joining=%s", (int(year),))
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def create_user(self, *, fields: Mapping[str, Any]) -> int:
        cols = [c for c in _INSERTABLE if c in fields]
        placeholders = ",".join(["%s"] * len(cols))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO users({', '.join(cols)}) VALUES({placeholders})",
                tuple(_db_value(fields[c]) for c in cols),
            )
            return int(cur.lastrowid)

    def update_user(self, user_id: int, changes: Mapping[str, Any]) -> bool:
        cols = [c for c in UPDATABLE_FIELDS if c in changes]
        if not cols:
            return False
        assignments = ", ".join(f"{c}=%s" for c in cols)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE users SET {assignments} WHERE user_id=%s",
                tuple(_db_value(changes[c]) for c in cols) + (int(user_id),),
            )
            return cur.rowcount > 0

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_id=%s", (int(user_id),))
            return cur.rowcount > 0
