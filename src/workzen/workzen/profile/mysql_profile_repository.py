from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ProfileEntryKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ProfileEntry
from .repository import ProfileRepository

# kind -> (table, id column, name column)
_TABLES = {
    ProfileEntryKind.SKILL: ("skills", "skill_id", "skill_name"),
    ProfileEntryKind.CERTIFICATION: ("certifications", "certification_id", "certification_name"),
}


def _row_to_entry(kind: ProfileEntryKind, r: dict) -> ProfileEntry:
    return ProfileEntry(
        entry_id=int(r["entry_id"]),
        user_id=int(r["user_id"]),
        kind=kind,
        name=r["name"],
        created_at=r.get("created_at"),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_entries(self, kind: ProfileEntryKind, user_id: int) -> Sequence[ProfileEntry]:
        table, id_col, name_col = _TABLES[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {id_col} AS entry_id, user_id, {name_col} AS name, created_at
                FROM {table}
                WHERE user_id=%s
                ORDER BY created_at ASC, {id_col} ASC
                """,
                (int(user_id),),
            )
            return [_row_to_entry(kind, r) for r in fetchall(cur)]

    def get_entry(self, kind: ProfileEntryKind, entry_id: int) -> Optional[ProfileEntry]:
        table, id_col, name_col = _TABLES[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {id_col} AS entry_id, user_id, {name_col} AS name, created_at FROM {table} WHERE {id_col}=%s",
                (int(entry_id),),
            )
            row = fetchone(cur)
            return _row_to_entry(kind, row) if row else None

    def add_entry(self, kind: ProfileEntryKind, *, user_id: int, name: str) -> int:
        table, _, name_col = _TABLES[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO {table}(user_id, {name_col}) VALUES(%s,%s)", (int(user_id), name))
            return int(cur.lastrowid)

    def delete_entry(self, kind: ProfileEntryKind, entry_id: int) -> bool:
        table, id_col, _ = _TABLES[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {table} WHERE {id_col}=%s", (int(entry_id),))
            return cur.rowcount > 0
