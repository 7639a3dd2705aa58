from __future__ import annotations

from typing import Optional

from ..core.enums import AccessLevel
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import MODULES, UserPermission
from .repository import PermissionRepository


class MySQLPermissionRepository(PermissionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user(self, user_id: int) -> Optional[UserPermission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT user_id, {', '.join(MODULES)} FROM user_permissions WHERE user_id=%s",
                (int(user_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return UserPermission(
                user_id=int(r["user_id"]),
                **{m: AccessLevel(r[m]) for m in MODULES},
            )

    def upsert(self, permission: UserPermission) -> None:
        updates = ", ".join(f"{m}=VALUES({m})" for m in MODULES)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO user_permissions(user_id, {', '.join(MODULES)})
                VALUES(%s{',%s' * len(MODULES)})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                (permission.user_id,) + tuple(permission.level_for(m).value for m in MODULES),
            )
