from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import LeaveRequest
from .repository import LeaveRepository

_COLUMNS = "leave_id, user_id, leave_type, start_date, end_date, reason, status, created_at"


def _row_to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        leave_id=int(r["leave_id"]),
        user_id=int(r["user_id"]),
        leave_type=LeaveType(r["leave_type"]),
        start_date=normalize_mysql_date(r["start_date"]),
        end_date=normalize_mysql_date(r["end_date"]),
        reason=r["reason"],
        status=LeaveStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_leave(
        self,
        *,
        user_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leaves(user_id, leave_type, start_date, end_date, reason, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), leave_type.value, start_date, end_date, reason, LeaveStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get_leave(self, *, leave_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leaves WHERE leave_id=%s", (int(leave_id),))
            r = fetchone(cur)
            return _row_to_leave(r) if r else None

    def list_leaves(
        self,
        *,
        user_id: Optional[int] = None,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveRequest]:
        clauses = ["1=1"]
        params: list[object] = []

        if user_id is not None:
            clauses.append("user_id=%s")
            params.append(int(user_id))
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM leaves WHERE {where} ORDER BY created_at DESC, leave_id DESC",
                tuple(params),
            )
            return [_row_to_leave(r) for r in fetchall(cur)]

    def list_overlapping(
        self,
        *,
        user_id: int,
        start_date: date,
        end_date: date,
        status: LeaveStatus = LeaveStatus.APPROVED,
    ) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leaves
                WHERE user_id=%s AND status=%s AND start_date <= %s AND end_date >= %s
                ORDER BY start_date ASC
                """,
                (int(user_id), status.value, end_date, start_date),
            )
            return [_row_to_leave(r) for r in fetchall(cur)]

    def update_status(self, *, leave_id: int, status: LeaveStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE leaves SET status=%s WHERE leave_id=%s",
                (status.value, int(leave_id)),
            )
            return cur.rowcount > 0
