from __future__ import annotations

import json
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_json
from .model import PayrunBatch, PayrunItem
from .repository import PayrunRepository


class MySQLPayrunRepository(PayrunRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, batch: PayrunBatch) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payruns(month, generated_by, total_payroll, items)
                VALUES(%s,%s,%s,%s)
                """,
                (
                    batch.month,
                    int(batch.generated_by),
                    int(batch.total_payroll),
                    json.dumps([i.to_dict() for i in batch.items]),
                ),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[PayrunBatch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payrun_id, month, generated_by, total_payroll, items, created_at
                FROM payruns
                ORDER BY created_at DESC, payrun_id DESC
                """
            )
            return [
                PayrunBatch(
                    payrun_id=int(r["payrun_id"]),
                    month=r["month"],
                    generated_by=int(r["generated_by"]),
                    total_payroll=int(r["total_payroll"]),
                    items=tuple(PayrunItem.from_dict(i) for i in normalize_json(r["items"]) or []),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]
