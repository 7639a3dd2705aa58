from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_decimal
from .model import HOUR_FIELDS, MONEY_FIELDS, PERCENT_FIELDS, SalaryStructure
from .repository import SalaryStructureRepository

_COLUMNS = ("working_days",) + MONEY_FIELDS + PERCENT_FIELDS + HOUR_FIELDS


class MySQLSalaryStructureRepository(SalaryStructureRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user(self, user_id: int) -> Optional[SalaryStructure]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT user_id, {', '.join(_COLUMNS)}, created_at, updated_at
                FROM salary_components
                WHERE user_id=%s
                """,
                (int(user_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            values = {name: int(r[name]) for name in ("working_days",) + MONEY_FIELDS}
            values.update({name: normalize_decimal(r[name]) for name in PERCENT_FIELDS + HOUR_FIELDS})
            return SalaryStructure(
                user_id=int(r["user_id"]),
                created_at=r.get("created_at"),
                updated_at=r.get("updated_at"),
                **values,
            )

    def upsert(self, structure: SalaryStructure) -> SalaryStructure:
        updates = ", ".join(f"{c}=VALUES({c})" for c in _COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO salary_components(user_id, {', '.join(_COLUMNS)})
                VALUES(%s{',%s' * len(_COLUMNS)})
                ON DUPLICATE KEY UPDATE {updates}, updated_at=CURRENT_TIMESTAMP
                """,
                (structure.user_id,) + tuple(getattr(structure, c) for c in _COLUMNS),
            )
        return self.get_for_user(structure.user_id) or structure
