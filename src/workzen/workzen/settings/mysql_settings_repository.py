from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_decimal
from .model import PayrollSettings
from .repository import SettingsRepository

SETTINGS_ROW_ID = 1


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[PayrollSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT working_days, pf_percent, professional_tax, updated_at
                FROM settings
                WHERE settings_id=%s
                """,
                (SETTINGS_ROW_ID,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return PayrollSettings(
                working_days=int(r["working_days"]),
                pf_percent=normalize_decimal(r["pf_percent"]),
                professional_tax=int(r["professional_tax"]),
                updated_at=r.get("updated_at"),
            )

    def save(self, settings: PayrollSettings) -> PayrollSettings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO settings(settings_id, working_days, pf_percent, professional_tax)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    working_days=VALUES(working_days),
                    pf_percent=VALUES(pf_percent),
                    professional_tax=VALUES(professional_tax),
                    updated_at=CURRENT_TIMESTAMP
                """,
                (SETTINGS_ROW_ID, settings.working_days, settings.pf_percent, settings.professional_tax),
            )
        return self.get() or settings
