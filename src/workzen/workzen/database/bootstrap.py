from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


@dataclass(frozen=True)
class DemoAccount:
    login_id: str
    name: str
    email: str
    password: str
    role: Role
    department: str
    basic_salary: int
    hra: int
    other_earnings: int


DEMO_ACCOUNTS = (
    DemoAccount("WZAD20240001", "Admin Demo", "admin@workzen.local", "admin123", Role.ADMIN, "Management", 80000, 16000, 4000),
    DemoAccount("WZHR20240001", "Hannah Reyes", "hr@workzen.local", "hr12345", Role.HR, "Human Resources", 50000, 10000, 5000),
    DemoAccount("WZPO20240001", "Paul Officer", "payroll@workzen.local", "payroll123", Role.PAYROLL, "Finance", 45000, 9000, 3000),
    DemoAccount("WZEE20240001", "Emma Employee", "employee@workzen.local", "employee123", Role.EMPLOYEE, "Engineering", 30000, 12000, 3000),
)


def _strip_create_db_and_use(sql: str) -> str:
    # schema.sql names its own database; the configured one wins.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    return re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';' outside of quoted literals."""

    buf: list[str] = []
    quote = ""
    escaped = False

    for ch in sql:
        buf.append(ch)
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = ""
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = "".join(buf[:-1]).strip()
            buf.clear()
            if stmt:
                yield stmt

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(config: DBConfig) -> None:
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    config = DBConfig.from_dict(db_config)
    ensure_database_exists(config)

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))
    conn = DatabaseConnection(config).connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s", config.database)


def ensure_demo_users(db_config: dict) -> None:
    """Upsert one account per role, keyed on e-mail."""

    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(config).connect()
    try:
        cur = conn.cursor(dictionary=True)
        for account in DEMO_ACCOUNTS:
            password_hash = generate_password_hash(account.password)
            cur.execute("SELECT user_id FROM users WHERE email=%s", (account.email,))
            if cur.fetchone():
                cur.execute(
                    """
                    UPDATE users
                    SET name=%s, password_hash=%s, role=%s, department=%s, is_active=1
                    WHERE email=%s
                    """,
                    (account.name, password_hash, account.role.value, account.department, account.email),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO users(login_id, name, email, password_hash, role, department,
                                      year_of_joining, basic_salary, hra, other_earnings)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        account.login_id,
                        account.name,
                        account.email,
                        password_hash,
                        account.role.value,
                        account.department,
                        int(account.login_id[4:8]),
                        account.basic_salary,
                        account.hra,
                        account.other_earnings,
                    ),
                )
        conn.commit()
    finally:
        conn.close()
    logger.info("Demo accounts ready (%d)", len(DEMO_ACCOUNTS))


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
