"""Schema, seed and demo-account bootstrap for a fresh MySQL database.

Runs on plain (non-pooled) connections: the pool needs the database to exist
before it can be created.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.enums import Role

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "123456"

# (name, email, role, department)
DEMO_USERS = [
    ("Admin Demo", "admin@test.com", Role.ADMIN, "Administration"),
    ("Empleado Demo", "empleado@test.com", Role.EMPLOYEE, "Operations"),
]

# A statement ends at a ';' outside quotes; quoted strings and "--" line
# comments are matched as whole tokens.
_SQL_TOKEN_RE = re.compile(
    r"""
      '(?:[^'\\]|\\.)*'
    | "(?:[^"\\]|\\.)*"
    | --[^\n]*
    | ;
    | [^'";-]+
    | -
    """,
    re.VERBOSE | re.DOTALL,
)
_DB_SWITCH_RE = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.IGNORECASE)


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_config(cls, db_config: dict) -> "DBTarget":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "attendance_app")),
        )


@contextmanager
def _session(target: DBTarget, *, with_database: bool = True) -> Iterator:
    """Plain connection + cursor, committed when the block succeeds."""
    params = {
        "host": target.host,
        "port": target.port,
        "user": target.user,
        "password": target.password,
        "use_pure": True,
    }
    if with_database:
        params["database"] = target.database

    conn = mysql.connector.connect(**params)
    try:
        cur = conn.cursor()
        yield cur
        conn.commit()
    finally:
        conn.close()


def split_sql(script: str) -> List[str]:
    """Split a SQL script into statements, dropping comments and any
    CREATE DATABASE / USE lines so the configured database is always used."""

    statements: List[str] = []
    current: List[str] = []

    for token in _SQL_TOKEN_RE.findall(script):
        if token.startswith("--"):
            continue
        if token == ";":
            statement = "".join(current).strip()
            current = []
            if statement and not _DB_SWITCH_RE.match(statement):
                statements.append(statement)
            continue
        current.append(token)

    tail = "".join(current).strip()
    if tail and not _DB_SWITCH_RE.match(tail):
        statements.append(tail)
    return statements


def _run_script(db_config: dict, path: str | Path) -> int:
    statements = split_sql(Path(path).read_text(encoding="utf-8"))
    with _session(DBTarget.from_config(db_config)) as cur:
        for statement in statements:
            cur.execute(statement)
    return len(statements)


def ensure_database_exists(db_config: dict) -> None:
    target = DBTarget.from_config(db_config)
    with _session(target, with_database=False) as cur:
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    """Idempotent: the schema only uses CREATE TABLE IF NOT EXISTS."""
    ensure_database_exists(db_config)
    count = _run_script(db_config, schema_path)
    logger.debug("Applied %s schema statements from %s", count, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    count = _run_script(db_config, seed_path)
    logger.debug("Applied %s seed statements from %s", count, seed_path)


def ensure_demo_users(db_config: dict) -> None:
    """Create the demo admin/employee accounts, or reset them to DEMO_PASSWORD."""

    with _session(DBTarget.from_config(db_config)) as cur:
        for name, email, role, department in DEMO_USERS:
            cur.execute(
                """
                INSERT INTO users (name, email, password_hash, role, department, is_active)
                VALUES (%s, %s, %s, %s, %s, 1)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name), password_hash=VALUES(password_hash),
                    role=VALUES(role), department=VALUES(department), is_active=1
                """,
                (name, email, generate_password_hash(DEMO_PASSWORD), role.value, department),
            )
    logger.info("Demo accounts ready: %s", ", ".join(email for _, email, _, _ in DEMO_USERS))


def list_tables(db_config: dict) -> List[str]:
    with _session(DBTarget.from_config(db_config)) as cur:
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
