from __future__ import annotations

from pathlib import Path

from src.geo_attendance.geo_attendance.database.bootstrap import split_sql

DATABASE_DIR = Path(__file__).resolve().parents[2] / "database"


def test_schema_yields_one_statement_per_table():
    statements = split_sql((DATABASE_DIR / "schema.sql").read_text(encoding="utf-8"))
    assert [s.split("(")[0].split()[-1] for s in statements] == ["users", "attendance", "settings"]
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_seed_has_default_settings():
    statements = split_sql((DATABASE_DIR / "seed.sql").read_text(encoding="utf-8"))
    assert len(statements) == 1
    assert statements[0].startswith("INSERT IGNORE INTO settings")
    assert "'-86.75342'" in statements[0]


def test_semicolons_inside_quotes_do_not_split():
    script = "INSERT INTO t VALUES ('a;b', \"c;d\");\n-- trailing; comment\nSELECT 1"
    assert split_sql(script) == ["INSERT INTO t VALUES ('a;b', \"c;d\")", "SELECT 1"]


def test_database_switches_are_dropped():
    assert split_sql("CREATE DATABASE x;\nUSE x;\nSELECT 2;") == ["SELECT 2"]
