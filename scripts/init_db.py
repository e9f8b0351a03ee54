"""Create the attendance tables and, with --seed, the default settings and demo accounts."""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.geo_attendance.geo_attendance.common.logging_config import configure_logging
from src.geo_attendance.geo_attendance.database.bootstrap import (
    apply_schema,
    apply_seed_sql,
    ensure_demo_users,
    list_tables,
)

logger = logging.getLogger("geo_attendance.init_db")

DATABASE_DIR = REPO_ROOT / "database"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", action="store_true", help="also load seed.sql and reset demo accounts")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
    logger.info("Applied schema.sql to %s (tables=%s)", target, len(list_tables(db_config)))

    if args.seed:
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        ensure_demo_users(db_config)
        logger.info("Seeded default settings and demo accounts into %s", target)


if __name__ == "__main__":
    main()
