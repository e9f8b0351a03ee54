from __future__ import annotations

import importlib
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .common.logging_config import configure_logging
from .container import AppOptions, Container, build_container
from .core.exceptions import InternalError
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .database.mysql_base import db_cursor, fetchall
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _options_from(settings) -> AppOptions:
    return AppOptions(
        jwt_secret=getattr(settings, "JWT_SECRET"),
        jwt_expires_hours=int(getattr(settings, "JWT_EXPIRES_HOURS", 24)),
        extended_hours=bool(getattr(settings, "EXTENDED_HOURS_MODE", False)),
        enforce_geofence=bool(getattr(settings, "ENFORCE_GEOFENCE", False)),
        office_address=getattr(settings, "OFFICE_ADDRESS", "Residencial Monte Real, La Ceiba"),
        timezone=getattr(settings, "APP_TIMEZONE", None),
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    Pass a pre-built ``container`` (e.g. wired with in-memory repositories) to
    skip database bootstrap entirely.
    """

    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            ensure_demo_users(db_config)
            logger.info("demo seed ready")

        container = build_container(db_config=db_config, options=_options_from(settings))

    app.extensions["geo_attendance"] = container

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify(
            {
                "status": "ok",
                "message": "Server is running",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    @app.route("/api/test-db", methods=["GET"], endpoint="test_db")
    def test_db():
        if container.conn is None:
            return jsonify({"status": "ok", "database": "not configured"})
        try:
            with db_cursor(container.conn) as (_, cur):
                cur.execute("SELECT 1 AS test")
                rows = fetchall(cur)
        except InternalError:
            logger.exception("Database ping failed")
            return jsonify({"status": "error", "database": "disconnected"}), 500
        return jsonify({"status": "ok", "database": "connected", "data": rows})

    register_error_handlers(app)
    register_users(app, container)
    register_attendance(app, container)
    register_settings(app, container)
    register_reports(app, container)

    return app
