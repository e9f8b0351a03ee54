from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_OFFICE_ADDRESS, DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT_SECONDS, DEFAULT_TOKEN_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.security import TokenService
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class AppOptions:
    """Behaviour switches read from the settings module."""

    jwt_secret: str
    jwt_expires_hours: int = DEFAULT_TOKEN_HOURS
    extended_hours: bool = False
    enforce_geofence: bool = False
    office_address: str = DEFAULT_OFFICE_ADDRESS
    timezone: Optional[str] = None


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    attendance_repo: AttendanceRepository
    settings_repo: SettingsRepository

    token_service: TokenService
    auth_service: AuthService
    user_service: UserService
    settings_service: SettingsService
    attendance_service: AttendanceService
    report_service: ReportService


def wire_container(
    *,
    conn: Optional[DatabaseConnection],
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    settings_repo: SettingsRepository,
    options: AppOptions,
    clock: Optional[Callable[[], datetime]] = None,
) -> Container:
    """Build services on top of the given repositories (MySQL or in-memory)."""

    if clock is None:
        tz_name = options.timezone

        def clock() -> datetime:
            return now_local(tz_name)

    token_service = TokenService(options.jwt_secret, expires_hours=options.jwt_expires_hours)
    settings_service = SettingsService(
        settings_repo,
        extended_hours=options.extended_hours,
        office_address=options.office_address,
    )

    return Container(
        conn=conn,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        token_service=token_service,
        auth_service=AuthService(users_repo, token_service),
        user_service=UserService(users_repo),
        settings_service=settings_service,
        attendance_service=AttendanceService(
            attendance_repo,
            users_repo,
            settings_service,
            enforce_geofence=options.enforce_geofence,
            clock=clock,
        ),
        report_service=ReportService(attendance_repo),
    )


def build_container(*, db_config: dict, options: AppOptions) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
        pool_timeout=float(db_config.get("pool_timeout", DEFAULT_POOL_TIMEOUT_SECONDS)),
    )
    conn = DatabaseConnection(config)

    return wire_container(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        options=options,
    )
