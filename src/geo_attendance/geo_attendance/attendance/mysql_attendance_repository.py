from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

_RECORD_COLUMNS = """
    id, user_id, user_name, work_date, check_in_time, check_out_time,
    check_in_lat, check_in_lng, check_out_lat, check_out_lng,
    status, total_hours, notes, created_at
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        user_id=int(r["user_id"]),
        user_name=r["user_name"],
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_in_lat=as_float(r.get("check_in_lat")),
        check_in_lng=as_float(r.get("check_in_lng")),
        check_out_time=r.get("check_out_time"),
        check_out_lat=as_float(r.get("check_out_lat")),
        check_out_lng=as_float(r.get("check_out_lng")),
        status=r.get("status"),
        total_hours=as_float(r.get("total_hours")),
        notes=r.get("notes"),
        created_at=r.get("created_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_RECORD_COLUMNS} FROM attendance WHERE id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_user_and_date(self, user_id: int, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance
                WHERE user_id=%s AND work_date=%s
                ORDER BY check_in_time DESC
                """,
                (int(user_id), work_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create_checkin(
        self,
        *,
        user_id: int,
        user_name: str,
        work_date: date,
        check_in_time: datetime,
        latitude: float,
        longitude: float,
        status: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(user_id, user_name, work_date, check_in_time, check_in_lat, check_in_lng, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), user_name, work_date, check_in_time, latitude, longitude, status),
            )
            return int(cur.lastrowid)

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        latitude: float,
        longitude: float,
        total_hours: float,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # The IS NULL guard makes a concurrent second checkout a no-op.
            cur.execute(
                """
                UPDATE attendance
                SET check_out_time=%s, check_out_lat=%s, check_out_lng=%s, total_hours=%s
                WHERE id=%s AND check_out_time IS NULL
                """,
                (check_out_time, latitude, longitude, total_hours, int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_for_user(self, user_id: int, *, limit: int, offset: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance
                WHERE user_id=%s
                ORDER BY check_in_time DESC
                LIMIT %s OFFSET %s
                """,
                (int(user_id), int(limit), int(offset)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_latest_pending(self, user_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance
                WHERE user_id=%s AND check_out_time IS NULL
                ORDER BY check_in_time DESC
                LIMIT 1
                """,
                (int(user_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_date_range(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if user_id is not None:
            clauses.append("user_id=%s")
            params.append(int(user_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance
                WHERE {where}
                ORDER BY check_in_time DESC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses = ["a.work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if user_id is not None:
            clauses.append("a.user_id=%s")
            params.append(int(user_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    a.id, a.user_id, u.name AS user_name, u.email, u.department,
                    a.check_in_time, a.check_out_time,
                    a.check_in_lat, a.check_in_lng, a.check_out_lat, a.check_out_lng,
                    a.status, a.total_hours
                FROM attendance a
                JOIN users u ON u.id = a.user_id
                WHERE {where}
                ORDER BY a.check_in_time DESC
                """,
                tuple(params),
            )
            return [
                AttendanceReportRow(
                    attendance_id=int(r["id"]),
                    user_id=int(r["user_id"]),
                    user_name=r["user_name"],
                    email=r["email"],
                    department=r.get("department"),
                    check_in_time=r.get("check_in_time"),
                    check_out_time=r.get("check_out_time"),
                    check_in_lat=as_float(r.get("check_in_lat")),
                    check_in_lng=as_float(r.get("check_in_lng")),
                    check_out_lat=as_float(r.get("check_out_lat")),
                    check_out_lng=as_float(r.get("check_out_lng")),
                    status=r.get("status"),
                    total_hours=as_float(r.get("total_hours")),
                )
                for r in fetchall(cur)
            ]
