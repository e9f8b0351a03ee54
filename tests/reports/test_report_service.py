from __future__ import annotations

from datetime import date, datetime

from src.geo_attendance.geo_attendance.attendance.model import AttendanceReportRow
from src.geo_attendance.geo_attendance.attendance.schemas import DateRangeQuery
from src.geo_attendance.geo_attendance.reports.service import REPORT_COLUMNS, ReportService, project_row


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def get_report_rows(self, *, start_date: date, end_date: date, user_id=None):
        self.last_args = {"start_date": start_date, "end_date": end_date, "user_id": user_id}
        return self._rows


def completed_row(**overrides) -> AttendanceReportRow:
    values = dict(
        attendance_id=7,
        user_id=2,
        user_name="Empleado Demo",
        email="empleado@test.com",
        department="Operations",
        check_in_time=datetime(2024, 1, 10, 8, 5, 9),
        check_out_time=datetime(2024, 1, 10, 17, 35, 0),
        check_in_lat=15.7634,
        check_in_lng=-86.75342,
        check_out_lat=15.76401,
        check_out_lng=-86.7541,
        status="on-time",
        total_hours=9.5,
    )
    values.update(overrides)
    return AttendanceReportRow(**values)


def test_completed_row_projection():
    assert project_row(completed_row()) == {
        "id": 7,
        "user_name": "Empleado Demo",
        "email": "empleado@test.com",
        "department": "Operations",
        "check_in_date": "10/01/2024",
        "check_in_time": "08:05:09",
        "check_out_date": "10/01/2024",
        "check_out_time": "17:35:00",
        "status": "on-time",
        "total_hours": "9.50 hours",
        "check_in_location": "15.763400, -86.753420",
        "check_out_location": "15.764010, -86.754100",
    }


def test_pending_row_uses_placeholders():
    row = project_row(
        completed_row(check_out_time=None, check_out_lat=None, check_out_lng=None, total_hours=None, department=None)
    )
    assert row["check_out_date"] == "N/A"
    assert row["check_out_time"] == "N/A"
    assert row["check_out_location"] == "N/A"
    assert row["total_hours"] == "N/A"
    assert row["department"] == "N/A"


def test_zero_values_are_not_placeholders():
    row = project_row(completed_row(total_hours=0.0, check_in_lat=0.0, check_in_lng=0.0))
    assert row["total_hours"] == "0.00 hours"
    assert row["check_in_location"] == "0.000000, 0.000000"


def test_projection_covers_every_export_column():
    assert set(project_row(completed_row())) == {key for key, _ in REPORT_COLUMNS}


def test_report_forwards_filters_and_counts_rows():
    repo = FakeAttendanceRepo([completed_row(), completed_row(attendance_id=8)])
    query = DateRangeQuery(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31), user_id=2)

    report = ReportService(repo).build_attendance_report(query)

    assert repo.last_args == {"start_date": date(2024, 1, 1), "end_date": date(2024, 1, 31), "user_id": 2}
    assert report.period == "2024-01-01 to 2024-01-31"
    assert report.total_records == 2
    assert [r["id"] for r in report.to_dict()["data"]] == [7, 8]


def test_empty_report():
    report = ReportService(FakeAttendanceRepo([])).build_attendance_report(
        DateRangeQuery(start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))
    )
    assert report.to_dict() == {"period": "2024-01-01 to 2024-01-01", "total_records": 0, "data": []}
