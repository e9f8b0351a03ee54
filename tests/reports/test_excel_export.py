from __future__ import annotations

from openpyxl import load_workbook

from src.geo_attendance.geo_attendance.reports.excel import SHEET_NAME, render_xlsx, report_filename
from src.geo_attendance.geo_attendance.reports.service import REPORT_COLUMNS, ReportData

ROW = {
    "id": 7,
    "user_name": "Empleado Demo",
    "email": "empleado@test.com",
    "department": "Operations",
    "check_in_date": "10/01/2024",
    "check_in_time": "08:05:09",
    "check_out_date": "N/A",
    "check_out_time": "N/A",
    "status": "on-time",
    "total_hours": "N/A",
    "check_in_location": "15.763400, -86.753420",
    "check_out_location": "N/A",
}


def test_workbook_has_header_and_rows():
    data = render_xlsx(ReportData(period="2024-01-10 to 2024-01-10", rows=[ROW]))

    ws = load_workbook(data)[SHEET_NAME]
    rows = list(ws.iter_rows(values_only=True))
    assert list(rows[0]) == [header for _, header in REPORT_COLUMNS]
    assert rows[1][0] == 7
    assert rows[1][1] == "Empleado Demo"
    assert rows[1][-2] == "15.763400, -86.753420"
    assert len(rows) == 2


def test_header_is_styled_and_columns_sized():
    ws = load_workbook(render_xlsx(ReportData(period="p", rows=[ROW])))[SHEET_NAME]

    assert ws["A1"].font.bold
    assert ws["A1"].fill.fill_type == "solid"
    # "ID" and 7 are short: minimum width applies
    assert ws.column_dimensions["A"].width == 10
    # "15.763400, -86.753420" is 21 characters
    assert ws.column_dimensions["K"].width == 23


def test_empty_report_still_has_header():
    ws = load_workbook(render_xlsx(ReportData(period="p", rows=[])))[SHEET_NAME]
    assert ws.max_row == 1
    assert ws["B1"].value == "Employee"


def test_report_filename():
    assert report_filename("2024-01-01", "2024-01-31") == "attendance_report_2024-01-01_to_2024-01-31.xlsx"
