from __future__ import annotations

import io

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from .service import REPORT_COLUMNS, ReportData

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SHEET_NAME = "Attendance"

_HEADER_FONT = Font(bold=True, color="FFFFFFFF")
_HEADER_FILL = PatternFill(fill_type="solid", fgColor="FF0070C0")
_HEADER_ALIGNMENT = Alignment(vertical="center", horizontal="center")
_MIN_COLUMN_WIDTH = 10


def render_xlsx(report: ReportData) -> io.BytesIO:
    """Render report rows to an in-memory .xlsx workbook (nothing written to disk)."""

    keys = [key for key, _ in REPORT_COLUMNS]
    headers = [header for _, header in REPORT_COLUMNS]
    df = pd.DataFrame([[row.get(k) for k in keys] for row in report.rows], columns=headers)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
        ws = writer.sheets[SHEET_NAME]

        for cell in ws[1]:
            cell.font = _HEADER_FONT
            cell.fill = _HEADER_FILL
            cell.alignment = _HEADER_ALIGNMENT

        for idx, column in enumerate(ws.iter_cols(min_row=1, max_row=ws.max_row), start=1):
            longest = max((len(str(c.value)) for c in column if c.value is not None), default=0)
            width = _MIN_COLUMN_WIDTH if longest < _MIN_COLUMN_WIDTH else longest + 2
            ws.column_dimensions[get_column_letter(idx)].width = width

    output.seek(0)
    return output


def report_filename(start: str, end: str) -> str:
    return f"attendance_report_{start}_to_{end}.xlsx"
