from __future__ import annotations

from flask import Flask, jsonify, send_file

from ..attendance.schemas import DateRangeQuery
from ..common.http import auth_decorators, json_body
from ..common.validators import require_object
from ..container import Container
from ..core.enums import ReportFormat
from ..core.exceptions import ValidationError
from .excel import XLSX_MIMETYPE, render_xlsx, report_filename


def register(app: Flask, container: Container) -> None:
    _, admin_required = auth_decorators(container.token_service)

    @app.route("/api/reports/generate", methods=["POST"], endpoint="reports_generate")
    @admin_required
    def generate_report():
        data = require_object(json_body())
        query = DateRangeQuery.from_mapping(data)
        try:
            fmt = ReportFormat(data.get("format") or ReportFormat.EXCEL.value)
        except ValueError:
            raise ValidationError("format must be 'excel' or 'json'") from None

        report = container.report_service.build_attendance_report(query)

        if fmt == ReportFormat.EXCEL:
            return send_file(
                render_xlsx(report),
                mimetype=XLSX_MIMETYPE,
                as_attachment=True,
                download_name=report_filename(query.start_date.isoformat(), query.end_date.isoformat()),
            )
        return jsonify({"report": report.to_dict()})
