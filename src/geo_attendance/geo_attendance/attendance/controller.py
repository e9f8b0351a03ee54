from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.http import auth_decorators, error_response, json_body
from ..container import Container
from .schemas import CheckInRequest, CheckOutRequest, DateRangeQuery, HistoryQuery


def register(app: Flask, container: Container) -> None:
    token_required, _ = auth_decorators(container.token_service)

    def _can_view(user_id: int) -> bool:
        return g.current_user.is_admin or g.current_user.user_id == user_id

    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="attendance_checkin")
    @token_required
    def checkin():
        payload = CheckInRequest.from_payload(json_body())
        record = container.attendance_service.check_in(payload, actor=g.current_user)
        return jsonify({"message": "Check-in registered", "attendance": record.to_dict()}), 201

    @app.route("/api/attendance/checkout/<int:attendance_id>", methods=["PUT"], endpoint="attendance_checkout")
    @token_required
    def checkout(attendance_id: int):
        payload = CheckOutRequest.from_payload(json_body())
        record_id = container.attendance_service.check_out(attendance_id, payload, actor=g.current_user)
        return jsonify({"message": "Check-out registered", "attendance_id": record_id})

    @app.route("/api/attendance/user/<int:user_id>", methods=["GET"], endpoint="attendance_user_history")
    @token_required
    def user_history(user_id: int):
        if not _can_view(user_id):
            return error_response("You can only view your own attendance", 403)
        query = HistoryQuery.from_args(request.args)
        records = container.attendance_service.history(user_id, query)
        return jsonify({"attendances": [r.to_dict() for r in records]})

    @app.route("/api/attendance/latest-pending/<int:user_id>", methods=["GET"], endpoint="attendance_latest_pending")
    @token_required
    def latest_pending(user_id: int):
        if not _can_view(user_id):
            return error_response("You can only view your own attendance", 403)
        record = container.attendance_service.latest_pending(user_id)
        return jsonify(record.to_dict() if record else None)

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @token_required
    def today():
        records = container.attendance_service.today()
        return jsonify({"attendances": [r.to_dict() for r in records]})

    @app.route("/api/attendance/date-range", methods=["GET"], endpoint="attendance_date_range")
    @token_required
    def date_range():
        query = DateRangeQuery.from_mapping(request.args)
        records = container.attendance_service.date_range(query)
        return jsonify({"attendances": [r.to_dict() for r in records]})
