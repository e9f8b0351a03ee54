from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import auth_decorators, json_body
from ..common.validators import require_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    token_required, admin_required = auth_decorators(container.token_service)

    @app.route("/api/settings/work-schedule", methods=["GET"], endpoint="settings_work_schedule")
    @token_required
    def get_work_schedule():
        return jsonify(container.settings_service.get_work_schedule().to_dict())

    @app.route("/api/settings/work-schedule", methods=["PUT"], endpoint="settings_work_schedule_update")
    @admin_required
    def update_work_schedule():
        data = require_object(json_body())
        schedule = container.settings_service.update_work_schedule(
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            tolerance_minutes=data.get("tolerance_minutes"),
            work_days=data.get("work_days"),
        )
        return jsonify({"message": "Work schedule updated", "schedule": schedule})

    @app.route("/api/settings/office-location", methods=["GET"], endpoint="settings_office_location")
    @token_required
    def get_office_location():
        return jsonify(container.settings_service.get_office_location().to_dict())

    @app.route("/api/settings/office-location", methods=["PUT"], endpoint="settings_office_location_update")
    @admin_required
    def update_office_location():
        data = require_object(json_body())
        location = container.settings_service.update_office_location(
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            radius=data.get("radius"),
        )
        return jsonify({"message": "Office location updated", "location": location})
