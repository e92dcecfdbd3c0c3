from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_int
from ..common.web import admin_required, api_view, current_role, range_args, to_json
from ..container import Container
from ..core.exceptions import ValidationError
from ..payroll.service import default_pay_period


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:employee_id>/daily-log", methods=["GET"], endpoint="employee_daily_log")
    @api_view
    def employee_daily_log(employee_id: int):
        start, end = range_args(default_pay_period())
        logs = container.attendance_service.daily_log(employee_id, start, end)
        return jsonify({"success": True, "start": start, "end": end, "days": to_json(logs)})

    @app.route("/api/employees/<int:employee_id>/summary", methods=["GET"], endpoint="employee_summary")
    @api_view
    def employee_summary(employee_id: int):
        start, end = range_args(default_pay_period())
        summary = container.attendance_service.summary(employee_id, start, end)
        return jsonify({"success": True, "start": start, "end": end, "summary": to_json(summary)})

    @app.route("/api/employees/<int:employee_id>/overtime/<date_key>", methods=["POST"], endpoint="employee_overtime_decide")
    @admin_required
    @api_view
    def employee_overtime_decide(employee_id: int, date_key: str):
        data = request.get_json(silent=True) or {}
        if "approved" not in data:
            raise ValidationError("approved is required")
        minutes = data.get("minutes")
        stored = container.overtime_service.decide(
            current_role=current_role(),
            employee_id=employee_id,
            date_key=date_key,
            approved=bool(data["approved"]),
            minutes=require_int(minutes, "minutes") if minutes is not None else None,
        )
        return jsonify({"success": True, "date_key": date_key, "approved_minutes": stored})

    @app.route("/api/employees/<int:employee_id>/schedule/<date_key>", methods=["PUT", "DELETE"], endpoint="employee_schedule")
    @admin_required
    @api_view
    def employee_schedule(employee_id: int, date_key: str):
        svc = container.schedule_service
        if request.method == "DELETE":
            svc.clear(current_role=current_role(), employee_id=employee_id, date_key=date_key)
            return jsonify({"success": True})

        data = request.get_json(silent=True) or {}
        if data.get("off"):
            entry = svc.mark_off(current_role=current_role(), employee_id=employee_id, date_key=date_key)
        else:
            entry = svc.assign(
                current_role=current_role(),
                employee_id=employee_id,
                date_key=date_key,
                time_in=data.get("time_in") or "",
                time_out=data.get("time_out") or "",
            )
        return jsonify({"success": True, "schedule": to_json(entry)})

    @app.route("/api/attendance/import", methods=["POST"], endpoint="attendance_import")
    @admin_required
    @api_view
    def attendance_import():
        rows = request.get_json(silent=True)
        if not isinstance(rows, list):
            raise ValidationError("Expected a JSON list of attendance rows")
        stored = container.attendance_service.import_records(rows)
        return jsonify({"success": True, "imported": stored})
