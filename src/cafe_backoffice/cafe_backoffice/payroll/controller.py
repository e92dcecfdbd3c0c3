from __future__ import annotations

from dataclasses import asdict

from flask import Flask, Response, jsonify, request

from ..common.web import admin_required, api_view, range_args, to_json
from ..container import Container
from ..core.exceptions import ValidationError
from .export import to_csv_bytes, to_xlsx_bytes
from .model import PayrollRecord
from .service import default_pay_period


def _record_json(record: PayrollRecord) -> dict:
    data = asdict(record)
    data["total_hours"] = record.total_hours
    data["deductions"]["total"] = record.deductions.total
    return data


def register(app: Flask, container: Container) -> None:
    svc = container.payroll_service

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_list")
    @api_view
    def payroll_list():
        start, end = range_args(default_pay_period())
        records = svc.generate(start, end)
        summary = svc.period_summary(records, start, end)
        return jsonify(
            {
                "success": True,
                "start": start,
                "end": end,
                "records": [_record_json(r) for r in records],
                "summary": to_json(summary),
            }
        )

    def _export(filename: str, payload: bytes, mimetype: str) -> Response:
        return Response(
            payload,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/payroll.csv", methods=["GET"], endpoint="payroll_csv")
    @admin_required
    @api_view
    def payroll_csv():
        start, end = range_args(default_pay_period())
        records = svc.get_snapshot(start, end) or svc.generate(start, end)
        return _export(f"payroll_{start}_{end}.csv", to_csv_bytes(records), "text/csv")

    @app.route("/api/payroll.xlsx", methods=["GET"], endpoint="payroll_xlsx")
    @admin_required
    @api_view
    def payroll_xlsx():
        start, end = range_args(default_pay_period())
        records = svc.get_snapshot(start, end) or svc.generate(start, end)
        return _export(
            f"payroll_{start}_{end}.xlsx",
            to_xlsx_bytes(records),
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    @app.route("/api/payroll/snapshot", methods=["GET", "POST"], endpoint="payroll_snapshot")
    @admin_required
    @api_view
    def payroll_snapshot():
        start, end = range_args(default_pay_period())
        if request.method == "GET":
            records = svc.get_snapshot(start, end)
            if records is None:
                return jsonify({"success": False, "message": "No saved payroll for this period"}), 404
            return jsonify({"success": True, "records": [_record_json(r) for r in records]})

        data = request.get_json(silent=True) or {}
        adjustments = data.get("adjustments") or {}
        if not isinstance(adjustments, dict):
            raise ValidationError("adjustments must be an object keyed by employee id")

        records = []
        for record in svc.generate(start, end):
            change = adjustments.get(str(record.employee_id)) or {}
            if change:
                record = svc.adjust(
                    record,
                    service_charge=change.get("service_charge"),
                    custom_deduction=change.get("custom_deduction"),
                    deduction_notes=change.get("notes"),
                )
            records.append(record)
        svc.save_snapshot(start, end, records)
        return jsonify({"success": True, "records": [_record_json(r) for r in records]})
