from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, api_view, range_args, to_json
from ..container import Container
from ..core.exceptions import ValidationError
from ..payroll.service import default_pay_period


def register(app: Flask, container: Container) -> None:
    @app.route("/api/service-charge", methods=["GET"], endpoint="service_charge_distribution")
    @api_view
    def service_charge_distribution():
        start, end = range_args(default_pay_period())
        result = container.service_charge_service.distribute(start, end)
        return jsonify(
            {
                "success": True,
                "start": start,
                "end": end,
                "daily_service_charge_totals": result.daily_service_charge_totals,
                "undistributed_pools": result.undistributed_pools,
                "daily_minutes": to_json(result.daily_minutes),
                "allocations": to_json({k: v.rounded() for k, v in result.allocations.items()}),
            }
        )

    @app.route("/api/employees/<int:employee_id>/service-charge", methods=["GET"], endpoint="employee_service_charge")
    @api_view
    def employee_service_charge(employee_id: int):
        start, end = range_args(default_pay_period())
        breakdown = container.service_charge_service.breakdown(employee_id, start, end)
        return jsonify({"success": True, "start": start, "end": end, "breakdown": to_json(breakdown)})

    @app.route("/api/sales/import", methods=["POST"], endpoint="sales_import")
    @admin_required
    @api_view
    def sales_import():
        rows = request.get_json(silent=True)
        if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
            raise ValidationError("Expected a JSON list of sales rows")
        records = container.sales_service.normalize_rows(rows)
        stored = container.sales_repo.replace_all(records)
        return jsonify({"success": True, "imported": stored})
