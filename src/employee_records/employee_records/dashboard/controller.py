from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date, to_iso
from ..common.http import str_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/summary", methods=["GET"], endpoint="dashboard_summary")
    def dashboard_summary():
        as_of = str_arg("today")
        summary = container.dashboard_service.summary(today=parse_iso_date(as_of) if as_of else None)
        return jsonify(
            {
                "asOf": to_iso(summary.as_of),
                "today": summary.today.as_dict(),
                "month": summary.month.as_dict(),
                "totalEmployees": summary.total_employees,
                "employeesByStatus": summary.employees_by_status,
            }
        )
