from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import int_arg, json_body, page_to_json, str_arg
from ..container import Container
from .schemas import attendance_to_json, parse_attendance_payload


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        page = service.list_page(
            page=int_arg("page", 1),
            limit=int_arg("limit", int(app.config["PAGE_SIZE"])),
            name_filter=str_arg("name"),
            status_filter=str_arg("status"),
            date_filter=str_arg("date"),
        )
        names = container.employee_service.name_lookup() if page.data else {}
        return jsonify(page_to_json(page, [attendance_to_json(r, names) for r in page.data]))

    @app.route("/api/attendance/all", methods=["GET"], endpoint="all_attendance")
    def all_attendance():
        return jsonify([attendance_to_json(r) for r in service.get_all()])

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        record = service.record(**parse_attendance_payload(json_body()))
        return jsonify(attendance_to_json(record))
