from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import int_arg, json_body, page_to_json, str_arg
from ..container import Container
from .schemas import employee_to_json, parse_employee, parse_employee_draft


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        page = service.list_page(
            page=int_arg("page", 1),
            limit=int_arg("limit", int(app.config["PAGE_SIZE"])),
            name_filter=str_arg("name"),
            status_filter=str_arg("status"),
        )
        return jsonify(page_to_json(page, [employee_to_json(e) for e in page.data]))

    @app.route("/api/employees/all", methods=["GET"], endpoint="all_employees")
    def all_employees():
        return jsonify([employee_to_json(e) for e in service.get_all()])

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        return jsonify(employee_to_json(service.get(employee_id)))

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        employee = service.create(parse_employee_draft(json_body()))
        return jsonify(employee_to_json(employee)), 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        employee = service.update(parse_employee(employee_id, json_body()))
        return jsonify(employee_to_json(employee))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        service.delete(employee_id)
        return jsonify({"success": True})
