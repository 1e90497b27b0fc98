from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, json_body
from ..container import Container

_FIELDS = ("name", "email", "max_hours_per_week", "skills")


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        return jsonify([e.to_dict() for e in service.list_employees(query=request.args.get("query"))])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        data = json_body()
        try:
            employee = service.create_employee(
                name=data.get("name"),
                email=data.get("email"),
                max_hours_per_week=data.get("max_hours_per_week"),
                skills=data.get("skills") or "",
            )
        except Exception as e:
            return error_response(e)
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    def employees_get(employee_id: str):
        try:
            return jsonify(service.get_employee(employee_id).to_dict())
        except Exception as e:
            return error_response(e)

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    def employees_update(employee_id: str):
        data = json_body()
        changes = {k: data[k] for k in _FIELDS if data.get(k) is not None}
        try:
            employee = service.update_employee(employee_id, **changes)
        except Exception as e:
            return error_response(e)
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def employees_delete(employee_id: str):
        try:
            service.delete_employee(employee_id)
        except Exception as e:
            return error_response(e)
        return "", 204
