from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.shift_service

    @app.route("/api/shifts/validate", methods=["POST"], endpoint="shifts_validate")
    def shifts_validate():
        data = json_body()
        try:
            check = service.check_shift(
                start=data.get("start"),
                end=data.get("end"),
                employee_id=data.get("employee_id"),
                exclude_shift_id=data.get("shift_id"),
            )
        except Exception as e:
            return error_response(e)

        return jsonify(
            {
                "valid": check.valid,
                "errors": check.errors,
                "conflicts": [s.to_dict() for s in check.conflicts],
            }
        )

    @app.route("/api/shifts", methods=["GET"], endpoint="shifts_list")
    def shifts_list():
        try:
            shifts = service.list_shifts(
                start=request.args.get("start"),
                end=request.args.get("end"),
                employee_id=request.args.get("employee_id"),
            )
        except Exception as e:
            return error_response(e)
        return jsonify([s.to_dict() for s in shifts])

    @app.route("/api/shifts", methods=["POST"], endpoint="shifts_create")
    def shifts_create():
        data = json_body()
        try:
            shift = service.create_shift(
                location_id=str(data.get("location_id") or ""),
                start=data.get("start"),
                end=data.get("end"),
                employee_id=data.get("employee_id"),
                status=data.get("status") or "DRAFT",
            )
        except Exception as e:
            return error_response(e)
        return jsonify(shift.to_dict()), 201

    @app.route("/api/shifts/<shift_id>", methods=["GET"], endpoint="shifts_get")
    def shifts_get(shift_id: str):
        try:
            return jsonify(service.get_shift(shift_id).to_dict())
        except Exception as e:
            return error_response(e)

    @app.route("/api/shifts/<shift_id>", methods=["PUT"], endpoint="shifts_update")
    def shifts_update(shift_id: str):
        data = json_body()
        changes = {k: data[k] for k in ("location_id", "start", "end", "status") if data.get(k) is not None}
        if "employee_id" in data:
            changes["employee_id"] = data["employee_id"]
        try:
            shift = service.update_shift(shift_id, **changes)
        except Exception as e:
            return error_response(e)
        return jsonify(shift.to_dict())

    @app.route("/api/shifts/<shift_id>", methods=["DELETE"], endpoint="shifts_delete")
    def shifts_delete(shift_id: str):
        try:
            service.delete_shift(shift_id)
        except Exception as e:
            return error_response(e)
        return "", 204
