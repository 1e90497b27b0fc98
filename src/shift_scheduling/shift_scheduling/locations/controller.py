from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.location_service

    @app.route("/api/locations", methods=["GET"], endpoint="locations_list")
    def locations_list():
        return jsonify([{**loc.to_dict(), "shift_count": count} for loc, count in service.list_locations()])

    @app.route("/api/locations", methods=["POST"], endpoint="locations_create")
    def locations_create():
        data = json_body()
        try:
            location = service.create_location(name=data.get("name"), address=data.get("address"))
        except Exception as e:
            return error_response(e)
        return jsonify(location.to_dict()), 201

    @app.route("/api/locations/<location_id>", methods=["GET"], endpoint="locations_get")
    def locations_get(location_id: str):
        try:
            return jsonify(service.get_location(location_id).to_dict())
        except Exception as e:
            return error_response(e)

    @app.route("/api/locations/<location_id>", methods=["DELETE"], endpoint="locations_delete")
    def locations_delete(location_id: str):
        try:
            service.delete_location(location_id)
        except Exception as e:
            return error_response(e)
        return "", 204
