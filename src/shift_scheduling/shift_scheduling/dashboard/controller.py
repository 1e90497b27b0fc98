from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        return jsonify(container.dashboard_service.stats().to_dict())
