from __future__ import annotations

from flask import Flask, jsonify, render_template

from ..common.web import admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    dashboard = container.dashboard_service

    @app.route("/admin", endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        return render_template(
            "admin/dashboard.html",
            stats=dashboard.stats(),
            team=dashboard.field_team(),
            tasks=container.task_service.list_admin_view(),
            employees=container.user_service.employees(),
            map_view=dashboard.map_view().to_dict(),
            poll_seconds=app.config["LOCATION_POLL_SECONDS"],
        )

    @app.route("/api/map", endpoint="api_map")
    @admin_required
    def api_map():
        return jsonify(dashboard.map_view().to_dict())
