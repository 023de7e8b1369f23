from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.http import json_body, make_guards
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container.auth_service)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/user/profile", methods=["GET"], endpoint="get_profile")
    @login_required
    def get_profile():
        profile = container.profile_service.get_profile(g.current_user.user_id)
        return jsonify(profile.to_dict())

    @app.route("/api/user/profile", methods=["PUT"], endpoint="update_profile")
    @login_required
    def update_profile():
        body = json_body()
        profile = container.profile_service.update_full_name(g.current_user.user_id, body.get("full_name"))
        return jsonify(profile.to_dict())

    @app.route("/api/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    def admin_employees():
        employees = container.employee_service.list_employees(current=g.current_user)
        return jsonify([e.to_dict() for e in employees])

    @app.route("/api/admin/employees/<employee_id>/travel-time", methods=["PUT"], endpoint="admin_travel_time")
    @app.route("/api/admin/employees/travel-time", methods=["PUT"], endpoint="admin_travel_time_query")
    @admin_required
    def admin_travel_time(employee_id: str | None = None):
        body = json_body()
        profile = container.employee_service.update_travel_time(
            current=g.current_user,
            employee_id=employee_id or request.args.get("employeeId"),
            minutes=body.get("travel_time_minutes"),
        )
        return jsonify(profile.to_dict())
