from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.http import json_body, make_guards
from ..container import Container
from .service import parse_date


def _range_args():
    on = parse_date(request.args["date"]) if request.args.get("date") else None
    start = parse_date(request.args["start"], "start") if request.args.get("start") else None
    end = parse_date(request.args["end"], "end") if request.args.get("end") else None
    return on, start, end


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container.auth_service)

    @app.route("/api/time-entries", methods=["GET"], endpoint="list_time_entries")
    @login_required
    def list_time_entries():
        on, start, end = _range_args()
        entries = container.time_entry_service.list_entries(g.current_user.user_id, on=on, start=start, end=end)
        return jsonify([e.to_dict() for e in entries])

    @app.route("/api/time-entries", methods=["POST"], endpoint="create_time_entry")
    @login_required
    def create_time_entry():
        entry = container.time_entry_service.create_entry(g.current_user.user_id, json_body())
        return jsonify(entry.to_dict()), 201

    @app.route("/api/time-entries/<entry_id>", methods=["PUT"], endpoint="update_time_entry")
    @login_required
    def update_time_entry(entry_id: str):
        entry = container.time_entry_service.update_entry(g.current_user.user_id, entry_id, json_body())
        return jsonify(entry.to_dict())

    @app.route("/api/time-entries/<entry_id>", methods=["DELETE"], endpoint="delete_time_entry")
    @login_required
    def delete_time_entry(entry_id: str):
        container.time_entry_service.delete_entry(g.current_user.user_id, entry_id)
        return jsonify({"deleted": entry_id})

    @app.route("/api/admin/employees/<employee_id>/time-entries", methods=["GET"], endpoint="admin_time_entries")
    @app.route("/api/admin/employees/time-entries", methods=["GET"], endpoint="admin_time_entries_query")
    @admin_required
    def admin_time_entries(employee_id: str | None = None):
        _, start, end = _range_args()
        entries = container.time_entry_service.list_for_employee(
            employee_id or request.args.get("employeeId"), start=start, end=end
        )
        return jsonify([e.to_dict() for e in entries])
