from __future__ import annotations

from flask import Flask, Response, g, jsonify, request

from ..common.http import make_guards
from ..container import Container
from .csv_renderer import render_csv
from .service import window_from_args


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container.auth_service)

    def _csv_response(report):
        body = render_csv(report.export, employee_name=report.employee.display_name)
        filename = f"uren-{report.window.kind.value}-{report.window.start}.csv"
        return Response(
            body,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/me/report", methods=["GET"], endpoint="my_report")
    @login_required
    def my_report():
        report = container.report_service.build_report(
            user_id=g.current_user.user_id, window=window_from_args(request.args)
        )
        return jsonify(report.to_dict())

    @app.route("/api/me/report.csv", methods=["GET"], endpoint="my_report_csv")
    @login_required
    def my_report_csv():
        report = container.report_service.build_report(
            user_id=g.current_user.user_id, window=window_from_args(request.args)
        )
        return _csv_response(report)

    @app.route("/api/admin/employees/<employee_id>/report", methods=["GET"], endpoint="admin_report")
    @admin_required
    def admin_report(employee_id: str):
        report = container.report_service.build_report(user_id=employee_id, window=window_from_args(request.args))
        return jsonify(report.to_dict())

    @app.route("/api/admin/employees/<employee_id>/report.csv", methods=["GET"], endpoint="admin_report_csv")
    @admin_required
    def admin_report_csv(employee_id: str):
        report = container.report_service.build_report(user_id=employee_id, window=window_from_args(request.args))
        return _csv_response(report)
