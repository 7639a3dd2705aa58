from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_role, current_user_id, login_required, roles_required
from ..core.enums import BACK_OFFICE_ROLES, Role
from ..core.exceptions import AuthorizationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    def list_attendance():
        records = container.attendance_service.list_for_viewer(
            current_role=current_role(),
            current_user_id=current_user_id(),
        )
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/user/<int:user_id>", methods=["GET"], endpoint="user_attendance")
    @roles_required(Role.ADMIN, Role.HR)
    def user_attendance(user_id: int):
        records = container.attendance_service.list_for_user(user_id)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/stats/<int:user_id>", methods=["GET"], endpoint="attendance_stats")
    @login_required
    def attendance_stats(user_id: int):
        if user_id != current_user_id() and current_role() not in BACK_OFFICE_ROLES:
            raise AuthorizationError("Insufficient permissions")
        return jsonify(container.attendance_service.stats_for_user(user_id).to_dict())

    @app.route("/api/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    @login_required
    def clock_in():
        record = container.attendance_service.clock_in(current_user_id())
        return jsonify(record.to_dict())

    @app.route("/api/attendance/clock-out", methods=["POST"], endpoint="clock_out")
    @login_required
    def clock_out():
        record = container.attendance_service.clock_out(current_user_id())
        return jsonify(record.to_dict())
