from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.http import current_role, current_user_id, json_body, login_required, roles_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    @login_required
    def list_leaves():
        leaves = container.leave_service.list_for_viewer(
            current_role=current_role(),
            current_user_id=current_user_id(),
        )
        return jsonify([lv.to_dict() for lv in leaves])

    @app.route("/api/leaves", methods=["POST"], endpoint="apply_leave")
    @login_required
    def apply_leave():
        data = json_body()
        leave = container.leave_service.apply(
            user_id=current_user_id(),
            leave_type=data.get("type", ""),
            start_date=parse_iso_date(data.get("start_date", "")),
            end_date=parse_iso_date(data.get("end_date", "")),
            reason=data.get("reason", ""),
        )
        return jsonify(leave.to_dict()), 201

    @app.route("/api/leaves/<int:leave_id>", methods=["PATCH"], endpoint="decide_leave")
    @roles_required(Role.ADMIN, Role.PAYROLL)
    def decide_leave(leave_id: int):
        leave = container.leave_service.decide(
            current_role=current_role(),
            leave_id=leave_id,
            status=json_body().get("status", ""),
        )
        return jsonify(leave.to_dict())
