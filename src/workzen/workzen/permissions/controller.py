from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_role, json_body, roles_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users/<int:user_id>/permissions", methods=["GET"], endpoint="get_permissions")
    @roles_required(Role.ADMIN)
    def get_permissions(user_id: int):
        permission = container.permission_service.get(current_role=current_role(), user_id=user_id)
        return jsonify(permission.to_dict())

    @app.route("/api/users/<int:user_id>/permissions", methods=["POST"], endpoint="save_permissions")
    @roles_required(Role.ADMIN)
    def save_permissions(user_id: int):
        permission = container.permission_service.upsert(
            current_role=current_role(),
            user_id=user_id,
            levels=json_body(),
        )
        return jsonify(permission.to_dict())
