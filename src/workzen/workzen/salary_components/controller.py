from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_role, current_user_id, json_body, login_required, roles_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users/<int:user_id>/salary-components", methods=["GET"], endpoint="get_salary_components")
    @login_required
    def get_salary_components(user_id: int):
        structure = container.salary_structure_service.get(
            current_role=current_role(),
            current_user_id=current_user_id(),
            user_id=user_id,
        )
        return jsonify(structure.to_dict() if structure else None)

    @app.route("/api/users/<int:user_id>/salary-components", methods=["POST"], endpoint="save_salary_components")
    @roles_required(Role.ADMIN, Role.PAYROLL)
    def save_salary_components(user_id: int):
        structure = container.salary_structure_service.save(
            current_role=current_role(),
            user_id=user_id,
            values=json_body(),
        )
        return jsonify(structure.to_dict())
