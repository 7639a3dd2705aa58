from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_role, json_body, login_required, roles_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="get_settings")
    @login_required
    def get_settings():
        return jsonify(container.settings_service.get_or_create_default().to_dict())

    @app.route("/api/settings", methods=["PATCH"], endpoint="update_settings")
    @roles_required(Role.ADMIN)
    def update_settings():
        saved = container.settings_service.update(current_role=current_role(), changes=json_body())
        return jsonify(saved.to_dict())
