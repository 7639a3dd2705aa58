from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_role, current_user_id, json_body, login_required
from ..core.enums import ProfileEntryKind
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _register_kind(kind: ProfileEntryKind) -> None:
        plural = f"{kind.value}s"

        @login_required
        def list_entries(user_id: int):
            entries = container.profile_service.list_entries(kind, user_id)
            return jsonify([e.to_dict() for e in entries])

        @login_required
        def add_entry(user_id: int):
            entry = container.profile_service.add_entry(
                kind,
                current_role=current_role(),
                current_user_id=current_user_id(),
                user_id=user_id,
                name=json_body().get(f"{kind.value}_name", ""),
            )
            return jsonify(entry.to_dict()), 201

        @login_required
        def delete_entry(entry_id: int):
            container.profile_service.delete_entry(
                kind,
                current_role=current_role(),
                current_user_id=current_user_id(),
                entry_id=entry_id,
            )
            return jsonify({"success": True})

        app.add_url_rule(
            f"/api/users/<int:user_id>/{plural}", endpoint=f"list_{plural}", view_func=list_entries, methods=["GET"]
        )
        app.add_url_rule(
            f"/api/users/<int:user_id>/{plural}", endpoint=f"add_{kind.value}", view_func=add_entry, methods=["POST"]
        )
        app.add_url_rule(
            f"/api/{plural}/<int:entry_id>", endpoint=f"delete_{kind.value}", view_func=delete_entry, methods=["DELETE"]
        )

    for kind in ProfileEntryKind:
        _register_kind(kind)
