from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.http import current_role, current_user_id, json_body, login_required, roles_required
from ..common.projection import project, project_many
from ..core.constants import DEFAULT_ANNUAL_LEAVE, DEFAULT_SESSION_DAYS, DEFAULT_SICK_LEAVE
from ..core.enums import Role
from ..container import Container
from .model import User


def register(app: Flask, container: Container) -> None:
    def _present(user: User) -> dict:
        return project("employee", user.to_dict(), current_role(), owner=user.user_id == current_user_id())

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value

        return jsonify(_present(container.user_service.get(s_user.user_id)))

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @login_required
    def me():
        return jsonify(_present(container.user_service.get(current_user_id())))

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @roles_required(Role.ADMIN, Role.HR, Role.PAYROLL)
    def list_users():
        users = [u.to_dict() for u in container.user_service.list_all()]
        return jsonify(project_many("employee", users, current_role(), owner_id=current_user_id()))

    @app.route("/api/users/directory", methods=["GET"], endpoint="user_directory")
    @login_required
    def directory():
        users = [u.to_dict() for u in container.user_service.list_all()]
        return jsonify(project_many("employee", users, current_role(), owner_id=current_user_id()))

    @app.route("/api/users/me", methods=["GET"], endpoint="get_own_profile")
    @login_required
    def get_own_profile():
        return jsonify(_present(container.user_service.get(current_user_id())))

    @app.route("/api/users/me", methods=["PATCH"], endpoint="update_own_profile")
    @login_required
    def update_own_profile():
        user = container.user_service.update_own_profile(user_id=current_user_id(), changes=json_body())
        return jsonify(_present(user))

    @app.route("/api/users/<int:user_id>", methods=["GET"], endpoint="get_user")
    @login_required
    def get_user(user_id: int):
        user = container.user_service.get_for_viewer(
            current_role=current_role(),
            current_user_id=current_user_id(),
            user_id=user_id,
        )
        return jsonify(_present(user))

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @roles_required(Role.ADMIN, Role.HR)
    def create_user():
        data = json_body()
        created = container.user_service.create_employee(
            current_role=current_role(),
            name=data.get("name", ""),
            email=data.get("email", ""),
            department=data.get("department", ""),
            role=data.get("role", Role.EMPLOYEE.value),
            password=data.get("password"),
            year_of_joining=data.get("year_of_joining"),
            basic_salary=data.get("basic_salary", 0),
            hra=data.get("hra", 0),
            other_earnings=data.get("other_earnings", 0),
            annual_leave=data.get("annual_leave", DEFAULT_ANNUAL_LEAVE),
            sick_leave=data.get("sick_leave", DEFAULT_SICK_LEAVE),
            profile=data,
        )
        body = _present(created.user)
        if created.generated_password:
            body["generated_password"] = created.generated_password
        return jsonify(body), 201

    @app.route("/api/users/<int:user_id>", methods=["PATCH"], endpoint="update_user")
    @login_required
    def update_user(user_id: int):
        user = container.user_service.update_employee(
            current_role=current_role(),
            user_id=user_id,
            changes=json_body(),
        )
        return jsonify(_present(user))

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @roles_required(Role.ADMIN, Role.HR)
    def delete_user(user_id: int):
        container.user_service.delete_employee(current_user_id=current_user_id(), user_id=user_id)
        return jsonify({"success": True})

    @app.route("/api/users/<int:user_id>/leaves", methods=["PATCH"], endpoint="update_leave_balance")
    @roles_required(Role.ADMIN, Role.HR)
    def update_leave_balance(user_id: int):
        data = json_body()
        user = container.user_service.update_leave_balance(
            user_id=user_id,
            annual_leave=data.get("annual_leave"),
            sick_leave=data.get("sick_leave"),
        )
        return jsonify(_present(user))
