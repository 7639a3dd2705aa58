from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import current_role, current_user_id, json_body, login_required, path_id, roles_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payslips/<month>", methods=["GET"], endpoint="monthly_payslip")
    @login_required
    def monthly_payslip(month: str):
        employee_id = request.args.get("employee_id")
        payslip = container.payroll_service.payslip_for_month(
            current_role=current_role(),
            current_user_id=current_user_id(),
            employee_id=path_id(employee_id, "employee id") if employee_id else current_user_id(),
            month=month,
        )
        return jsonify(payslip.to_dict())

    @app.route("/api/payruns", methods=["GET"], endpoint="list_payruns")
    @roles_required(Role.ADMIN, Role.PAYROLL)
    def list_payruns():
        return jsonify([p.to_dict() for p in container.payroll_service.list_payruns()])

    @app.route("/api/payruns/me", methods=["GET"], endpoint="my_payruns")
    @login_required
    def my_payruns():
        return jsonify(container.payroll_service.my_payruns(current_user_id()))

    @app.route("/api/payruns", methods=["POST"], endpoint="generate_payrun")
    @roles_required(Role.ADMIN, Role.PAYROLL)
    def generate_payrun():
        batch = container.payroll_service.generate_payrun(
            current_role=current_role(),
            current_user_id=current_user_id(),
            month=json_body().get("month", ""),
        )
        return jsonify(batch.to_dict()), 201

    @app.route("/api/reports/salary-statement", methods=["GET"], endpoint="salary_statement")
    @roles_required(Role.ADMIN, Role.PAYROLL)
    def salary_statement():
        employee_id = request.args.get("employee_id")
        year = request.args.get("year")
        if not employee_id or not year:
            return jsonify({"error": "Employee ID and year are required"}), 400

        statement = container.salary_statement_service.annual_statement(employee_id=employee_id, year=year)
        return jsonify(statement.to_dict())
