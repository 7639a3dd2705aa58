from __future__ import annotations

from datetime import date

import pytest

from src.workzen.workzen.core.enums import AttendanceStatus
from src.workzen.workzen.core.exceptions import ConfigurationError, NotFoundError, ValidationError
from src.workzen.workzen.settings.model import PayrollSettings


@pytest.fixture
def employee(users_repo):
    return users_repo.add(name="Emma Employee", basic_salary=30000, hra=12000, other_earnings=3000)


def test_statement_has_twelve_months(container, employee):
    statement = container.salary_statement_service.annual_statement(employee_id=employee.user_id, year=2025)

    assert [m.month for m in statement.monthly_statements] == list(range(1, 13))
    assert statement.to_dict()["monthly_statements"][0]["month_name"] == "January"
    assert statement.employee["name"] == "Emma Employee"


def test_half_days_count_as_full_days(container, attendance_repo, employee):
    for d in range(1, 21):
        attendance_repo.add(employee.user_id, date(2025, 1, d), AttendanceStatus.PRESENT)
    attendance_repo.add(employee.user_id, date(2025, 1, 23), AttendanceStatus.HALF)
    attendance_repo.add(employee.user_id, date(2025, 1, 24), AttendanceStatus.HALF)

    january = container.salary_statement_service.annual_statement(
        employee_id=employee.user_id, year=2025
    ).monthly_statements[0]

    assert january.result.days.attendance_count == 22
    assert january.result.net_salary == 41200


def test_totals_are_sums_of_monthly_values(container, attendance_repo, leaves_repo, employee):
    for d in range(1, 12):
        attendance_repo.add(employee.user_id, date(2025, 3, d), AttendanceStatus.PRESENT)
    for d in range(1, 8):
        attendance_repo.add(employee.user_id, date(2025, 7, d), AttendanceStatus.HALF)
    leaves_repo.add(employee.user_id, date(2025, 3, 28), date(2025, 4, 3))

    statement = container.salary_statement_service.annual_statement(employee_id=employee.user_id, year=2025)
    months = [m.result for m in statement.monthly_statements]
    totals = statement.totals

    assert totals.gross_salary == sum(r.gross_salary.prorated for r in months)
    assert totals.provident_fund == sum(r.provident_fund.prorated for r in months)
    assert totals.professional_tax == 12 * 200
    assert totals.net_salary == sum(r.net_salary for r in months)
    assert statement.monthly_statements[2].result.days.paid_leave_days == 4
    assert statement.monthly_statements[3].result.days.paid_leave_days == 3


def test_statement_requires_stored_settings(container, settings_repo, employee):
    settings_repo.current = None

    with pytest.raises(ConfigurationError, match="Settings not configured"):
        container.salary_statement_service.annual_statement(employee_id=employee.user_id, year="2024")

    assert settings_repo.current is None


def test_statement_rejects_unusable_settings(container, settings_repo, employee):
    settings_repo.current = PayrollSettings(working_days=0)
    with pytest.raises(ConfigurationError):
        container.salary_statement_service.annual_statement(employee_id=employee.user_id, year=2025)


@pytest.mark.parametrize("year", ["abc", "", "12"])
def test_statement_rejects_bad_year(container, employee, year):
    with pytest.raises(ValidationError):
        container.salary_statement_service.annual_statement(employee_id=employee.user_id, year=year)


def test_statement_for_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.salary_statement_service.annual_statement(employee_id=42, year=2025)
