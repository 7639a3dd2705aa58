from __future__ import annotations

from datetime import date

import pytest

from src.workzen.workzen.core.enums import AttendanceStatus, Role
from src.workzen.workzen.core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def employee(users_repo):
    return users_repo.add(name="Emma Employee", basic_salary=30000, hra=12000, other_earnings=3000)


def _working_days(attendance_repo, user_id, days, status=AttendanceStatus.PRESENT):
    for d in days:
        attendance_repo.add(user_id, date(2025, 1, d), status)


def test_payslip_counts_present_days_only(container, attendance_repo, employee):
    _working_days(attendance_repo, employee.user_id, range(1, 21))
    _working_days(attendance_repo, employee.user_id, (23, 24), AttendanceStatus.HALF)

    slip = container.payroll_service.payslip_for_month(
        current_role=Role.EMPLOYEE,
        current_user_id=employee.user_id,
        employee_id=employee.user_id,
        month="2025-01",
    )

    assert slip.result.days.attendance_count == 20
    assert slip.result.gross_salary.prorated == 40909
    assert slip.result.net_salary == 37436
    assert slip.to_dict()["month"] == "2025-01"


def test_payslip_adds_clipped_paid_leave(container, attendance_repo, leaves_repo, employee):
    _working_days(attendance_repo, employee.user_id, range(2, 22))
    leaves_repo.add(employee.user_id, date(2025, 1, 30), date(2025, 2, 5))

    slip = container.payroll_service.payslip_for_month(
        current_role=Role.EMPLOYEE,
        current_user_id=employee.user_id,
        employee_id=employee.user_id,
        month="2025-01",
    )

    assert slip.result.days.paid_leave_days == 2
    assert slip.result.days.total_payable_days == 22
    assert slip.result.net_salary == 41200


def test_employee_cannot_read_someone_elses_payslip(container, users_repo, employee):
    other = users_repo.add(name="Other Person")
    with pytest.raises(AuthorizationError):
        container.payroll_service.payslip_for_month(
            current_role=Role.EMPLOYEE,
            current_user_id=employee.user_id,
            employee_id=other.user_id,
            month="2025-01",
        )


def test_payroll_officer_reads_any_payslip(container, users_repo, employee):
    officer = users_repo.add(role=Role.PAYROLL)
    slip = container.payroll_service.payslip_for_month(
        current_role=Role.PAYROLL,
        current_user_id=officer.user_id,
        employee_id=employee.user_id,
        month="2025-02",
    )
    assert slip.result.net_salary == -200


def test_payslip_requires_stored_settings(container, settings_repo, employee):
    settings_repo.current = None
    with pytest.raises(ConfigurationError):
        container.payroll_service.payslip_for_month(
            current_role=Role.ADMIN,
            current_user_id=employee.user_id,
            employee_id=employee.user_id,
            month="2025-01",
        )


def test_payslip_rejects_bad_month_and_unknown_employee(container, employee):
    with pytest.raises(ValidationError):
        container.payroll_service.payslip_for_month(
            current_role=Role.ADMIN, current_user_id=1, employee_id=employee.user_id, month="2025-13"
        )
    with pytest.raises(NotFoundError):
        container.payroll_service.payslip_for_month(
            current_role=Role.ADMIN, current_user_id=1, employee_id=999, month="2025-01"
        )


def test_generate_payrun_pays_full_month(container, users_repo, payruns_repo, attendance_repo):
    a = users_repo.add(basic_salary=50000, hra=10000, other_earnings=5000)
    b = users_repo.add(basic_salary=30000, hra=12000, other_earnings=3000)
    officer = users_repo.add(role=Role.PAYROLL)
    attendance_repo.add(a.user_id, date(2025, 1, 2), AttendanceStatus.ABSENT)

    batch = container.payroll_service.generate_payrun(
        current_role=Role.PAYROLL, current_user_id=officer.user_id, month="2025-01"
    )

    assert batch.payrun_id == 1
    assert batch.month == "2025-01"
    assert batch.item_for(a.user_id).net == 58800
    assert batch.item_for(b.user_id).net == 41200
    assert batch.item_for(officer.user_id).net == -200
    assert batch.total_payroll == 58800 + 41200 - 200
    assert len(payruns_repo.batches) == 1


def test_generate_payrun_is_restricted(container, users_repo):
    hr = users_repo.add(role=Role.HR)
    with pytest.raises(AuthorizationError):
        container.payroll_service.generate_payrun(current_role=Role.HR, current_user_id=hr.user_id, month="2025-01")


def test_stored_payrun_is_not_recomputed(container, users_repo):
    employee = users_repo.add(basic_salary=50000, hra=10000, other_earnings=5000)
    admin = users_repo.add(role=Role.ADMIN)
    container.payroll_service.generate_payrun(current_role=Role.ADMIN, current_user_id=admin.user_id, month="2025-01")

    users_repo.update_user(employee.user_id, {"basic_salary": 1})

    mine = container.payroll_service.my_payruns(employee.user_id)
    assert mine == [{"payrun_id": 1, "month": "2025-01", "item": {"user_id": employee.user_id, "gross": 65000, "deductions": 6200, "net": 58800}}]
