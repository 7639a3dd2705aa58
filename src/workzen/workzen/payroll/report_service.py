from __future__ import annotations

from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, parse_year
from ..common.validators import require_positive_id
from ..core.enums import LeaveStatus
from ..core.exceptions import NotFoundError
from ..leaves.repository import LeaveRepository
from ..settings.service import SettingsService
from ..users.repository import UserRepository
from .calculator.base import PayrollCalculator
from .calculator.prorated_calculator import ProratedPayrollCalculator
from .counting import AttendanceCountingPolicy, payable_days
from .model import AnnualStatement, MonthlyStatement


class SalaryStatementService:
    """Twelve independently prorated months for one employee and year.

    Every month uses the current settings (they are not historized). Totals
    are plain sums of the rounded monthly values.
    """

    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        settings: SettingsService,
        *,
        calculator: Optional[PayrollCalculator] = None,
        policy: AttendanceCountingPolicy = AttendanceCountingPolicy.PRESENT_AND_HALF,
    ):
        self._users = users
        self._attendance = attendance
        self._leaves = leaves
        self._settings = settings
        self._calculator = calculator or ProratedPayrollCalculator()
        self._policy = policy

    def annual_statement(self, *, employee_id, year) -> AnnualStatement:
        employee_id = require_positive_id(employee_id, "employee id")
        year = parse_year(year)

        employee = self._users.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        settings = self._settings.require_configured()
        year_start, _ = month_bounds(year, 1)
        _, year_end = month_bounds(year, 12)
        records = list(self._attendance.list_for_user(employee_id, start_date=year_start, end_date=year_end))
        leaves = list(
            self._leaves.list_overlapping(
                user_id=employee_id,
                start_date=year_start,
                end_date=year_end,
                status=LeaveStatus.APPROVED,
            )
        )

        months: list[MonthlyStatement] = []
        for month in range(1, 13):
            start, end = month_bounds(year, month)
            days = payable_days(records, leaves, self._policy, start, end)
            months.append(MonthlyStatement(year=year, month=month, result=self._calculator.compute(employee, settings, days)))

        return AnnualStatement(employee=employee.summary(), year=year, monthly_statements=months)
