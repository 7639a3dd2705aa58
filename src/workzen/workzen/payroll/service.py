from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_month, month_bounds, parse_month
from ..core.enums import BACK_OFFICE_ROLES, LeaveStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..leaves.repository import LeaveRepository
from ..settings.service import SettingsService
from ..users.repository import UserRepository
from .calculator.base import PayrollCalculator
from .calculator.full_month_calculator import FullMonthPayrollCalculator
from .calculator.prorated_calculator import ProratedPayrollCalculator
from .counting import AttendanceCountingPolicy, payable_days
from .model import MonthlyPayslip, PayrunBatch
from .repository import PayrunRepository

logger = logging.getLogger(__name__)

PAYRUN_ROLES = frozenset({Role.ADMIN, Role.PAYROLL})


class PayrollService:
    """Monthly payslips (attendance-prorated) and batch payruns (full month).

    The two use different policies on purpose and are kept apart: a payslip
    prorates by attendance, a payrun pays the full configured salary.
    """

    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        settings: SettingsService,
        payruns: PayrunRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        full_month_calculator: Optional[FullMonthPayrollCalculator] = None,
        payslip_policy: AttendanceCountingPolicy = AttendanceCountingPolicy.PRESENT_ONLY,
    ):
        self._users = users
        self._attendance = attendance
        self._leaves = leaves
        self._settings = settings
        self._payruns = payruns
        self._calculator = calculator or ProratedPayrollCalculator()
        self._full_month = full_month_calculator or FullMonthPayrollCalculator()
        self._payslip_policy = payslip_policy

    def payslip_for_month(
        self,
        *,
        current_role: Role,
        current_user_id: int,
        employee_id: int,
        month: str,
    ) -> MonthlyPayslip:
        year, month_no = parse_month(month)
        if int(employee_id) != int(current_user_id) and current_role not in BACK_OFFICE_ROLES:
            raise AuthorizationError("Insufficient permissions")

        employee = self._users.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")

        settings = self._settings.require_configured()
        start, end = month_bounds(year, month_no)
        records = self._attendance.list_for_user(employee.user_id, start_date=start, end_date=end)
        leaves = self._leaves.list_overlapping(
            user_id=employee.user_id,
            start_date=start,
            end_date=end,
            status=LeaveStatus.APPROVED,
        )

        days = payable_days(records, leaves, self._payslip_policy, start, end)
        result = self._calculator.compute(employee, settings, days)
        return MonthlyPayslip(user_id=employee.user_id, year=year, month=month_no, result=result)

    def generate_payrun(self, *, current_role: Role, current_user_id: int, month: str) -> PayrunBatch:
        if current_role not in PAYRUN_ROLES:
            raise AuthorizationError("Insufficient permissions")

        month_key = format_month(*parse_month(month))
        settings = self._settings.require_configured()

        items = tuple(
            self._full_month.compute(user.user_id, user, settings) for user in self._users.list_all()
        )
        batch = PayrunBatch(
            month=month_key,
            generated_by=int(current_user_id),
            total_payroll=sum(i.net for i in items),
            items=items,
        )
        payrun_id = self._payruns.create(batch)
        logger.info(
            "Payrun %s for %s generated by %s: %d employees, total %d",
            payrun_id,
            month_key,
            current_user_id,
            len(items),
            batch.total_payroll,
        )
        return replace(batch, payrun_id=payrun_id)

    def list_payruns(self) -> list[PayrunBatch]:
        return list(self._payruns.list_all())

    def my_payruns(self, user_id: int) -> list[dict]:
        """The caller's own line from every stored payrun."""

        out: list[dict] = []
        for batch in self._payruns.list_all():
            item = batch.item_for(user_id)
            if item is None:
                continue
            out.append({"payrun_id": batch.payrun_id, "month": batch.month, "item": item.to_dict()})
        return out
