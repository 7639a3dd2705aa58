from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.constants import DEFAULT_PF_PERCENT, DEFAULT_WORKING_DAYS

MONEY_FIELDS = (
    "monthly_wage",
    "yearly_wage",
    "basic_salary",
    "overtime_allowance",
    "performance_bonus",
    "leave_travel_allowance",
    "fixed_allowance",
    "pf_employer",
    "pf_employee",
    "professional_tax",
    "income_tax",
)

PERCENT_FIELDS = (
    "basic_salary_percent",
    "overtime_percent",
    "performance_bonus_percent",
    "leave_travel_percent",
    "fixed_allowance_percent",
    "pf_employer_percent",
    "pf_employee_percent",
    "income_tax_percent",
)

HOUR_FIELDS = ("working_hours", "break_time")


@dataclass(frozen=True)
class SalaryStructure:
    """Detailed salary sheet of one employee (one row per user).

    Reference data for the payroll team; payslips and payruns are computed
    from the user's ``salary`` and the global settings, not from this sheet.
    """

    user_id: int
    monthly_wage: int = 0
    yearly_wage: int = 0
    working_days: int = DEFAULT_WORKING_DAYS
    working_hours: Decimal = Decimal("8.00")
    break_time: Decimal = Decimal("1.00")
    basic_salary: int = 0
    basic_salary_percent: Decimal = Decimal("0.00")
    overtime_allowance: int = 0
    overtime_percent: Decimal = Decimal("0.00")
    performance_bonus: int = 0
    performance_bonus_percent: Decimal = Decimal("0.00")
    leave_travel_allowance: int = 0
    leave_travel_percent: Decimal = Decimal("0.00")
    fixed_allowance: int = 0
    fixed_allowance_percent: Decimal = Decimal("0.00")
    pf_employer: int = 0
    pf_employer_percent: Decimal = DEFAULT_PF_PERCENT
    pf_employee: int = 0
    pf_employee_percent: Decimal = DEFAULT_PF_PERCENT
    professional_tax: int = 0
    income_tax: int = 0
    income_tax_percent: Decimal = Decimal("0.00")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        out: dict = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Decimal):
                value = f"{value:.2f}"
            elif isinstance(value, datetime):
                value = value.isoformat()
            out[f.name] = value
        return out
