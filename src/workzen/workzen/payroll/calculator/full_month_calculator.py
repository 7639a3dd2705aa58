from __future__ import annotations

from decimal import Decimal

from ...settings.model import PayrollSettings
from ..model import PayrunItem
from .base import SalaryComponents
from .rounding import round_half_away, to_decimal

_HUNDRED = Decimal(100)


class FullMonthPayrollCalculator:
    """Full-month, unprorated payroll used by the batch payrun.

    Attendance is not consulted. PF is taken on the full basic salary and only
    rounded once it is folded into the deductions.
    """

    def compute(self, user_id: int, salary: SalaryComponents, settings: PayrollSettings) -> PayrunItem:
        gross = salary.basic_salary + salary.hra + salary.other_earnings
        pf = Decimal(salary.basic_salary) * to_decimal(settings.pf_percent) / _HUNDRED
        deductions = round_half_away(pf) + int(settings.professional_tax)
        return PayrunItem(
            user_id=int(user_id),
            gross=gross,
            deductions=deductions,
            net=gross - deductions,
        )
