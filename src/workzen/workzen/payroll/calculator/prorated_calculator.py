from __future__ import annotations

from decimal import Decimal

from ...core.exceptions import ConfigurationError, ValidationError
from ...settings.model import PayrollSettings
from ..model import ComponentAmount, PayableDays, PayslipResult, ProvidentFund
from .base import PayrollCalculator, SalaryComponents
from .rounding import round_half_away, to_decimal

_ONE = Decimal(1)
_HUNDRED = Decimal(100)


def _check_days(total_payable_days: int, working_days: int) -> None:
    if working_days <= 0:
        raise ConfigurationError("Settings not configured: working days must be greater than 0")
    if total_payable_days < 0:
        raise ValidationError("Payable days cannot be negative")


def attendance_ratio(total_payable_days: int, working_days: int) -> Decimal:
    """Payable days over configured working days, capped at 1.

    Extra days never raise pay above the full amount; there is no floor, so a
    ratio of 0 is valid. Used for display; amounts go through ``prorate``.
    """

    _check_days(total_payable_days, working_days)
    return min(Decimal(total_payable_days) / Decimal(working_days), _ONE)


def prorate(amount: int, total_payable_days: int, working_days: int) -> int:
    """``amount * min(days, working_days) / working_days``, rounded once.

    The product is formed on integers before the single division, so a value
    that is exactly half a unit stays exact and rounds away from zero.
    """

    _check_days(total_payable_days, working_days)
    days = min(total_payable_days, working_days)
    return round_half_away(Decimal(int(amount) * days) / Decimal(working_days))


class ProratedPayrollCalculator(PayrollCalculator):
    """Attendance-prorated payroll.

    Each earnings component is prorated and rounded on its own. PF is first
    computed on the full basic salary and rounded, then that amount is
    prorated and rounded again; the two steps must not be collapsed into a
    single multiplication. Professional tax is a flat amount and is never
    prorated, so net pay may be negative.
    """

    def compute(self, salary: SalaryComponents, settings: PayrollSettings, days: PayableDays) -> PayslipResult:
        if days.attendance_count < 0 or days.paid_leave_days < 0:
            raise ValidationError("Attendance and leave day counts cannot be negative")

        payable = days.total_payable_days
        working_days = settings.working_days
        ratio = attendance_ratio(payable, working_days)

        basic = ComponentAmount(salary.basic_salary, prorate(salary.basic_salary, payable, working_days))
        hra = ComponentAmount(salary.hra, prorate(salary.hra, payable, working_days))
        other = ComponentAmount(salary.other_earnings, prorate(salary.other_earnings, payable, working_days))
        gross = ComponentAmount(
            basic.full + hra.full + other.full,
            basic.prorated + hra.prorated + other.prorated,
        )

        pf_percent = to_decimal(settings.pf_percent)
        pf_full = round_half_away(salary.basic_salary * pf_percent / _HUNDRED)
        pf = ProvidentFund(full=pf_full, prorated=prorate(pf_full, payable, working_days), percentage=pf_percent)

        professional_tax = int(settings.professional_tax)
        total_deductions = pf.prorated + professional_tax

        return PayslipResult(
            days=days,
            working_days=working_days,
            attendance_ratio=ratio,
            basic_salary=basic,
            hra=hra,
            other_earnings=other,
            gross_salary=gross,
            provident_fund=pf,
            professional_tax=professional_tax,
            total_deductions=total_deductions,
            net_salary=gross.prorated - total_deductions,
        )
