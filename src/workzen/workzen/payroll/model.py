from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class PayableDays:
    """Day counts feeding one proration: counted attendance plus paid leave."""

    attendance_count: int
    paid_leave_days: int

    @property
    def total_payable_days(self) -> int:
        return self.attendance_count + self.paid_leave_days


@dataclass(frozen=True)
class ComponentAmount:
    full: int
    prorated: int

    def to_dict(self) -> dict:
        return {"full": self.full, "prorated": self.prorated}


@dataclass(frozen=True)
class ProvidentFund:
    full: int
    prorated: int
    percentage: Decimal

    def to_dict(self) -> dict:
        return {"full": self.full, "prorated": self.prorated, "percentage": float(self.percentage)}


@dataclass(frozen=True)
class PayslipResult:
    """Full (unredacted) output of one prorated payroll computation."""

    days: PayableDays
    working_days: int
    attendance_ratio: Decimal
    basic_salary: ComponentAmount
    hra: ComponentAmount
    other_earnings: ComponentAmount
    gross_salary: ComponentAmount
    provident_fund: ProvidentFund
    professional_tax: int
    total_deductions: int
    net_salary: int

    @property
    def attendance_percentage(self) -> str:
        return str((self.attendance_ratio * 100).quantize(_CENT, rounding=ROUND_HALF_UP))

    def to_dict(self) -> dict:
        return {
            "working_days": self.working_days,
            "attendance_days": self.days.attendance_count,
            "paid_leave_days": self.days.paid_leave_days,
            "total_payable_days": self.days.total_payable_days,
            "attendance_ratio": self.attendance_percentage,
            "basic_salary": self.basic_salary.to_dict(),
            "hra": self.hra.to_dict(),
            "other_earnings": self.other_earnings.to_dict(),
            "gross_salary": self.gross_salary.to_dict(),
            "provident_fund": self.provident_fund.to_dict(),
            "professional_tax": self.professional_tax,
            "total_deductions": self.total_deductions,
            "net_salary": self.net_salary,
        }


@dataclass(frozen=True)
class MonthlyPayslip:
    user_id: int
    year: int
    month: int
    result: PayslipResult

    def to_dict(self) -> dict:
        data = {"user_id": self.user_id, "month": f"{self.year:04d}-{self.month:02d}"}
        data.update(self.result.to_dict())
        return data


@dataclass(frozen=True)
class PayrunItem:
    user_id: int
    gross: int
    deductions: int
    net: int

    def to_dict(self) -> dict:
        return {"user_id": self.user_id, "gross": self.gross, "deductions": self.deductions, "net": self.net}

    @classmethod
    def from_dict(cls, data: dict) -> "PayrunItem":
        return cls(
            user_id=int(data["user_id"]),
            gross=int(data["gross"]),
            deductions=int(data["deductions"]),
            net=int(data["net"]),
        )


@dataclass(frozen=True)
class PayrunBatch:
    """Frozen snapshot of one payrun; never recomputed after it is stored."""

    month: str
    generated_by: int
    total_payroll: int
    items: tuple[PayrunItem, ...]
    payrun_id: Optional[int] = None
    created_at: Optional[datetime] = None

    def item_for(self, user_id: int) -> Optional[PayrunItem]:
        for item in self.items:
            if item.user_id == int(user_id):
                return item
        return None

    def to_dict(self) -> dict:
        return {
            "payrun_id": self.payrun_id,
            "month": self.month,
            "generated_by": self.generated_by,
            "total_payroll": self.total_payroll,
            "items": [i.to_dict() for i in self.items],
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class MonthlyStatement:
    year: int
    month: int
    result: PayslipResult

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]

    def to_dict(self) -> dict:
        r = self.result
        return {
            "month": f"{self.month:02d}",
            "month_name": self.month_name,
            "year": self.year,
            "working_days": r.working_days,
            "present_days": r.days.attendance_count,
            "paid_leave_days": r.days.paid_leave_days,
            "total_payable_days": r.days.total_payable_days,
            "attendance_ratio": r.attendance_percentage,
            "earnings": {
                "basic_salary": r.basic_salary.to_dict(),
                "hra": r.hra.to_dict(),
                "other_earnings": r.other_earnings.to_dict(),
                "gross_salary": r.gross_salary.to_dict(),
            },
            "deductions": {
                "provident_fund": r.provident_fund.to_dict(),
                "professional_tax": r.professional_tax,
                "total": r.total_deductions,
            },
            "net_salary": r.net_salary,
        }


@dataclass(frozen=True)
class AnnualTotals:
    """Straight sums of the already rounded monthly figures."""

    basic_salary: int = 0
    hra: int = 0
    other_earnings: int = 0
    gross_salary: int = 0
    provident_fund: int = 0
    professional_tax: int = 0
    total_deductions: int = 0
    net_salary: int = 0

    @classmethod
    def from_months(cls, months: list[MonthlyStatement]) -> "AnnualTotals":
        results = [m.result for m in months]
        return cls(
            basic_salary=sum(r.basic_salary.prorated for r in results),
            hra=sum(r.hra.prorated for r in results),
            other_earnings=sum(r.other_earnings.prorated for r in results),
            gross_salary=sum(r.gross_salary.prorated for r in results),
            provident_fund=sum(r.provident_fund.prorated for r in results),
            professional_tax=sum(r.professional_tax for r in results),
            total_deductions=sum(r.total_deductions for r in results),
            net_salary=sum(r.net_salary for r in results),
        )

    def to_dict(self) -> dict:
        return {
            "basic_salary": self.basic_salary,
            "hra": self.hra,
            "other_earnings": self.other_earnings,
            "gross_salary": self.gross_salary,
            "provident_fund": self.provident_fund,
            "professional_tax": self.professional_tax,
            "total_deductions": self.total_deductions,
            "net_salary": self.net_salary,
        }


@dataclass(frozen=True)
class AnnualStatement:
    employee: dict
    year: int
    monthly_statements: list[MonthlyStatement] = field(default_factory=list)

    @property
    def totals(self) -> AnnualTotals:
        return AnnualTotals.from_months(self.monthly_statements)

    def to_dict(self) -> dict:
        return {
            "employee": self.employee,
            "year": self.year,
            "monthly_statements": [m.to_dict() for m in self.monthly_statements],
            "totals": self.totals.to_dict(),
        }
