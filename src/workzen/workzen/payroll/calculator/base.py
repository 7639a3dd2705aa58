from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from ...settings.model import PayrollSettings
from ..model import PayableDays, PayslipResult


class SalaryComponents(Protocol):
    """Anything carrying the three monthly earnings components (e.g. a User)."""

    basic_salary: int
    hra: int
    other_earnings: int


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance-based payroll)."""

    @abstractmethod
    def compute(self, salary: SalaryComponents, settings: PayrollSettings, days: PayableDays) -> PayslipResult:
        raise NotImplementedError
