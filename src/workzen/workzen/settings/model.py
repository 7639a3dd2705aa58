from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.constants import DEFAULT_PF_PERCENT, DEFAULT_PROFESSIONAL_TAX, DEFAULT_WORKING_DAYS


@dataclass(frozen=True)
class PayrollSettings:
    """Global payroll parameters (single row, last write wins).

    Read once per request and passed explicitly into payroll calculations.
    """

    working_days: int = DEFAULT_WORKING_DAYS
    pf_percent: Decimal = DEFAULT_PF_PERCENT
    professional_tax: int = DEFAULT_PROFESSIONAL_TAX
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "working_days": self.working_days,
            "pf_percent": f"{self.pf_percent:.2f}",
            "professional_tax": self.professional_tax,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
