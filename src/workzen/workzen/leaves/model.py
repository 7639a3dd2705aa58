from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: int
    user_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    created_at: Optional[datetime] = None

    @property
    def span_days(self) -> int:
        """Inclusive number of calendar days requested."""
        return (self.end_date - self.start_date).days + 1

    def days_within(self, start: date, end: date) -> int:
        """Inclusive number of requested days that fall inside [start, end]."""
        overlap_start = max(self.start_date, start)
        overlap_end = min(self.end_date, end)
        if overlap_end < overlap_start:
            return 0
        return (overlap_end - overlap_start).days + 1

    def to_dict(self) -> dict:
        return {
            "leave_id": self.leave_id,
            "user_id": self.user_id,
            "type": self.leave_type.value,
            "start_date": self.start_date.strftime("%Y-%m-%d"),
            "end_date": self.end_date.strftime("%Y-%m-%d"),
            "span_days": self.span_days,
            "reason": self.reason,
            "status": self.status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
