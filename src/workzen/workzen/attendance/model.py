from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry per employee per calendar date.

    Created on clock-in, completed on clock-out and immutable afterwards.
    """

    attendance_id: int
    user_id: int
    work_date: date
    in_time: str
    out_time: Optional[str]
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "user_id": self.user_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "in_time": self.in_time,
            "out_time": self.out_time,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AttendanceStats:
    """Profile statistics. The percentage counts a Half day as 0.5 and is
    display only; payroll uses its own counting policy."""

    total: int
    present: int
    absent: int
    half_day: int
    leave: int
    percentage: str

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "present": self.present,
            "absent": self.absent,
            "half_day": self.half_day,
            "leave": self.leave,
            "percentage": self.percentage,
        }
