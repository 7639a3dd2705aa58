"""Turning attendance and leave records into payable day counts.

Which attendance statuses count as a payable day differs between call sites,
so the rule is an explicit policy chosen by each caller:

* ``PRESENT_ONLY``: only ``Present`` days count (monthly payslip).
* ``PRESENT_AND_HALF``: ``Present`` and ``Half`` both count as one full day
  (annual salary statement).

Paid leave is the number of days of ``Approved`` requests that fall inside the
period; a request spanning two months contributes to each month only the days
inside it.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, LeaveStatus
from ..leaves.model import LeaveRequest
from .model import PayableDays


class AttendanceCountingPolicy(str, Enum):
    PRESENT_ONLY = "present_only"
    PRESENT_AND_HALF = "present_and_half"

    @property
    def counted_statuses(self) -> frozenset[AttendanceStatus]:
        if self is AttendanceCountingPolicy.PRESENT_AND_HALF:
            return frozenset({AttendanceStatus.PRESENT, AttendanceStatus.HALF})
        return frozenset({AttendanceStatus.PRESENT})


def count_attendance(
    records: Iterable[AttendanceRecord],
    policy: AttendanceCountingPolicy,
    start: date,
    end: date,
) -> int:
    statuses = policy.counted_statuses
    return sum(1 for r in records if start <= r.work_date <= end and r.status in statuses)


def count_paid_leave_days(leaves: Iterable[LeaveRequest], start: date, end: date) -> int:
    return sum(lv.days_within(start, end) for lv in leaves if lv.status == LeaveStatus.APPROVED)


def payable_days(
    records: Iterable[AttendanceRecord],
    leaves: Iterable[LeaveRequest],
    policy: AttendanceCountingPolicy,
    start: date,
    end: date,
) -> PayableDays:
    return PayableDays(
        attendance_count=count_attendance(records, policy, start, end),
        paid_leave_days=count_paid_leave_days(leaves, start, end),
    )
