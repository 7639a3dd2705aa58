from __future__ import annotations

from datetime import date

from src.workzen.workzen.core.enums import AttendanceStatus, LeaveStatus
from src.workzen.workzen.payroll.counting import (
    AttendanceCountingPolicy,
    count_attendance,
    count_paid_leave_days,
    payable_days,
)

JAN = (date(2025, 1, 1), date(2025, 1, 31))
FEB = (date(2025, 2, 1), date(2025, 2, 28))


def _month_of_records(attendance_repo):
    attendance_repo.add(1, date(2025, 1, 2), AttendanceStatus.PRESENT)
    attendance_repo.add(1, date(2025, 1, 3), AttendanceStatus.HALF)
    attendance_repo.add(1, date(2025, 1, 6), AttendanceStatus.ABSENT)
    attendance_repo.add(1, date(2025, 1, 7), AttendanceStatus.LEAVE)
    attendance_repo.add(1, date(2025, 2, 3), AttendanceStatus.PRESENT)
    return attendance_repo.list_for_user(1)


def test_present_only_ignores_half_days(attendance_repo):
    records = _month_of_records(attendance_repo)
    assert count_attendance(records, AttendanceCountingPolicy.PRESENT_ONLY, *JAN) == 1


def test_present_and_half_counts_half_as_full_day(attendance_repo):
    records = _month_of_records(attendance_repo)
    assert count_attendance(records, AttendanceCountingPolicy.PRESENT_AND_HALF, *JAN) == 2


def test_records_outside_the_period_are_ignored(attendance_repo):
    records = _month_of_records(attendance_repo)
    assert count_attendance(records, AttendanceCountingPolicy.PRESENT_AND_HALF, *FEB) == 1


def test_leave_spanning_months_is_clipped(leaves_repo):
    leaves_repo.add(1, date(2025, 1, 30), date(2025, 2, 2))
    leaves = leaves_repo.list_leaves(user_id=1)

    assert count_paid_leave_days(leaves, *JAN) == 2
    assert count_paid_leave_days(leaves, *FEB) == 2


def test_only_approved_leave_is_paid(leaves_repo):
    leaves_repo.add(1, date(2025, 1, 6), date(2025, 1, 7), status=LeaveStatus.PENDING)
    leaves_repo.add(1, date(2025, 1, 8), date(2025, 1, 9), status=LeaveStatus.REJECTED)
    leaves_repo.add(1, date(2025, 1, 13), date(2025, 1, 15))

    assert count_paid_leave_days(leaves_repo.list_leaves(user_id=1), *JAN) == 3


def test_payable_days_combines_both(attendance_repo, leaves_repo):
    records = _month_of_records(attendance_repo)
    leaves_repo.add(1, date(2025, 1, 20), date(2025, 1, 21))

    days = payable_days(records, leaves_repo.list_leaves(), AttendanceCountingPolicy.PRESENT_ONLY, *JAN)

    assert days.attendance_count == 1
    assert days.paid_leave_days == 2
    assert days.total_payable_days == 3
