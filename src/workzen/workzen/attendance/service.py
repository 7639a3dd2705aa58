from __future__ import annotations

import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import AttendanceRecord, AttendanceStats
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def summarize(records: Iterable[AttendanceRecord]) -> AttendanceStats:
    records = list(records)
    total = len(records)
    counts = {status: 0 for status in AttendanceStatus}
    for r in records:
        counts[r.status] += 1

    if total:
        attended = Decimal(counts[AttendanceStatus.PRESENT]) + Decimal(counts[AttendanceStatus.HALF]) * Decimal("0.5")
        percentage = str((attended / total * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    else:
        percentage = "0"

    return AttendanceStats(
        total=total,
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        half_day=counts[AttendanceStatus.HALF],
        leave=counts[AttendanceStatus.LEAVE],
        percentage=percentage,
    )


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, users: UserRepository):
        self._attendance = attendance
        self._users = users

    def _require_user(self, user_id: int) -> None:
        if not self._users.get_by_id(int(user_id)):
            raise NotFoundError("Employee not found")

    def clock_in(self, user_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        self._require_user(user_id)

        existing = self._attendance.get_for_user_and_date(int(user_id), today)
        if existing:
            raise ValidationError("Already clocked in today")

        attendance_id = self._attendance.create_clock_in(
            user_id=int(user_id),
            work_date=today,
            in_time=now.strftime("%H:%M"),
            status=AttendanceStatus.PRESENT,
        )
        logger.info("Employee %s clocked in at %s", user_id, now.isoformat(timespec="minutes"))
        return AttendanceRecord(
            attendance_id=attendance_id,
            user_id=int(user_id),
            work_date=today,
            in_time=now.strftime("%H:%M"),
            out_time=None,
            status=AttendanceStatus.PRESENT,
        )

    def clock_out(self, user_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        record = self._attendance.get_for_user_and_date(int(user_id), today)
        if not record:
            raise ValidationError("Not clocked in today")
        if record.out_time is not None:
            raise ValidationError("Already clocked out")

        out_time = now.strftime("%H:%M")
        if not self._attendance.update_clock_out(attendance_id=record.attendance_id, out_time=out_time):
            raise ValidationError("Already clocked out")

        logger.info("Employee %s clocked out at %s", user_id, now.isoformat(timespec="minutes"))
        return AttendanceRecord(
            attendance_id=record.attendance_id,
            user_id=record.user_id,
            work_date=record.work_date,
            in_time=record.in_time,
            out_time=out_time,
            status=record.status,
        )

    def list_for_viewer(self, *, current_role: Role, current_user_id: int) -> list[AttendanceRecord]:
        """Employees only see their own records; every other role sees all."""

        if current_role == Role.EMPLOYEE:
            return list(self._attendance.list_for_user(int(current_user_id)))
        return list(self._attendance.list_all())

    def list_for_user(self, user_id: int) -> list[AttendanceRecord]:
        self._require_user(user_id)
        return list(self._attendance.list_for_user(int(user_id)))

    def stats_for_user(self, user_id: int) -> AttendanceStats:
        return summarize(self.list_for_user(user_id))
