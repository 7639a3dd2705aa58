from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create_leave(
        self,
        *,
        user_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> int:
        raise NotImplementedError

    def get_leave(self, *, leave_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_leaves(
        self,
        *,
        user_id: Optional[int] = None,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_overlapping(
        self,
        *,
        user_id: int,
        start_date: date,
        end_date: date,
        status: LeaveStatus = LeaveStatus.APPROVED,
    ) -> Sequence[LeaveRequest]:
        """Requests of one employee whose inclusive range touches [start_date, end_date]."""

        raise NotImplementedError

    def update_status(self, *, leave_id: int, status: LeaveStatus) -> bool:
        raise NotImplementedError
