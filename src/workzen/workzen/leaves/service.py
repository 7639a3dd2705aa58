from __future__ import annotations

import logging
from datetime import date

from ..common.validators import require_non_empty
from ..core.enums import LeaveStatus, LeaveType, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)

# Statuses an approver may move a request to.
DECISION_STATUSES = frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED, LeaveStatus.CANCELLED})
APPROVER_ROLES = frozenset({Role.ADMIN, Role.PAYROLL})


class LeaveService:
    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def apply(
        self,
        *,
        user_id: int,
        leave_type: str,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> LeaveRequest:
        try:
            kind = LeaveType(leave_type)
        except ValueError:
            raise ValidationError("Invalid leave type")

        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        reason = require_non_empty(reason, "Reason")
        leave_id = self._leaves.create_leave(
            user_id=int(user_id),
            leave_type=kind,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
        )
        logger.info("Employee %s applied for %s leave %s..%s", user_id, kind.value, start_date, end_date)
        return self._get(leave_id)

    def decide(self, *, current_role: Role, leave_id: int, status: str) -> LeaveRequest:
        if current_role not in APPROVER_ROLES:
            raise AuthorizationError("Insufficient permissions")

        try:
            new_status = LeaveStatus(status)
        except ValueError:
            raise ValidationError("Invalid status")
        if new_status not in DECISION_STATUSES:
            raise ValidationError("Invalid status")

        self._get(leave_id)
        self._leaves.update_status(leave_id=int(leave_id), status=new_status)
        logger.info("Leave %s marked %s", leave_id, new_status.value)
        return self._get(leave_id)

    def list_for_viewer(self, *, current_role: Role, current_user_id: int) -> list[LeaveRequest]:
        if current_role == Role.EMPLOYEE:
            return list(self._leaves.list_leaves(user_id=int(current_user_id)))
        return list(self._leaves.list_leaves())

    def _get(self, leave_id: int) -> LeaveRequest:
        leave = self._leaves.get_leave(leave_id=int(leave_id))
        if not leave:
            raise NotFoundError("Leave not found")
        return leave
