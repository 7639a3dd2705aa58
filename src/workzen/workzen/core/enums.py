from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "admin"
    HR = "hr"
    PAYROLL = "payroll"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    HALF = "Half"
    LEAVE = "Leave"


class LeaveStatus(str, Enum):
    """Approval workflow state of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    CANCELLED = "Cancelled"


class LeaveType(str, Enum):
    ANNUAL = "Annual"
    SICK = "Sick"
    CASUAL = "Casual"


class AccessLevel(str, Enum):
    """Per-module access level granted to a user."""

    NONE = "none"
    VIEW = "view"
    EDIT = "edit"


# Roles allowed to see everyone's records and salary figures.
BACK_OFFICE_ROLES = frozenset({Role.ADMIN, Role.HR, Role.PAYROLL})


class ProfileEntryKind(str, Enum):
    """Free-text entries an employee lists on their profile."""

    SKILL = "skill"
    CERTIFICATION = "certification"

    @property
    def label(self) -> str:
        return self.value.capitalize()
