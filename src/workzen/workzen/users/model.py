from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_ANNUAL_LEAVE, DEFAULT_SICK_LEAVE
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an employee account.

    Note: plain data object, no DB access here. Salary components are whole
    currency units.
    """

    user_id: int
    login_id: str
    name: str
    email: str
    password_hash: str
    role: Role
    department: str
    year_of_joining: int
    basic_salary: int = 0
    hra: int = 0
    other_earnings: int = 0
    annual_leave: int = DEFAULT_ANNUAL_LEAVE
    sick_leave: int = DEFAULT_SICK_LEAVE
    mobile: Optional[str] = None
    company: Optional[str] = None
    manager: Optional[str] = None
    location: Optional[str] = None
    about: Optional[str] = None
    hobbies: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    @property
    def gross_salary(self) -> int:
        return self.basic_salary + self.hra + self.other_earnings

    def to_dict(self) -> dict:
        data = asdict(self)
        data["role"] = self.role.value
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data

    def summary(self) -> dict:
        """Identity fields used in report headers."""
        return {
            "user_id": self.user_id,
            "login_id": self.login_id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "location": self.location,
            "year_of_joining": self.year_of_joining,
        }


# Columns an update may touch, grouped by who is allowed to change them.
SALARY_FIELDS = ("basic_salary", "hra", "other_earnings")
SELF_SERVICE_FIELDS = ("about", "hobbies", "mobile", "location")
PROFILE_FIELDS = (
    "name",
    "email",
    "department",
    "mobile",
    "company",
    "manager",
    "location",
    "year_of_joining",
    "about",
    "hobbies",
    "is_active",
)
LEAVE_BALANCE_FIELDS = ("annual_leave", "sick_leave")
UPDATABLE_FIELDS = PROFILE_FIELDS + SALARY_FIELDS + LEAVE_BALANCE_FIELDS + ("role",)
