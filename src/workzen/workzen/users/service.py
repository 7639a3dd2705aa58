from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_local
from ..common.validators import (
    require_email,
    require_min_length,
    require_non_empty,
    require_non_negative_int,
)
from ..core.constants import (
    DEFAULT_ANNUAL_LEAVE,
    DEFAULT_PASSWORD_LENGTH,
    DEFAULT_SICK_LEAVE,
    MIN_PASSWORD_LENGTH,
)
from ..core.enums import BACK_OFFICE_ROLES, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from .model import LEAVE_BALANCE_FIELDS, SALARY_FIELDS, SELF_SERVICE_FIELDS, UPDATABLE_FIELDS, User
from .repository import UserRepository

logger = logging.getLogger(__name__)

LOGIN_ID_PREFIX = "WZ"


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    name: str
    role: Role


@dataclass(frozen=True)
class CreatedEmployee:
    user: User
    generated_password: Optional[str] = None


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip().lower())
        if not user or not user.is_active:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        logger.info("User %s logged in", user.login_id)
        return SessionUser(user_id=user.user_id, name=user.name, role=user.role)


class UserService:
    """Use case: manage employees and their salary/leave configuration."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User not found")
        return user

    def list_all(self):
        return list(self._users.list_all())

    def get_for_viewer(self, *, current_role: Role, current_user_id: int, user_id: int) -> User:
        if int(user_id) != int(current_user_id) and current_role not in BACK_OFFICE_ROLES:
            raise AuthorizationError("Insufficient permissions")
        return self.get(user_id)

    def _next_login_id(self, name: str, year: int) -> str:
        parts = [p for p in name.split() if p]
        initials = "".join(p[0] for p in parts[:1] + parts[1:][-1:]).upper()
        initials = (initials + "XX")[:2]
        serial = self._users.count_joined_in(year) + 1
        while True:
            login_id = f"{LOGIN_ID_PREFIX}{initials}{year:04d}{serial:04d}"
            if not self._users.get_by_login_id(login_id):
                return login_id
            serial += 1

    def create_employee(
        self,
        *,
        current_role: Role,
        name: str,
        email: str,
        department: str,
        role: Role = Role.EMPLOYEE,
        password: Optional[str] = None,
        year_of_joining: Optional[int] = None,
        basic_salary: int = 0,
        hra: int = 0,
        other_earnings: int = 0,
        annual_leave: int = DEFAULT_ANNUAL_LEAVE,
        sick_leave: int = DEFAULT_SICK_LEAVE,
        profile: Optional[Mapping[str, Any]] = None,
    ) -> CreatedEmployee:
        if current_role not in {Role.ADMIN, Role.HR}:
            raise AuthorizationError("Insufficient permissions")

        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("Invalid role")
        if role == Role.ADMIN and current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can create administrators")

        name = require_non_empty(name, "Name")
        email = require_email(email)
        department = require_non_empty(department, "Department")
        if self._users.get_by_email(email):
            raise ValidationError("Email is already registered")

        year = int(year_of_joining) if year_of_joining else now_local().year

        generated = None
        if password:
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        else:
            password = generated = secrets.token_urlsafe(DEFAULT_PASSWORD_LENGTH)[:DEFAULT_PASSWORD_LENGTH]

        fields: dict[str, Any] = {
            "login_id": self._next_login_id(name, year),
            "name": name,
            "email": email,
            "password_hash": generate_password_hash(password),
            "role": role,
            "department": department,
            "year_of_joining": year,
            "basic_salary": require_non_negative_int(basic_salary, "Basic salary"),
            "hra": require_non_negative_int(hra, "HRA"),
            "other_earnings": require_non_negative_int(other_earnings, "Other earnings"),
            "annual_leave": require_non_negative_int(annual_leave, "Annual leave"),
            "sick_leave": require_non_negative_int(sick_leave, "Sick leave"),
        }
        for key, value in (profile or {}).items():
            if key in ("mobile", "company", "manager", "location", "about", "hobbies"):
                fields[key] = (str(value).strip() or None) if value is not None else None

        user_id = self._users.create_user(fields=fields)
        logger.info("Created employee %s with role %s", fields["login_id"], role.value)
        return CreatedEmployee(user=self.get(user_id), generated_password=generated)

    def _clean_changes(self, user_id: int, changes: Mapping[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in changes.items():
            if key in SALARY_FIELDS or key in LEAVE_BALANCE_FIELDS:
                cleaned[key] = require_non_negative_int(value, key)
            elif key == "role":
                try:
                    cleaned[key] = Role(value)
                except ValueError:
                    raise ValidationError("Invalid role")
            elif key == "email":
                email = require_email(value)
                other = self._users.get_by_email(email)
                if other and other.user_id != int(user_id):
                    raise ValidationError("Email is already registered")
                cleaned[key] = email
            elif key in ("name", "department"):
                cleaned[key] = require_non_empty(value, key.capitalize())
            elif key == "year_of_joining":
                cleaned[key] = require_non_negative_int(value, "Year of joining")
            elif key == "is_active":
                cleaned[key] = bool(value)
            elif key in UPDATABLE_FIELDS:
                cleaned[key] = (str(value).strip() or None) if value is not None else None
        return cleaned

    def update_employee(self, *, current_role: Role, user_id: int, changes: Mapping[str, Any]) -> User:
        """Apply an update according to the caller's role.

        payroll officers may only touch salary fields, HR may change everything
        except the role and administrators may change anything.
        """

        if current_role == Role.PAYROLL:
            changes = {k: v for k, v in changes.items() if k in SALARY_FIELDS}
            if not changes:
                raise ValidationError("No valid salary fields to update")
        elif current_role == Role.HR:
            if "role" in changes:
                raise AuthorizationError("Only administrators can change user roles")
        elif current_role != Role.ADMIN:
            raise AuthorizationError("Insufficient permissions")

        self.get(user_id)
        cleaned = self._clean_changes(user_id, changes)
        if not cleaned:
            raise ValidationError("No valid fields to update")

        self._users.update_user(int(user_id), cleaned)
        logger.info("Updated employee %s fields=%s", user_id, sorted(cleaned))
        return self.get(user_id)

    def update_own_profile(self, *, user_id: int, changes: Mapping[str, Any]) -> User:
        updates = {k: v for k, v in changes.items() if k in SELF_SERVICE_FIELDS}
        if not updates:
            raise ValidationError("No valid fields to update")

        self.get(user_id)
        self._users.update_user(int(user_id), self._clean_changes(user_id, updates))
        return self.get(user_id)

    def update_leave_balance(
        self,
        *,
        user_id: int,
        annual_leave: Optional[int] = None,
        sick_leave: Optional[int] = None,
    ) -> User:
        changes: dict[str, int] = {}
        if annual_leave is not None:
            changes["annual_leave"] = require_non_negative_int(annual_leave, "Annual leave")
        if sick_leave is not None:
            changes["sick_leave"] = require_non_negative_int(sick_leave, "Sick leave")
        if not changes:
            raise ValidationError("No leave balance to update")

        self.get(user_id)
        self._users.update_user(int(user_id), changes)
        logger.info("Updated leave balance for employee %s: %s", user_id, changes)
        return self.get(user_id)

    def delete_employee(self, *, current_user_id: int, user_id: int) -> None:
        if int(user_id) == int(current_user_id):
            raise ValidationError("You cannot delete your own account")
        if not self._users.delete_by_id(int(user_id)):
            raise NotFoundError("User not found")
        logger.info("Deleted employee %s", user_id)
