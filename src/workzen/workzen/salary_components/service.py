from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from ..common.validators import require_non_negative_int
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import HOUR_FIELDS, MONEY_FIELDS, PERCENT_FIELDS, SalaryStructure
from .repository import SalaryStructureRepository

logger = logging.getLogger(__name__)

SALARY_MANAGERS = frozenset({Role.ADMIN, Role.PAYROLL})


def _label(field_name: str) -> str:
    return field_name.replace("_", " ").capitalize()


def _parse_decimal(value: Any, field_name: str, *, upper: Optional[Decimal] = None) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{_label(field_name)} must be a number")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{_label(field_name)} must be a number")
    if not number.is_finite() or number < 0:
        raise ValidationError(f"{_label(field_name)} cannot be negative")
    if upper is not None and number > upper:
        raise ValidationError(f"{_label(field_name)} must be between 0 and {upper}")
    return number.quantize(Decimal("0.01"))


class SalaryStructureService:
    def __init__(self, structures: SalaryStructureRepository, users: UserRepository):
        self._structures = structures
        self._users = users

    def _require_user(self, user_id: int) -> None:
        if not self._users.get_by_id(int(user_id)):
            raise NotFoundError("User not found")

    def get(self, *, current_role: Role, current_user_id: int, user_id: int) -> Optional[SalaryStructure]:
        """The employee's salary sheet, or None when none has been entered yet."""

        if current_role not in SALARY_MANAGERS and int(current_user_id) != int(user_id):
            raise AuthorizationError("Insufficient permissions")
        self._require_user(user_id)
        return self._structures.get_for_user(int(user_id))

    def save(self, *, current_role: Role, user_id: int, values: Mapping[str, Any]) -> SalaryStructure:
        """Create the sheet or update the given fields of the existing one."""

        if current_role not in SALARY_MANAGERS:
            raise AuthorizationError("Insufficient permissions")
        self._require_user(user_id)

        existing = self._structures.get_for_user(int(user_id))
        if existing is None and "monthly_wage" not in values:
            raise ValidationError("Monthly wage is required")

        changes: dict[str, Any] = {}
        for name in MONEY_FIELDS:
            if name in values:
                changes[name] = require_non_negative_int(values[name], _label(name))
        for name in PERCENT_FIELDS:
            if name in values:
                changes[name] = _parse_decimal(values[name], name, upper=Decimal("100"))
        for name in HOUR_FIELDS:
            if name in values:
                changes[name] = _parse_decimal(values[name], name, upper=Decimal("24"))
        if "working_days" in values:
            working_days = require_non_negative_int(values["working_days"], "Working days")
            if working_days == 0:
                raise ValidationError("Working days must be greater than 0")
            changes["working_days"] = working_days
        if not changes:
            raise ValidationError("No valid fields to update")

        if existing is None:
            changes.setdefault("yearly_wage", changes["monthly_wage"] * 12)
            structure = SalaryStructure(user_id=int(user_id), **changes)
        else:
            structure = replace(existing, **changes)

        saved = self._structures.upsert(structure)
        logger.info(
            "%s salary components of employee %s: %s",
            "Created" if existing is None else "Updated",
            user_id,
            ", ".join(sorted(changes)),
        )
        return saved
