from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from ..common.validators import require_non_negative_int
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConfigurationError, ValidationError
from .model import PayrollSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


def _parse_pf_percent(value: Any) -> Decimal:
    try:
        pf = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError("PF percent must be a number")
    if not pf.is_finite() or pf < 0 or pf > 100:
        raise ValidationError("PF percent must be between 0 and 100")
    return pf.quantize(Decimal("0.01"))


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get_or_create_default(self) -> PayrollSettings:
        """Read path used by the settings screen: seed defaults on first read."""

        current = self._settings.get()
        if current is None:
            current = self._settings.save(PayrollSettings())
            logger.info("Created default payroll settings")
        return current

    def require_configured(self) -> PayrollSettings:
        """Settings for a payroll computation; never silently defaulted."""

        current = self._settings.get()
        if current is None:
            raise ConfigurationError("Settings not configured")
        ensure_usable(current)
        return current

    def update(self, *, current_role: Role, changes: Mapping[str, Any]) -> PayrollSettings:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Insufficient permissions")

        updated = self._settings.get() or PayrollSettings()
        touched = False
        if "working_days" in changes:
            working_days = require_non_negative_int(changes["working_days"], "Working days")
            if working_days == 0:
                raise ValidationError("Working days must be greater than 0")
            updated = replace(updated, working_days=working_days)
            touched = True
        if "pf_percent" in changes:
            updated = replace(updated, pf_percent=_parse_pf_percent(changes["pf_percent"]))
            touched = True
        if "professional_tax" in changes:
            updated = replace(
                updated,
                professional_tax=require_non_negative_int(changes["professional_tax"], "Professional tax"),
            )
            touched = True
        if not touched:
            raise ValidationError("No valid fields to update")

        saved = self._settings.save(updated)
        logger.info(
            "Payroll settings updated: working_days=%s pf_percent=%s professional_tax=%s",
            saved.working_days,
            saved.pf_percent,
            saved.professional_tax,
        )
        return saved


def ensure_usable(settings: PayrollSettings) -> None:
    if settings.working_days <= 0:
        raise ConfigurationError("Settings not configured: working days must be greater than 0")
