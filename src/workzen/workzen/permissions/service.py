from __future__ import annotations

import logging
from typing import Any, Mapping

from ..core.enums import AccessLevel, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import MODULES, UserPermission
from .repository import PermissionRepository

logger = logging.getLogger(__name__)


class PermissionService:
    """Admin-managed, per-module access levels for each user."""

    def __init__(self, permissions: PermissionRepository, users: UserRepository):
        self._permissions = permissions
        self._users = users

    def _require_admin_and_user(self, current_role: Role, user_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Insufficient permissions")
        if not self._users.get_by_id(int(user_id)):
            raise NotFoundError("User not found")

    def get(self, *, current_role: Role, user_id: int) -> UserPermission:
        self._require_admin_and_user(current_role, user_id)
        return self._permissions.get_for_user(int(user_id)) or UserPermission(user_id=int(user_id))

    def upsert(self, *, current_role: Role, user_id: int, levels: Mapping[str, Any]) -> UserPermission:
        self._require_admin_and_user(current_role, user_id)

        unknown = sorted(set(levels) - set(MODULES) - {"user_id"})
        if unknown:
            raise ValidationError(f"Unknown permission modules: {', '.join(unknown)}")

        current = self._permissions.get_for_user(int(user_id)) or UserPermission(user_id=int(user_id))
        resolved: dict[str, AccessLevel] = {}
        for module in MODULES:
            raw = levels.get(module, current.level_for(module).value)
            try:
                resolved[module] = AccessLevel(raw)
            except ValueError:
                raise ValidationError(f"Invalid access level for {module}: {raw!r}")

        permission = UserPermission(user_id=int(user_id), **resolved)
        self._permissions.upsert(permission)
        logger.info("Permissions for user %s set to %s", user_id, permission.to_dict())
        return permission
