from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..core.enums import ProfileEntryKind, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.repository import UserRepository
from .model import ProfileEntry
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Skills and certifications on employee profiles.

    Anyone signed in may read them; only the owner or an administrator may
    add or remove entries.
    """

    def __init__(self, entries: ProfileRepository, users: UserRepository):
        self._entries = entries
        self._users = users

    def _require_user(self, user_id: int) -> None:
        if not self._users.get_by_id(int(user_id)):
            raise NotFoundError("User not found")

    @staticmethod
    def _require_owner_or_admin(current_role: Role, current_user_id: int, owner_id: int) -> None:
        if int(owner_id) != int(current_user_id) and current_role != Role.ADMIN:
            raise AuthorizationError("Insufficient permissions")

    def list_entries(self, kind: ProfileEntryKind, user_id: int) -> list[ProfileEntry]:
        self._require_user(user_id)
        return list(self._entries.list_entries(kind, int(user_id)))

    def add_entry(
        self,
        kind: ProfileEntryKind,
        *,
        current_role: Role,
        current_user_id: int,
        user_id: int,
        name: str,
    ) -> ProfileEntry:
        self._require_user(user_id)
        self._require_owner_or_admin(current_role, current_user_id, user_id)

        name = require_non_empty(name, f"{kind.label} name")
        entry_id = self._entries.add_entry(kind, user_id=int(user_id), name=name)
        logger.info("Added %s %r for employee %s", kind.value, name, user_id)
        return self._get(kind, entry_id)

    def delete_entry(self, kind: ProfileEntryKind, *, current_role: Role, current_user_id: int, entry_id: int) -> None:
        entry = self._get(kind, entry_id)
        self._require_owner_or_admin(current_role, current_user_id, entry.user_id)
        if not self._entries.delete_entry(kind, entry.entry_id):
            raise NotFoundError(f"{kind.label} not found")
        logger.info("Deleted %s %s of employee %s", kind.value, entry_id, entry.user_id)

    def _get(self, kind: ProfileEntryKind, entry_id: int) -> ProfileEntry:
        entry = self._entries.get_entry(kind, int(entry_id))
        if not entry:
            raise NotFoundError(f"{kind.label} not found")
        return entry
