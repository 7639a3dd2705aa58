from __future__ import annotations

from typing import Optional, Protocol

from .model import UserPermission


class PermissionRepository(Protocol):
    def get_for_user(self, user_id: int) -> Optional[UserPermission]:
        raise NotImplementedError

    def upsert(self, permission: UserPermission) -> None:
        raise NotImplementedError
