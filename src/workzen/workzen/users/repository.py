from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for employees.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_login_id(self, login_id: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def count_joined_in(self, year: int) -> int:
        raise NotImplementedError

    def create_user(self, *, fields: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update_user(self, user_id: int, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError
