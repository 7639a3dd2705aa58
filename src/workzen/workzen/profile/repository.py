from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ProfileEntryKind
from .model import ProfileEntry


class ProfileRepository(Protocol):
    def list_entries(self, kind: ProfileEntryKind, user_id: int) -> Sequence[ProfileEntry]:
        raise NotImplementedError

    def get_entry(self, kind: ProfileEntryKind, entry_id: int) -> Optional[ProfileEntry]:
        raise NotImplementedError

    def add_entry(self, kind: ProfileEntryKind, *, user_id: int, name: str) -> int:
        raise NotImplementedError

    def delete_entry(self, kind: ProfileEntryKind, entry_id: int) -> bool:
        raise NotImplementedError
