from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ProfileEntryKind


@dataclass(frozen=True)
class ProfileEntry:
    """A skill or certification listed on an employee profile."""

    entry_id: int
    user_id: int
    kind: ProfileEntryKind
    name: str
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            f"{self.kind.value}_id": self.entry_id,
            "user_id": self.user_id,
            f"{self.kind.value}_name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
