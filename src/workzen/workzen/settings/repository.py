from __future__ import annotations

from typing import Optional, Protocol

from .model import PayrollSettings


class SettingsRepository(Protocol):
    def get(self) -> Optional[PayrollSettings]:
        raise NotImplementedError

    def save(self, settings: PayrollSettings) -> PayrollSettings:
        """Insert the singleton row or overwrite it."""

        raise NotImplementedError
