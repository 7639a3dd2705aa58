from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AccessLevel

MODULES = ("employees", "attendance", "time_off", "payroll", "reports", "settings")


@dataclass(frozen=True)
class UserPermission:
    user_id: int
    employees: AccessLevel = AccessLevel.NONE
    attendance: AccessLevel = AccessLevel.NONE
    time_off: AccessLevel = AccessLevel.NONE
    payroll: AccessLevel = AccessLevel.NONE
    reports: AccessLevel = AccessLevel.NONE
    settings: AccessLevel = AccessLevel.NONE

    def level_for(self, module: str) -> AccessLevel:
        return getattr(self, module)

    def to_dict(self) -> dict:
        data = {"user_id": self.user_id}
        data.update({m: self.level_for(m).value for m in MODULES})
        return data
