from __future__ import annotations

from typing import Optional, Protocol

from .model import SalaryStructure


class SalaryStructureRepository(Protocol):
    def get_for_user(self, user_id: int) -> Optional[SalaryStructure]:
        raise NotImplementedError

    def upsert(self, structure: SalaryStructure) -> SalaryStructure:
        raise NotImplementedError
