from __future__ import annotations

from typing import Protocol, Sequence

from .model import PayrunBatch


class PayrunRepository(Protocol):
    def create(self, batch: PayrunBatch) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[PayrunBatch]:
        """Newest first."""

        raise NotImplementedError
