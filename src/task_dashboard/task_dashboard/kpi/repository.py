from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import KpiEntry


class KpiRepository(Protocol):
    def list_all(self) -> Sequence[KpiEntry]:
        raise NotImplementedError

    def list_for_user(self, *, user_id: str, user_email: str) -> Sequence[KpiEntry]:
        raise NotImplementedError

    def find(self, *, user_id: str, month: str, year: int) -> Optional[KpiEntry]:
        raise NotImplementedError

    def create(self, *, user_id: str, user_email: str, month: str, year: int, score: float) -> str:
        raise NotImplementedError
