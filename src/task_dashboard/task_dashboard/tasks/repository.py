from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Task


class TaskRepository(Protocol):
    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def get_by_id(self, task_id: str) -> Optional[Task]:
        raise NotImplementedError

    def save_quality_mark(self, *, task_id: str, mark: float, marked_at: datetime) -> bool:
        """Persist a first quality mark. Returns False if nothing was updated."""

        raise NotImplementedError
