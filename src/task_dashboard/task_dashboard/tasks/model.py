from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import QualityMarkState


@dataclass(frozen=True)
class QualityMark:
    """Quality mark of a task: unset, pending draft, or locked after saving.

    Only a locked value counts toward evaluation.
    """

    state: QualityMarkState = QualityMarkState.UNSET
    value: Optional[float] = None

    @classmethod
    def unset(cls) -> "QualityMark":
        return cls()

    @classmethod
    def pending(cls, draft: float) -> "QualityMark":
        return cls(state=QualityMarkState.PENDING, value=float(draft))

    @classmethod
    def locked(cls, value: float) -> "QualityMark":
        return cls(state=QualityMarkState.LOCKED, value=float(value))

    @property
    def is_locked(self) -> bool:
        return self.state == QualityMarkState.LOCKED

    @property
    def saved_value(self) -> Optional[float]:
        return self.value if self.is_locked else None


@dataclass(frozen=True)
class Task:
    """Domain entity: a task as seen by the evaluation engine."""

    task_id: str
    status: str
    assigned_to_id: str = ""
    assigned_email: str = ""
    quality_mark: QualityMark = field(default_factory=QualityMark.unset)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    title: str = ""

    @property
    def comparison_date(self) -> Optional[date]:
        """Date used for range filtering: end date, else start date."""
        return self.end_date or self.start_date
