from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.validators import require_number_in_range
from ..core.constants import QUALITY_MARK_MAX, QUALITY_MARK_MIN
from ..core.exceptions import NotFoundError, QualityMarkLockedError
from .model import QualityMark
from .repository import TaskRepository

logger = logging.getLogger(__name__)

LOCKED_MESSAGE = "Quality marks are locked after the first save."


class QualityMarkService:
    """Saves quality marks. A mark is write-once: the first save locks it."""

    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks

    def save_quality_mark(self, task_id: str, value: Any, *, now: Optional[datetime] = None) -> QualityMark:
        mark = require_number_in_range(value, "mark", QUALITY_MARK_MIN, QUALITY_MARK_MAX)
        now = now or datetime.now()

        task = self._tasks.get_by_id(task_id)
        if not task:
            raise NotFoundError("Task not found")
        if task.quality_mark.is_locked:
            raise QualityMarkLockedError(LOCKED_MESSAGE)

        saved = self._tasks.save_quality_mark(task_id=task_id, mark=mark, marked_at=now)
        if not saved:
            # Another writer locked it between the read and the update.
            raise QualityMarkLockedError(LOCKED_MESSAGE)

        logger.info("Locked quality mark %.1f for task %s", mark, task_id)
        return QualityMark.locked(mark)
