from __future__ import annotations

from datetime import date

import pytest

from src.task_dashboard.task_dashboard.core.enums import QualityMarkState
from src.task_dashboard.task_dashboard.core.exceptions import (
    NotFoundError,
    QualityMarkLockedError,
    ValidationError,
)
from src.task_dashboard.task_dashboard.tasks.model import QualityMark, Task
from src.task_dashboard.task_dashboard.tasks.service import QualityMarkService


def _task(task_id="t1", mark=None):
    return Task(
        task_id=task_id,
        status="completed",
        assigned_to_id="u1",
        quality_mark=mark or QualityMark.unset(),
        end_date=date(2025, 1, 10),
    )


def test_quality_mark_tri_state():
    unset = QualityMark.unset()
    draft = QualityMark.pending(70)
    locked = QualityMark.locked(85)

    assert unset.state == QualityMarkState.UNSET and unset.saved_value is None
    assert draft.state == QualityMarkState.PENDING and draft.saved_value is None
    assert locked.saved_value == 85


def test_first_save_locks_mark(make_repos, fixed_now):
    _, tasks, _, _ = make_repos(tasks=[_task()])
    svc = QualityMarkService(tasks)

    mark = svc.save_quality_mark("t1", "88", now=fixed_now)

    assert mark.is_locked and mark.value == 88
    assert tasks.get_by_id("t1").quality_mark.saved_value == 88
    assert tasks.saved == [("t1", 88.0, fixed_now)]


def test_second_save_is_rejected(make_repos, fixed_now):
    _, tasks, _, _ = make_repos(tasks=[_task(mark=QualityMark.locked(60))])
    svc = QualityMarkService(tasks)

    with pytest.raises(QualityMarkLockedError):
        svc.save_quality_mark("t1", 95, now=fixed_now)

    assert tasks.get_by_id("t1").quality_mark.saved_value == 60


@pytest.mark.parametrize("value", [-1, 101, "abc", None, float("nan")])
def test_out_of_range_mark_is_rejected(make_repos, value):
    _, tasks, _, _ = make_repos(tasks=[_task()])

    with pytest.raises(ValidationError):
        QualityMarkService(tasks).save_quality_mark("t1", value)


def test_unknown_task(make_repos):
    _, tasks, _, _ = make_repos()

    with pytest.raises(NotFoundError):
        QualityMarkService(tasks).save_quality_mark("missing", 50)


def test_lost_race_reports_locked(make_repos, fixed_now):
    _, tasks, _, _ = make_repos(tasks=[_task()])
    tasks.save_quality_mark = lambda **kwargs: False

    with pytest.raises(QualityMarkLockedError):
        QualityMarkService(tasks).save_quality_mark("t1", 50, now=fixed_now)
