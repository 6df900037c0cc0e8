from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Optional

import pytest

from src.task_dashboard.task_dashboard.attendance.model import AttendanceEntry
from src.task_dashboard.task_dashboard.container import build_services
from src.task_dashboard.task_dashboard.kpi.model import KpiEntry
from src.task_dashboard.task_dashboard.tasks.model import QualityMark, Task
from src.task_dashboard.task_dashboard.users.model import Employee


class InMemoryEmployees:
    def __init__(self, employees: List[Employee]):
        self.employees = list(employees)

    def list_all(self):
        return list(self.employees)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        key = (employee_id or "").strip().lower()
        for e in self.employees:
            if employee_id in (e.uid, e.record_id) or (key and key == e.email_key):
                return e
        return None


class InMemoryTasks:
    def __init__(self, tasks: List[Task]):
        self.by_id: Dict[str, Task] = {t.task_id: t for t in tasks}
        self.saved: list = []

    def list_all(self):
        return list(self.by_id.values())

    def get_by_id(self, task_id: str) -> Optional[Task]:
        return self.by_id.get(task_id)

    def save_quality_mark(self, *, task_id: str, mark: float, marked_at: datetime) -> bool:
        task = self.by_id.get(task_id)
        if not task or task.quality_mark.is_locked:
            return False
        self.by_id[task_id] = Task(
            task_id=task.task_id,
            status=task.status,
            assigned_to_id=task.assigned_to_id,
            assigned_email=task.assigned_email,
            quality_mark=QualityMark.locked(mark),
            start_date=task.start_date,
            end_date=task.end_date,
            title=task.title,
        )
        self.saved.append((task_id, mark, marked_at))
        return True


class InMemoryAttendance:
    def __init__(self, entries: List[AttendanceEntry]):
        self.entries = list(entries)
        self.last_args = None

    def list_between(self, *, start_date: date, end_date: date):
        self.last_args = {"start_date": start_date, "end_date": end_date}
        return [e for e in self.entries if start_date <= e.work_date <= end_date]

    def list_for_user(self, *, user_id: str, user_email: str, start_date=None, end_date=None):
        email = (user_email or "").lower()
        out = []
        for e in self.entries:
            if e.user_id != user_id and (not email or e.user_email.lower() != email):
                continue
            if start_date and e.work_date < start_date:
                continue
            if end_date and e.work_date > end_date:
                continue
            out.append(e)
        return out


class InMemoryKpis:
    def __init__(self, entries: List[KpiEntry]):
        self.entries = list(entries)

    def list_all(self):
        return list(self.entries)

    def list_for_user(self, *, user_id: str, user_email: str):
        email = (user_email or "").lower()
        return [e for e in self.entries if e.user_id == user_id or (email and e.user_email.lower() == email)]

    def find(self, *, user_id: str, month: str, year: int) -> Optional[KpiEntry]:
        for e in self.entries:
            if e.user_id == user_id and e.month == month and e.year == year:
                return e
        return None

    def create(self, *, user_id: str, user_email: str, month: str, year: int, score: float) -> str:
        entry_id = str(len(self.entries) + 1)
        self.entries.append(
            KpiEntry(entry_id=entry_id, user_id=user_id, user_email=user_email, month=month, year=year, score=score)
        )
        return entry_id


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 31, 9, 0, 0)


@pytest.fixture
def sara() -> Employee:
    return Employee(uid="u1", record_id="doc-1", email="Sara@Example.com", name="Sara")


@pytest.fixture
def make_repos():
    def _make(*, employees=(), tasks=(), attendance=(), kpis=()):
        return (
            InMemoryEmployees(list(employees)),
            InMemoryTasks(list(tasks)),
            InMemoryAttendance(list(attendance)),
            InMemoryKpis(list(kpis)),
        )

    return _make


@pytest.fixture
def make_container(make_repos):
    def _make(**kwargs):
        employees, tasks, attendance, kpis = make_repos(**kwargs)
        return build_services(
            employees_repo=employees,
            tasks_repo=tasks,
            attendance_repo=attendance,
            kpi_repo=kpis,
        )

    return _make
