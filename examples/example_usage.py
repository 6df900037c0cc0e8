"""Example: run the evaluation on raw documents (no Flask, no database).

Shows the pure engine on its own: normalize raw records, build the attendance
map, then evaluate.
"""

from src.task_dashboard.task_dashboard.attendance.normalizer import build_attendance_map, entries_from_documents
from src.task_dashboard.task_dashboard.evaluation.aggregator import evaluate_all
from src.task_dashboard.task_dashboard.kpi.normalizer import kpi_from_document
from src.task_dashboard.task_dashboard.tasks.normalizer import task_from_document
from src.task_dashboard.task_dashboard.users.normalizer import employee_from_document


def main():
    employees = [employee_from_document("u1", {"uid": "u1", "email": "Sara@example.com", "name": "Sara"})]
    tasks = [
        task_from_document("t1", {"status": "Completed", "assignedTo": "u1", "qualityMark": 90, "endDate": "2025-01-10"}),
        task_from_document("t2", {"actualStatus": "in_progress", "assignedEmail": "sara@example.com"}),
        task_from_document("t3", {"status": "DELAYED", "assignedTo": "u1"}),
    ]
    attendance = entries_from_documents(
        [
            ("u1_2025-01-02", {"status": "Present"}),
            ("u1_2025-01-03", {"attendanceStatus": "half day"}),
            ("x", {"userEmail": "sara@example.com", "attendanceDate": "2025-01-04", "value": "P"}),
        ]
    )
    kpis = [kpi_from_document("k1", {"userId": "u1", "month": "January", "year": "2025", "score": 110})]

    for result in evaluate_all(employees, tasks, build_attendance_map(attendance), kpis, month=1, year=2025):
        print(result.to_dict())


if __name__ == "__main__":
    main()
