from __future__ import annotations

from datetime import datetime

import pytest

from school_dashboard.behavior.memory_violation_repository import MemoryViolationRepository
from school_dashboard.behavior.service import BehaviorService
from school_dashboard.core.enums import DeleteOutcome, Severity
from school_dashboard.core.exceptions import NotFoundError, ValidationError
from school_dashboard.students.memory_student_repository import MemoryStudentRepository


def _service():
    students = MemoryStudentRepository()
    students.create(name="فهد سعد الغامدي", class_name="الثالث", section="أ")
    violations = MemoryViolationRepository()
    svc = BehaviorService(violations, students, clock=lambda: datetime(2025, 3, 12, 11, 5, 0))
    return svc, violations


def _record(svc, **overrides):
    fields = dict(
        student_id=1,
        violation_type="تأخر عن الحصة",
        description="وصل متأخراً عشر دقائق",
        violation_date="2025-03-12",
        severity=Severity.LOW,
    )
    fields.update(overrides)
    return svc.record_violation(**fields)


def test_violation_copies_student_name():
    svc, _ = _service()
    v = _record(svc, lesson_period="الثانية")

    assert v.student_name == "فهد سعد الغامدي"
    assert v.to_dict()["lessonPeriod"] == "الثانية"
    assert v.to_dict()["createdAt"] == "2025-03-12T11:05:00"


def test_unknown_student_is_not_found():
    svc, repo = _service()
    with pytest.raises(NotFoundError):
        _record(svc, student_id=7)
    assert repo.list_all() == []


def test_blank_description_is_rejected():
    svc, repo = _service()
    with pytest.raises(ValidationError):
        _record(svc, description="  ")
    assert repo.list_all() == []


def test_delete_is_idempotent():
    svc, repo = _service()
    v = _record(svc)

    assert svc.delete_violation(v.violation_id) == DeleteOutcome.REMOVED
    assert svc.delete_violation(v.violation_id) == DeleteOutcome.ALREADY_ABSENT
    assert svc.delete_violation(999) == DeleteOutcome.ALREADY_ABSENT
    assert repo.list_all() == []


def test_deleted_ids_are_not_reused():
    svc, _ = _service()
    first = _record(svc)
    svc.delete_violation(first.violation_id)
    second = _record(svc)

    assert second.violation_id == first.violation_id + 1
