from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import Severity


@dataclass(frozen=True)
class BehaviorViolation:
    """Domain entity: a recorded behavior violation.

    ``student_name`` is copied from the student when the violation is recorded
    and is never refreshed afterwards.
    """

    violation_id: int
    student_id: int
    student_name: str
    violation_type: str
    description: str
    violation_date: date
    severity: Severity
    created_at: datetime
    lesson_period: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.violation_id,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "violationType": self.violation_type,
            "description": self.description,
            "date": format_iso_date(self.violation_date),
            "lessonPeriod": self.lesson_period,
            "severity": self.severity.value,
            "createdAt": self.created_at.isoformat(),
        }
