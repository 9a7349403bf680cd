from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import optional_text, require_non_empty, require_positive_id
from ..core.enums import DeleteOutcome, Severity
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from .model import BehaviorViolation
from .repository import ViolationRepository

logger = logging.getLogger(__name__)


class BehaviorService:
    """Use case: record, list and remove behavior violations."""

    def __init__(
        self,
        violations: ViolationRepository,
        students: StudentRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._violations = violations
        self._students = students
        self._clock = clock

    def record_violation(
        self,
        *,
        student_id: int,
        violation_type: str,
        description: str,
        violation_date: str,
        severity: Severity,
        lesson_period: Optional[str] = None,
    ) -> BehaviorViolation:
        student_id = require_positive_id(student_id, "studentId")
        violation_type = require_non_empty(violation_type, "violationType")
        description = require_non_empty(description, "description")
        day = parse_iso_date(violation_date, "date")
        severity = Severity(severity)

        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student", student_id)

        violation = self._violations.create(
            student_id=student.student_id,
            student_name=student.name,
            violation_type=violation_type,
            description=description,
            violation_date=day,
            severity=severity,
            lesson_period=optional_text(lesson_period),
            now=self._clock(),
        )
        logger.info("Violation %s recorded for student %s (%s)", violation.violation_id, student_id, severity.value)
        return violation

    def list_violations(self) -> Sequence[BehaviorViolation]:
        return self._violations.list_all()

    def delete_violation(self, violation_id: int) -> DeleteOutcome:
        if self._violations.delete(int(violation_id)):
            logger.info("Violation %s deleted", violation_id)
            return DeleteOutcome.REMOVED
        logger.info("Violation %s already absent", violation_id)
        return DeleteOutcome.ALREADY_ABSENT
