from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import optional_text, require_positive_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from .model import AttendanceRecord, AttendanceSummary, StudentAttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._students = students
        self._clock = clock

    def record(
        self,
        *,
        student_id: int,
        attendance_date: str,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        """Save a student's status for a day, overwriting any earlier save."""
        student_id = require_positive_id(student_id, "studentId")
        day = parse_iso_date(attendance_date, "date")
        status = AttendanceStatus(status)

        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student", student_id)

        record = self._attendance.upsert(
            student_id=student_id,
            attendance_date=day,
            status=status,
            notes=optional_text(notes),
            now=self._clock(),
        )
        logger.info("Attendance %s: student=%s date=%s status=%s", record.attendance_id, student_id, day, status.value)
        return record

    def list_for_class(
        self,
        *,
        class_name: Optional[str] = None,
        section: Optional[str] = None,
        attendance_date: Optional[str] = None,
    ) -> Sequence[StudentAttendanceRow]:
        students = self._students.list(class_name=optional_text(class_name), section=optional_text(section))

        date_s = optional_text(attendance_date)
        if not date_s:
            return [StudentAttendanceRow(student=s) for s in students]

        day = parse_iso_date(date_s, "date")
        by_student = {r.student_id: r for r in self._attendance.list_for_date(day)}

        rows = []
        for s in students:
            rec = by_student.get(s.student_id)
            if rec:
                rows.append(StudentAttendanceRow(student=s, status=rec.status, notes=rec.notes))
            else:
                rows.append(StudentAttendanceRow(student=s))
        return rows

    def summary(self) -> AttendanceSummary:
        """Counts for today's records; total is the current student count."""
        today = self._clock().date()
        records = self._attendance.list_for_date(today)

        return AttendanceSummary(
            total_students=self._students.count(),
            present_count=sum(1 for r in records if r.status == AttendanceStatus.PRESENT),
            absent_count=sum(1 for r in records if r.status == AttendanceStatus.ABSENT),
            late_count=sum(1 for r in records if r.status == AttendanceStatus.LATE),
        )
