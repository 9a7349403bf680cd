from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance for one calendar day.

    Unique per (student_id, attendance_date). ``created_at`` is set on first
    insertion for that pair and kept on overwrite; ``updated_at`` moves with
    every save.
    """

    attendance_id: int
    student_id: int
    attendance_date: date
    status: AttendanceStatus
    created_at: datetime
    updated_at: datetime
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "date": format_iso_date(self.attendance_date),
            "status": self.status.value,
            "notes": self.notes,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class StudentAttendanceRow:
    """Read-model: a student joined with its record for the requested day."""

    student: Student
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        out = self.student.to_dict()
        if self.status is not None:
            out["attendanceStatus"] = self.status.value
        if self.notes is not None:
            out["notes"] = self.notes
        return out


@dataclass(frozen=True)
class AttendanceSummary:
    total_students: int
    present_count: int
    absent_count: int
    late_count: int

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "lateCount": self.late_count,
        }
