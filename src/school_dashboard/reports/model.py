from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .windows.base import DateWindow


@dataclass(frozen=True)
class AttendanceReport:
    """Aggregate handed to the PDF collaborator; needs no further lookups."""

    total_students: int
    present_count: int
    absent_count: int
    late_count: int
    date: str
    class_name: Optional[str] = None
    section: Optional[str] = None

    def to_dict(self) -> dict:
        out = {
            "totalStudents": self.total_students,
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "lateCount": self.late_count,
            "date": self.date,
        }
        if self.class_name is not None:
            out["className"] = self.class_name
        if self.section is not None:
            out["section"] = self.section
        return out


@dataclass
class StudentReportRow:
    student_id: int
    name: str
    class_name: str
    section: str
    present: int = 0
    absent: int = 0
    late: int = 0
    excused: int = 0

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "name": self.name,
            "class_name": self.class_name,
            "section": self.section,
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "excused": self.excused,
        }


@dataclass(frozen=True)
class ReportData:
    report: AttendanceReport
    window: DateWindow
    rows: List[StudentReportRow] = field(default_factory=list)
