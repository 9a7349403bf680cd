from __future__ import annotations

from datetime import datetime
from typing import List, Sequence, Tuple

from ..announcements.model import Announcement
from ..announcements.service import AnnouncementService
from ..attendance.model import AttendanceSummary
from ..attendance.repository import AttendanceRepository
from ..attendance.service import AttendanceService
from ..behavior.repository import ViolationRepository
from ..core.constants import DEFAULT_RECENT_ACTIVITY_LIMIT
from ..core.enums import ActivityType, AttendanceStatus
from ..students.repository import StudentRepository
from .model import RecentActivity

_ATTENDANCE_ACTIVITY = {
    AttendanceStatus.PRESENT: (ActivityType.ATTENDANCE, "تسجيل حضور"),
    AttendanceStatus.LATE: (ActivityType.LATE, "تسجيل تأخر"),
    AttendanceStatus.ABSENT: (ActivityType.ABSENCE, "تسجيل غياب"),
    AttendanceStatus.EXCUSED: (ActivityType.ABSENCE, "تسجيل غياب بعذر"),
}
_VIOLATION_DESCRIPTION = "تسجيل مخالفة"
_UNKNOWN_STUDENT = "طالب غير معروف"


class DashboardService:
    """Read-only projections for the dashboard home page."""

    def __init__(
        self,
        attendance_service: AttendanceService,
        announcement_service: AnnouncementService,
        attendance: AttendanceRepository,
        violations: ViolationRepository,
        students: StudentRepository,
        *,
        activity_limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT,
    ):
        self._attendance_service = attendance_service
        self._announcement_service = announcement_service
        self._attendance = attendance
        self._violations = violations
        self._students = students
        self._activity_limit = int(activity_limit)

    def attendance_summary(self) -> AttendanceSummary:
        return self._attendance_service.summary()

    def recent_announcements(self) -> Sequence[Announcement]:
        return self._announcement_service.list_recent()

    def recent_activities(self) -> List[RecentActivity]:
        """Attendance saves and violations merged, newest first."""
        events: List[Tuple[datetime, ActivityType, str, str]] = []

        for rec in self._attendance.list_all():
            activity_type, description = _ATTENDANCE_ACTIVITY[rec.status]
            student = self._students.get_by_id(rec.student_id)
            name = student.name if student else _UNKNOWN_STUDENT
            # An overwrite is a new event at the time of the latest save.
            events.append((rec.updated_at, activity_type, description, name))

        for v in self._violations.list_all():
            events.append((v.created_at, ActivityType.VIOLATION, _VIOLATION_DESCRIPTION, v.student_name))

        events.sort(key=lambda e: e[0], reverse=True)

        return [
            RecentActivity(
                activity_id=i,
                activity_type=activity_type,
                description=description,
                student_name=name,
                created_at=created_at,
            )
            for i, (created_at, activity_type, description, name) in enumerate(events[: self._activity_limit], start=1)
        ]
