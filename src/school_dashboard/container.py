from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .announcements.memory_announcement_repository import MemoryAnnouncementRepository
from .announcements.service import AnnouncementService
from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.service import AttendanceService
from .behavior.memory_violation_repository import MemoryViolationRepository
from .behavior.service import BehaviorService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_RECENT_ACTIVITY_LIMIT
from .dashboard.service import DashboardService
from .reports.factory import ReportWindowFactory
from .reports.service import ReportService
from .schedules.memory_schedule_repository import MemoryScheduleRepository
from .schedules.service import ScheduleService
from .storage.seed import SeedData
from .students.memory_student_repository import MemoryStudentRepository
from .students.service import StudentService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    students_repo: MemoryStudentRepository
    attendance_repo: MemoryAttendanceRepository
    violations_repo: MemoryViolationRepository
    announcements_repo: MemoryAnnouncementRepository
    schedules_repo: MemoryScheduleRepository

    student_service: StudentService
    attendance_service: AttendanceService
    behavior_service: BehaviorService
    announcement_service: AnnouncementService
    schedule_service: ScheduleService
    dashboard_service: DashboardService
    report_service: ReportService


def build_container(
    *,
    seed: Optional[SeedData] = None,
    clock: Callable[[], datetime] = now_local,
    activity_limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT,
) -> Container:
    seed = seed or SeedData()

    students_repo = MemoryStudentRepository()
    attendance_repo = MemoryAttendanceRepository()
    violations_repo = MemoryViolationRepository()
    announcements_repo = MemoryAnnouncementRepository()
    schedules_repo = MemoryScheduleRepository(seed.default_schedule, seed.class_schedules)

    created_at = clock()
    for s in seed.students:
        students_repo.create(name=s.name, class_name=s.class_name, section=s.section)
    for a in seed.announcements:
        announcements_repo.create(
            title=a.title,
            content=a.content,
            start_date=a.start_date,
            end_date=a.end_date,
            importance=a.importance,
            created_at=created_at,
        )
    if seed.students or seed.announcements:
        logger.info("Seeded %d students, %d announcements", len(seed.students), len(seed.announcements))

    student_service = StudentService(students_repo)
    attendance_service = AttendanceService(attendance_repo, students_repo, clock=clock)
    behavior_service = BehaviorService(violations_repo, students_repo, clock=clock)
    announcement_service = AnnouncementService(announcements_repo, clock=clock)
    schedule_service = ScheduleService(schedules_repo)
    dashboard_service = DashboardService(
        attendance_service,
        announcement_service,
        attendance_repo,
        violations_repo,
        students_repo,
        activity_limit=activity_limit,
    )
    report_service = ReportService(
        attendance_repo,
        students_repo,
        clock=clock,
        window_factory=ReportWindowFactory(),
    )

    return Container(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        violations_repo=violations_repo,
        announcements_repo=announcements_repo,
        schedules_repo=schedules_repo,
        student_service=student_service,
        attendance_service=attendance_service,
        behavior_service=behavior_service,
        announcement_service=announcement_service,
        schedule_service=schedule_service,
        dashboard_service=dashboard_service,
        report_service=report_service,
    )
