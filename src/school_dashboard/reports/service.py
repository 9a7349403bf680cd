from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import optional_text
from ..core.enums import AttendanceStatus, ReportPeriod, ReportType
from ..core.exceptions import ReportNotImplementedError, ValidationError
from ..students.repository import StudentRepository
from .factory import ReportWindowFactory
from .model import AttendanceReport, ReportData, StudentReportRow
from .windows.base import DateWindow

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        window_factory: Optional[ReportWindowFactory] = None,
    ):
        self._attendance = attendance
        self._students = students
        self._clock = clock
        self._factory = window_factory or ReportWindowFactory()

    @staticmethod
    def parse_report_type(value: str) -> ReportType:
        try:
            report_type = ReportType(value)
        except ValueError:
            raise ValidationError("Invalid report type", field="type")
        if report_type != ReportType.ATTENDANCE:
            raise ReportNotImplementedError(report_type.value)
        return report_type

    def resolve_window(
        self,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
        period: Optional[str] = None,
    ) -> DateWindow:
        """Explicit start wins; otherwise the period (default: day) decides."""
        today = self._clock().date()
        start_s = optional_text(start)
        end_s = optional_text(end)
        period_s = optional_text(period)

        if start_s:
            start_d = parse_iso_date(start_s, "start")
            end_d = parse_iso_date(end_s, "end") if end_s else today
            if end_d < start_d:
                raise ValidationError("end must not be before start", field="end")
            return DateWindow(start=start_d, end=end_d)

        try:
            report_period = ReportPeriod(period_s) if period_s else None
        except ValueError:
            raise ValidationError("period must be one of: day, week, month", field="period")
        return self._factory.for_period(report_period).window(today=today)

    def build_attendance_report(
        self,
        *,
        class_name: Optional[str] = None,
        section: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        period: Optional[str] = None,
    ) -> ReportData:
        class_name = optional_text(class_name)
        section = optional_text(section)
        window = self.resolve_window(start=start, end=end, period=period)

        students = self._students.list(class_name=class_name, section=section)
        rows: Dict[int, StudentReportRow] = {
            s.student_id: StudentReportRow(
                student_id=s.student_id,
                name=s.name,
                class_name=s.class_name,
                section=s.section,
            )
            for s in students
        }

        for rec in self._attendance.list_range(start_date=window.start, end_date=window.end):
            row = rows.get(rec.student_id)
            if not row:
                continue
            if rec.status == AttendanceStatus.PRESENT:
                row.present += 1
            elif rec.status == AttendanceStatus.ABSENT:
                row.absent += 1
            elif rec.status == AttendanceStatus.LATE:
                row.late += 1
            else:
                row.excused += 1

        report = AttendanceReport(
            total_students=len(students),
            present_count=sum(r.present for r in rows.values()),
            absent_count=sum(r.absent for r in rows.values()),
            late_count=sum(r.late for r in rows.values()),
            date=window.label(),
            class_name=class_name,
            section=section,
        )
        logger.info("Attendance report %s class=%s section=%s", window.label(), class_name, section)
        return ReportData(report=report, window=window, rows=list(rows.values()))
