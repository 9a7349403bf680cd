from __future__ import annotations

from datetime import date, datetime

import pytest

from school_dashboard.attendance.memory_attendance_repository import MemoryAttendanceRepository
from school_dashboard.core.enums import AttendanceStatus, ReportType
from school_dashboard.core.exceptions import ReportNotImplementedError, ValidationError
from school_dashboard.reports.service import ReportService
from school_dashboard.students.memory_student_repository import MemoryStudentRepository

NOW = datetime(2025, 3, 12, 9, 0, 0)


def _service():
    students = MemoryStudentRepository()
    students.create(name="A", class_name="الثالث", section="أ")
    students.create(name="B", class_name="الثالث", section="أ")
    students.create(name="C", class_name="الثالث", section="ب")
    students.create(name="D", class_name="الرابع", section="أ")

    attendance = MemoryAttendanceRepository()

    def mark(student_id, day, status):
        attendance.upsert(student_id=student_id, attendance_date=day, status=status, notes=None, now=NOW)

    mark(1, date(2025, 3, 12), AttendanceStatus.PRESENT)
    mark(2, date(2025, 3, 12), AttendanceStatus.ABSENT)
    mark(3, date(2025, 3, 12), AttendanceStatus.LATE)
    mark(4, date(2025, 3, 12), AttendanceStatus.PRESENT)
    mark(1, date(2025, 3, 10), AttendanceStatus.LATE)  # this week
    mark(2, date(2025, 3, 3), AttendanceStatus.ABSENT)  # this month, last week
    mark(1, date(2025, 2, 27), AttendanceStatus.ABSENT)  # last month

    return ReportService(attendance, students, clock=lambda: NOW)


def test_report_type_parsing():
    assert ReportService.parse_report_type("attendance") == ReportType.ATTENDANCE
    with pytest.raises(ReportNotImplementedError):
        ReportService.parse_report_type("behavior")
    with pytest.raises(ReportNotImplementedError):
        ReportService.parse_report_type("statistics")
    with pytest.raises(ValidationError):
        ReportService.parse_report_type("grades")


def test_default_is_today_for_all_classes():
    report = _service().build_attendance_report().report

    assert report.to_dict() == {
        "totalStudents": 4,
        "presentCount": 2,
        "absentCount": 1,
        "lateCount": 1,
        "date": "2025-03-12",
    }


def test_week_and_month_windows_widen_the_aggregation():
    svc = _service()

    week = svc.build_attendance_report(period="week").report
    assert (week.present_count, week.absent_count, week.late_count) == (2, 1, 2)
    assert week.date == "2025-03-09 to 2025-03-12"

    month = svc.build_attendance_report(period="month").report
    assert (month.present_count, month.absent_count, month.late_count) == (2, 2, 2)


def test_class_filter_limits_students_and_echoes_labels():
    report = _service().build_attendance_report(class_name="الثالث", section="أ", period="week").report

    assert report.total_students == 2
    assert (report.present_count, report.absent_count, report.late_count) == (1, 1, 1)
    assert report.class_name == "الثالث"
    assert report.to_dict()["section"] == "أ"


def test_explicit_start_wins_over_period():
    svc = _service()
    report = svc.build_attendance_report(start="2025-02-01", end="2025-02-28", period="day").report

    assert report.absent_count == 1
    assert report.present_count == 0
    assert report.date == "2025-02-01 to 2025-02-28"


def test_start_without_end_runs_to_today():
    window = _service().resolve_window(start="2025-03-10")
    assert (window.start, window.end) == (date(2025, 3, 10), date(2025, 3, 12))


def test_empty_query_values_are_absent():
    window = _service().resolve_window(start="", end="", period="")
    assert window.start == window.end == date(2025, 3, 12)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"period": "year"},
        {"start": "2025-03-12", "end": "2025-03-01"},
        {"start": "12-03-2025"},
    ],
)
def test_bad_window_queries_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        _service().resolve_window(**kwargs)


def test_per_student_rows_include_excused():
    svc = _service()
    data = svc.build_attendance_report(period="month", class_name="الثالث", section="أ")
    rows = {r.name: r.to_dict() for r in data.rows}

    assert rows["A"]["present"] == 1
    assert rows["A"]["late"] == 1
    assert rows["B"]["absent"] == 2
    assert rows["B"]["excused"] == 0
