from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status recorded for a student."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Importance(str, Enum):
    NORMAL = "normal"
    IMPORTANT = "important"
    URGENT = "urgent"


class ActivityType(str, Enum):
    """Kinds of entries shown in the dashboard activity feed."""

    ATTENDANCE = "attendance"
    ABSENCE = "absence"
    LATE = "late"
    VIOLATION = "violation"


class ReportType(str, Enum):
    ATTENDANCE = "attendance"
    BEHAVIOR = "behavior"
    STATISTICS = "statistics"


class ReportPeriod(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class DeleteOutcome(str, Enum):
    """Result of a delete-by-id. Both values count as success."""

    REMOVED = "removed"
    ALREADY_ABSENT = "already_absent"
