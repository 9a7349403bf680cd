"""Demo seed content for a fresh in-memory store."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Tuple

from ..core.constants import DEFAULT_CLASS_NAME, DEFAULT_SECTION
from ..core.enums import Importance
from ..schedules.model import ClassSchedule, Lesson, Period


@dataclass(frozen=True)
class SeedStudent:
    name: str
    class_name: str
    section: str


@dataclass(frozen=True)
class SeedAnnouncement:
    title: str
    content: str
    start_date: datetime
    end_date: Optional[datetime]
    importance: Importance


@dataclass(frozen=True)
class SeedData:
    students: Tuple[SeedStudent, ...] = ()
    announcements: Tuple[SeedAnnouncement, ...] = ()
    default_schedule: ClassSchedule = field(default_factory=lambda: build_default_schedule())
    class_schedules: Tuple[ClassSchedule, ...] = ()


_DAYS = ("الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس")

_PERIODS = (
    Period("الأولى", "7:30 - 8:15"),
    Period("الثانية", "8:15 - 9:00"),
    Period("الثالثة", "9:00 - 9:45"),
    Period("الفسحة", "9:45 - 10:15"),
    Period("الرابعة", "10:15 - 11:00"),
    Period("الخامسة", "11:00 - 11:45"),
    Period("السادسة", "11:45 - 12:30"),
)

# (subject, teacher) per teaching period; index 3 is the break.
_WEEK = {
    "الأحد": {
        0: ("رياضيات", "أ. محمد"),
        1: ("لغة عربية", "أ. خالد"),
        2: ("علوم", "أ. أحمد"),
        4: ("تربية إسلامية", "أ. عبدالله"),
        5: ("لغة إنجليزية", "أ. فهد"),
        6: ("حاسب آلي", "أ. سعد"),
    },
    "الاثنين": {
        0: ("علوم", "أ. أحمد"),
        1: ("رياضيات", "أ. محمد"),
        2: ("لغة عربية", "أ. خالد"),
        4: ("لغة إنجليزية", "أ. فهد"),
        5: ("تربية بدنية", "أ. ماجد"),
        6: ("تربية إسلامية", "أ. عبدالله"),
    },
    "الثلاثاء": {
        0: ("لغة عربية", "أ. خالد"),
        1: ("علوم", "أ. أحمد"),
        2: ("رياضيات", "أ. محمد"),
        4: ("تربية بدنية", "أ. ماجد"),
        5: ("تربية إسلامية", "أ. عبدالله"),
        6: ("لغة إنجليزية", "أ. فهد"),
    },
    "الأربعاء": {
        0: ("تربية إسلامية", "أ. عبدالله"),
        1: ("لغة إنجليزية", "أ. فهد"),
        2: ("علوم", "أ. أحمد"),
        4: ("رياضيات", "أ. محمد"),
        5: ("حاسب آلي", "أ. سعد"),
        6: ("لغة عربية", "أ. خالد"),
    },
    "الخميس": {
        0: ("لغة إنجليزية", "أ. فهد"),
        1: ("حاسب آلي", "أ. سعد"),
        2: ("تربية بدنية", "أ. ماجد"),
        4: ("لغة عربية", "أ. خالد"),
        5: ("علوم", "أ. أحمد"),
        6: ("رياضيات", "أ. محمد"),
    },
}


def build_default_schedule() -> ClassSchedule:
    lessons = tuple(
        Lesson(day=day, period_index=idx, subject=subject, teacher=teacher)
        for day in _DAYS
        for idx, (subject, teacher) in sorted(_WEEK[day].items())
    )
    return ClassSchedule(
        class_name=DEFAULT_CLASS_NAME,
        section=DEFAULT_SECTION,
        days=_DAYS,
        periods=_PERIODS,
        lessons=lessons,
    )


def demo_seed(now: datetime) -> SeedData:
    """Five students in two sections, two announcements and the default timetable."""
    students = (
        SeedStudent("أحمد محمد العمري", "الثالث", "أ"),
        SeedStudent("خالد عبدالله السالم", "الثالث", "أ"),
        SeedStudent("فهد سعد الغامدي", "الثالث", "أ"),
        SeedStudent("محمد علي السعدي", "الثالث", "ب"),
        SeedStudent("عبدالله محمد الحربي", "الثالث", "ب"),
    )
    announcements = (
        SeedAnnouncement(
            title="اجتماع أولياء الأمور",
            content="سيعقد اجتماع أولياء الأمور يوم الخميس القادم الساعة 6 مساءً.",
            start_date=now,
            end_date=now + timedelta(days=5),
            importance=Importance.URGENT,
        ),
        SeedAnnouncement(
            title="الاختبارات النهائية",
            content="تبدأ الاختبارات النهائية يوم الأحد القادم. يرجى الاستعداد.",
            start_date=now - timedelta(days=2),
            end_date=now + timedelta(days=15),
            importance=Importance.IMPORTANT,
        ),
    )
    return SeedData(students=students, announcements=announcements, default_schedule=build_default_schedule())
