from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass(frozen=True)
class Period:
    name: str
    time: str


@dataclass(frozen=True)
class Lesson:
    day: str
    period_index: int
    subject: str
    teacher: str


@dataclass(frozen=True)
class ClassSchedule:
    """Weekly timetable of one class section (read-only)."""

    class_name: str
    section: str
    days: Tuple[str, ...] = ()
    periods: Tuple[Period, ...] = ()
    lessons: Tuple[Lesson, ...] = field(default_factory=tuple)

    def relabel(self, *, class_name: str, section: str) -> "ClassSchedule":
        return replace(self, class_name=class_name, section=section)

    def to_dict(self) -> dict:
        return {
            "className": self.class_name,
            "section": self.section,
            "days": list(self.days),
            "periods": [{"name": p.name, "time": p.time} for p in self.periods],
            "lessons": [
                {
                    "day": l.day,
                    "periodIndex": l.period_index,
                    "subject": l.subject,
                    "teacher": l.teacher,
                }
                for l in self.lessons
            ],
        }
