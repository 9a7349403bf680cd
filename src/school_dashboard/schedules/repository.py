from __future__ import annotations

from typing import Optional, Protocol

from .model import ClassSchedule


class ScheduleRepository(Protocol):
    def get_for_class(self, *, class_name: str, section: str) -> Optional[ClassSchedule]:
        """Timetable seeded for exactly this class section, if any."""

        raise NotImplementedError

    def get_default(self) -> ClassSchedule:
        raise NotImplementedError
