from __future__ import annotations

from typing import Optional

from ..common.validators import optional_text
from .model import ClassSchedule
from .repository import ScheduleRepository


class ScheduleService:
    """Serve the static timetable.

    A class section with its own seeded timetable gets that one; every other
    query gets the default template labelled with the requested class and
    section.
    """

    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def get_schedule(self, *, class_name: Optional[str] = None, section: Optional[str] = None) -> ClassSchedule:
        default = self._schedules.get_default()
        class_name = optional_text(class_name) or default.class_name
        section = optional_text(section) or default.section

        seeded = self._schedules.get_for_class(class_name=class_name, section=section)
        if seeded:
            return seeded
        return default.relabel(class_name=class_name, section=section)
