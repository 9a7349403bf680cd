from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from .model import ClassSchedule
from .repository import ScheduleRepository


class MemoryScheduleRepository(ScheduleRepository):
    def __init__(self, default: ClassSchedule, overrides: Iterable[ClassSchedule] = ()):
        self._default = default
        self._by_class: Dict[Tuple[str, str], ClassSchedule] = {(s.class_name, s.section): s for s in overrides}

    def get_for_class(self, *, class_name: str, section: str) -> Optional[ClassSchedule]:
        return self._by_class.get((class_name, section))

    def get_default(self) -> ClassSchedule:
        return self._default
