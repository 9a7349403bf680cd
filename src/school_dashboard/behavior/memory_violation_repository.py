from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import Severity
from ..storage.memory import MemoryTable
from .model import BehaviorViolation
from .repository import ViolationRepository


class MemoryViolationRepository(ViolationRepository):
    def __init__(self, table: Optional[MemoryTable[BehaviorViolation]] = None):
        self._table = table or MemoryTable("behavior_violations")

    def create(
        self,
        *,
        student_id: int,
        student_name: str,
        violation_type: str,
        description: str,
        violation_date: date,
        severity: Severity,
        lesson_period: Optional[str],
        now: datetime,
    ) -> BehaviorViolation:
        return self._table.insert(
            lambda violation_id: BehaviorViolation(
                violation_id=violation_id,
                student_id=student_id,
                student_name=student_name,
                violation_type=violation_type,
                description=description,
                violation_date=violation_date,
                severity=severity,
                lesson_period=lesson_period,
                created_at=now,
            )
        )

    def list_all(self) -> Sequence[BehaviorViolation]:
        return self._table.all()

    def delete(self, violation_id: int) -> bool:
        return self._table.remove(violation_id)
