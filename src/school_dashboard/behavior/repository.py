from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import Severity
from .model import BehaviorViolation


class ViolationRepository(Protocol):
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
        raise NotImplementedError

    def list_all(self) -> Sequence[BehaviorViolation]:
        raise NotImplementedError

    def delete(self, violation_id: int) -> bool:
        """Returns False when nothing was stored under that id."""

        raise NotImplementedError
