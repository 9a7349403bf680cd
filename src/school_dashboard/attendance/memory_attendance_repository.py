from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..storage.memory import MemoryTable
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, table: Optional[MemoryTable[AttendanceRecord]] = None):
        self._table = table or MemoryTable("attendance_records")

    def get_for_student_and_date(self, student_id: int, attendance_date: date) -> Optional[AttendanceRecord]:
        return self._table.find(lambda r: r.student_id == student_id and r.attendance_date == attendance_date)

    def upsert(
        self,
        *,
        student_id: int,
        attendance_date: date,
        status: AttendanceStatus,
        notes: Optional[str],
        now: datetime,
    ) -> AttendanceRecord:
        with self._table.locked():
            existing = self.get_for_student_and_date(student_id, attendance_date)
            if existing:
                updated = replace(existing, status=status, notes=notes, updated_at=now)
                self._table.put(existing.attendance_id, updated)
                return updated

            return self._table.insert(
                lambda attendance_id: AttendanceRecord(
                    attendance_id=attendance_id,
                    student_id=student_id,
                    attendance_date=attendance_date,
                    status=status,
                    notes=notes,
                    created_at=now,
                    updated_at=now,
                )
            )

    def list_for_date(self, attendance_date: date) -> Sequence[AttendanceRecord]:
        return [r for r in self._table.all() if r.attendance_date == attendance_date]

    def list_range(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        return [r for r in self._table.all() if start_date <= r.attendance_date <= end_date]

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._table.all()
