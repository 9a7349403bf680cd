from __future__ import annotations

from typing import Optional, Sequence

from ..storage.memory import MemoryTable
from .model import Student
from .repository import StudentRepository


class MemoryStudentRepository(StudentRepository):
    def __init__(self, table: Optional[MemoryTable[Student]] = None):
        self._table = table or MemoryTable("students")

    def create(self, *, name: str, class_name: str, section: str) -> Student:
        return self._table.insert(
            lambda student_id: Student(student_id=student_id, name=name, class_name=class_name, section=section)
        )

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._table.get(student_id)

    def list(self, *, class_name: Optional[str] = None, section: Optional[str] = None) -> Sequence[Student]:
        out = []
        for s in self._table.all():
            if class_name is not None and s.class_name != class_name:
                continue
            if section is not None and s.section != section:
                continue
            out.append(s)
        return out

    def count(self) -> int:
        return len(self._table)
