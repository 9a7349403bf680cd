from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: register and look up students."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def create_student(self, *, name: str, class_name: str, section: str) -> Student:
        name = require_non_empty(name, "name")
        class_name = require_non_empty(class_name, "className")
        section = require_non_empty(section, "section")

        student = self._students.create(name=name, class_name=class_name, section=section)
        logger.info("Created student %s in %s/%s", student.student_id, class_name, section)
        return student

    def get_student(self, student_id: int) -> Student:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFoundError("Student", int(student_id))
        return student

    def list_students(
        self,
        *,
        class_name: Optional[str] = None,
        section: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Sequence[Student]:
        students = self._students.list(class_name=optional_text(class_name), section=optional_text(section))

        needle = optional_text(search)
        if needle:
            needle = needle.casefold()
            students = [s for s in students if needle in s.name.casefold()]
        return list(students)

    def count(self) -> int:
        return self._students.count()
