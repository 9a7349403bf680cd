from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student enrolled in a class section.

    Immutable once created; there is no update operation.
    """

    student_id: int
    name: str
    class_name: str
    section: str

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "className": self.class_name,
            "section": self.section,
        }
