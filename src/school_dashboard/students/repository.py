from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for students.

    Services depend on this interface, not on a concrete storage backend.
    """

    def create(self, *, name: str, class_name: str, section: str) -> Student:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def list(self, *, class_name: Optional[str] = None, section: Optional[str] = None) -> Sequence[Student]:
        """Exact-match filter; omitted fields are wildcards. Insertion order."""

        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
