from __future__ import annotations

from typing import Optional, Sequence

from .model import Student


class InMemoryStudentRepository:
    """Transient roster; lost on process restart.

    Lookup is a linear scan on ``student_id`` and returns the first match.
    """

    def __init__(self):
        self._students: list[Student] = []
        self._current: Optional[Student] = None

    def add(self, student: Student) -> None:
        self._students.append(student)
        self._current = student

    def find_by_student_id(self, student_id: str) -> Optional[Student]:
        for student in self._students:
            if student.student_id == student_id:
                return student
        return None

    def list_all(self) -> Sequence[Student]:
        return tuple(self._students)

    def current(self) -> Optional[Student]:
        return self._current
