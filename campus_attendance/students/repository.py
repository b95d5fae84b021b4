from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Roster interface.

    Note (DIP): services and the ledger depend on this interface, not on a concrete store.
    """

    def add(self, student: Student) -> None:
        raise NotImplementedError

    def find_by_student_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def current(self) -> Optional[Student]:
        raise NotImplementedError
