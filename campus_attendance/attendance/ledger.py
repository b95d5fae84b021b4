from __future__ import annotations

import csv
import io
import threading
from typing import Iterable, Sequence

from ..common.datetime_utils import format_export_datetime
from ..core.constants import EXPORT_HEADER
from ..students.model import Student
from .model import AttendanceRecord


def format_row(student: Student, record: AttendanceRecord) -> list[str]:
    # Date and time share one field; the "Time" column stays empty.
    return [student.name, student.student_id, student.email, format_export_datetime(record.timestamp)]


def write_rows(rows: Iterable[Sequence[str]], *, header: bool) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    if header:
        writer.writerow(EXPORT_HEADER)
    writer.writerows(rows)
    return buf.getvalue()


def resolve(roster: Iterable[Student], student_id: str):
    for student in roster:
        if student.student_id == student_id:
            return student
    return None


class AttendanceLedger:
    """Append-only sequence of attendance records.

    Duplicates (same student, same day) are allowed; nothing is deduplicated.
    """

    def __init__(self):
        self._records: list[AttendanceRecord] = []
        self._lock = threading.Lock()

    def append(self, record: AttendanceRecord) -> None:
        with self._lock:
            self._records.append(record)

    def all_records(self) -> Sequence[AttendanceRecord]:
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def serialize(self, roster: Iterable[Student]) -> str:
        """Header plus one CSV row per record resolved against the roster.

        Records whose student is not in the roster are dropped from the output.
        """
        roster = list(roster)
        rows = []
        for record in self.all_records():
            student = resolve(roster, record.student_id)
            if student:
                rows.append(format_row(student, record))
        return write_rows(rows, header=True)
