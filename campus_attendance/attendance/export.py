from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import ATTENDANCE_FILE_NAME, SNAPSHOT_FILE_TEMPLATE
from ..students.repository import StudentRepository
from .ledger import AttendanceLedger, format_row, write_rows
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceExportService:
    """Writes the two CSV artifacts.

    - the append-log (header once on creation, then one line per record)
    - one-shot timestamped snapshots of the whole ledger

    Both are best-effort: write failures are logged and never raised. The two
    artifacts are not kept in sync with each other.
    """

    def __init__(self, export_dir: Path | str, students: StudentRepository, ledger: AttendanceLedger):
        self._export_dir = Path(export_dir)
        self._students = students
        self._ledger = ledger
        self._lock = threading.Lock()

    @property
    def attendance_file_path(self) -> Path:
        return self._export_dir / ATTENDANCE_FILE_NAME

    def append_record(self, record: AttendanceRecord) -> bool:
        student = self._students.find_by_student_id(record.student_id)
        if not student:
            logger.warning("No registered student for %s, record not exported", record.student_id)
            return False

        path = self.attendance_file_path
        line = write_rows([format_row(student, record)], header=False)
        with self._lock:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                if not path.exists():
                    path.write_text(write_rows([], header=True), encoding="utf-8")
                with path.open("a", encoding="utf-8", newline="") as f:
                    f.write(line)
            except OSError as e:
                logger.error("Failed to append attendance record to %s: %s", path, e)
                return False
        return True

    def export_snapshot(self) -> Optional[Path]:
        """Write the whole ledger to ``attendance_<unix-seconds>.csv``.

        Note: Names have one-second resolution. A second snapshot within the same
        second replaces the first; both hold the full ledger, so only the newer
        state survives.
        """
        csv_text = self._ledger.serialize(self._students.list_all())
        epoch = int(now_local().timestamp())
        path = self._export_dir / SNAPSHOT_FILE_TEMPLATE.format(epoch=epoch)

        with self._lock:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(csv_text, encoding="utf-8")
            except OSError as e:
                logger.error("Error writing CSV file %s: %s", path, e)
                return None

        logger.info("Exported %d records to %s", len(self._ledger), path)
        return path
