from __future__ import annotations

import threading

from flask import Flask, jsonify

from ..common.datetime_utils import format_export_datetime
from ..container import Container
from ..core.exceptions import ConcurrentAttemptError


def register(app: Flask, container: Container) -> None:
    # Only one attempt may be outstanding (the button is disabled while authenticating).
    attempt_lock = threading.Lock()

    async def evaluate_exclusive(student_id: str):
        if not attempt_lock.acquire(blocking=False):
            raise ConcurrentAttemptError("An attendance attempt is already in progress")
        try:
            return await container.pipeline.evaluate(student_id)
        finally:
            attempt_lock.release()

    @app.route("/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    async def attendance_mark():
        student = container.registration_service.current_student()
        if not student:
            return jsonify({"success": False, "message": "Please register before marking attendance"}), 400

        try:
            outcome = await evaluate_exclusive(student.student_id)
        except ConcurrentAttemptError as e:
            return jsonify({"success": False, "message": str(e)}), 409

        return jsonify({
            "success": outcome.is_success,
            "status": outcome.status.value,
            "reason": outcome.reason.value if outcome.reason else None,
            "message": outcome.message,
        })

    @app.route("/attendance/history", methods=["GET"], endpoint="attendance_history")
    def attendance_history():
        rows = []
        for record in container.ledger.all_records():
            student = container.students_repo.find_by_student_id(record.student_id)
            if not student:
                continue
            rows.append({
                "name": student.name,
                "student_id": student.student_id,
                "date": format_export_datetime(record.timestamp),
            })
        return jsonify({"records": rows})

    @app.route("/attendance/export", methods=["POST"], endpoint="attendance_export")
    def attendance_export():
        path = container.export_service.export_snapshot()
        # Export failures are not surfaced to the user.
        return jsonify({"success": True, "message": "Export completed successfully!", "file": path.name if path else None})

    @app.route("/attendance/file-location", methods=["GET"], endpoint="attendance_file_location")
    def attendance_file_location():
        path = container.export_service.attendance_file_path
        return jsonify({"message": f"File location:\n{path.resolve()}", "path": str(path.resolve())})
