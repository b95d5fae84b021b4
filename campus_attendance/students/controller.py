from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def _text(data: dict, key: str) -> str:
    # null and non-string JSON values count as missing
    value = data.get(key)
    return value if isinstance(value, str) else ""


def register(app: Flask, container: Container) -> None:
    @app.route("/students/register", methods=["POST"], endpoint="students_register")
    def students_register():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            data = {}
        try:
            student = container.registration_service.register(
                name=_text(data, "name"),
                email=_text(data, "email"),
                student_id=_text(data, "student_id"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({
            "success": True,
            "message": "Registration successful!",
            "student": {"id": student.id, "name": student.name, "student_id": student.student_id},
        }), 201

    @app.route("/students/me", methods=["GET"], endpoint="students_me")
    def students_me():
        info = container.registration_service.account_info()
        if not info:
            return jsonify({"success": False, "message": "No student registered"}), 404
        return jsonify({"success": True, "account": info})
