from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty, require_suffix
from ..core.constants import DEFAULT_EMAIL_SUFFIX, DEFAULT_UNIVERSITY_NAME
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class RegistrationService:
    """Use case: one-time student registration and account info."""

    def __init__(
        self,
        students: StudentRepository,
        *,
        email_suffix: str = DEFAULT_EMAIL_SUFFIX,
        university_name: str = DEFAULT_UNIVERSITY_NAME,
    ):
        self._students = students
        self._email_suffix = email_suffix
        self._university_name = university_name

    def register(self, *, name: str, email: str, student_id: str) -> Student:
        name = require_non_empty(name, "Full Name")
        email = require_non_empty(email, "College Email")
        student_id = require_non_empty(student_id, "Student ID")
        require_suffix(email, self._email_suffix, "Please use your university email address")

        student = Student(name=name, email=email, student_id=student_id)
        self._students.add(student)
        logger.info("Registered student %s", student.student_id)
        return student

    def current_student(self) -> Optional[Student]:
        return self._students.current()

    def account_info(self) -> Optional[dict]:
        student = self._students.current()
        if not student:
            return None
        return {
            "name": student.name,
            "email": student.email,
            "student_id": student.student_id,
            "university": self._university_name,
        }
