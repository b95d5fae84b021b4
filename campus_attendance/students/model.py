from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Student:
    """Domain entity: a registered student.

    Note: ``student_id`` is the human-assigned number; uniqueness is not enforced.
    ``id`` is the opaque identifier.
    """

    name: str
    email: str
    student_id: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
