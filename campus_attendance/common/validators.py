from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_suffix(value: str, suffix: str, message: str) -> str:
    if not value.endswith(suffix):
        raise ValidationError(message)
    return value
