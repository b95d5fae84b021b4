from __future__ import annotations

from datetime import datetime, time

from ..core.constants import EXPORT_DATETIME_FORMAT


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now()


def parse_clock(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value, "%H:%M").time()


def format_export_datetime(value: datetime) -> str:
    return value.strftime(EXPORT_DATETIME_FORMAT)
