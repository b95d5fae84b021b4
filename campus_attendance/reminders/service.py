from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Callable

from ..core.constants import REMINDER_BODY, REMINDER_IDENTIFIER, REMINDER_TITLE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReminderSchedule:
    """Daily recurring reminder fired at the start of the attendance window."""

    start: time
    end: time
    identifier: str = REMINDER_IDENTIFIER
    title: str = REMINDER_TITLE
    body: str = REMINDER_BODY

    def next_trigger(self, now: datetime) -> datetime:
        candidate = datetime.combine(now.date(), self.start)
        if candidate <= now:
            candidate += timedelta(days=1)
        return candidate

    def is_open(self, now: datetime) -> bool:
        return self.start <= now.time() < self.end

    def window_label(self) -> str:
        def _fmt(t: time) -> str:
            return t.strftime("%I:%M %p")

        return f"{_fmt(self.start)} - {_fmt(self.end)}"


class ReminderDispatcher:
    """Routes notification responses to the UI (focus the attendance screen)."""

    def __init__(self, schedule: ReminderSchedule):
        self._schedule = schedule
        self._listeners: list[Callable[[], object]] = []

    @property
    def schedule(self) -> ReminderSchedule:
        return self._schedule

    def subscribe(self, listener: Callable[[], object]) -> None:
        self._listeners.append(listener)

    def handle_response(self, identifier: str) -> bool:
        if identifier != self._schedule.identifier:
            return False

        logger.debug("Reminder opened, focusing attendance screen")
        for listener in self._listeners:
            listener()
        return True
