from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import BlockReason, OutcomeStatus

OUTCOME_MESSAGES = {
    BlockReason.VPN_ACTIVE: "Please disconnect from VPN before marking attendance. VPN usage is not allowed for attendance marking.",
    BlockReason.LOCATION_DENIED: "Location access is denied. Please enable location services in Settings to mark attendance.",
    BlockReason.AWAITING_PERMISSION: "Please grant location access and try again.",
    BlockReason.AWAITING_FIX: "Waiting for location... Please try again in a moment.",
    BlockReason.OUTSIDE_CAMPUS: "You must be within the campus boundaries to mark attendance.",
    BlockReason.BIOMETRIC_UNAVAILABLE: "Face ID is not available on this device.",
    BlockReason.BIOMETRIC_FAILED: "Face ID authentication failed. Please try again.",
}
SUCCESS_MESSAGE = "Attendance marked successfully!"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one committed attendance mark. Never mutated."""

    student_id: str
    timestamp: datetime


@dataclass(frozen=True)
class PipelineOutcome:
    status: OutcomeStatus
    reason: Optional[BlockReason] = None
    record: Optional[AttendanceRecord] = None

    @classmethod
    def success(cls, record: AttendanceRecord) -> "PipelineOutcome":
        return cls(status=OutcomeStatus.SUCCESS, record=record)

    @classmethod
    def blocked(cls, reason: BlockReason) -> "PipelineOutcome":
        return cls(status=OutcomeStatus.BLOCKED, reason=reason)

    @property
    def is_success(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    @property
    def message(self) -> str:
        if self.reason is None:
            return SUCCESS_MESSAGE
        return OUTCOME_MESSAGES[self.reason]
