from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..biometric.gate import BiometricGate
from ..common.datetime_utils import now_local
from ..core.constants import BIOMETRIC_REASON
from ..core.enums import AuthorizationState, BlockReason
from ..geofence.engine import GeofenceEngine
from ..location.gate import LocationGate
from ..network.gate import NetworkTrustGate
from .ledger import AttendanceLedger
from .model import AttendanceRecord, PipelineOutcome

logger = logging.getLogger(__name__)


class AttendancePipeline:
    """Attendance eligibility pipeline.

    Gates run in a fixed order and the first failure short-circuits:
    network trust -> location permission -> location fix -> geofence ->
    biometric availability -> biometric challenge. A record is appended only
    when all of them pass. Nothing is retried inside one ``evaluate`` call;
    the caller re-invokes after the user fixes the blocking condition.

    Note: Not reentrant. Callers must not overlap ``evaluate`` calls.
    """

    def __init__(
        self,
        network: NetworkTrustGate,
        location: LocationGate,
        geofence: GeofenceEngine,
        biometric: BiometricGate,
        ledger: AttendanceLedger,
        *,
        on_commit: Optional[Callable[[AttendanceRecord], object]] = None,
        clock: Callable[[], datetime] = now_local,
        biometric_reason: str = BIOMETRIC_REASON,
    ):
        self._network = network
        self._location = location
        self._geofence = geofence
        self._biometric = biometric
        self._ledger = ledger
        self._on_commit = on_commit
        self._clock = clock
        self._biometric_reason = biometric_reason
        self.is_authenticating = False

    async def evaluate(self, student_id: str) -> PipelineOutcome:
        if self._network.is_untrusted_network_active():
            return self._blocked(BlockReason.VPN_ACTIVE)

        state = self._location.authorization_state
        if state.is_refused:
            return self._blocked(BlockReason.LOCATION_DENIED)
        if state == AuthorizationState.NOT_DETERMINED:
            self._location.request_permission()
            return self._blocked(BlockReason.AWAITING_PERMISSION)

        fix = self._location.current_fix()
        if fix is None:
            self._location.start_updating()
            return self._blocked(BlockReason.AWAITING_FIX)

        if not self._geofence.is_within_campus(fix):
            return self._blocked(BlockReason.OUTSIDE_CAMPUS)

        if not self._biometric.can_challenge():
            return self._blocked(BlockReason.BIOMETRIC_UNAVAILABLE)

        self.is_authenticating = True
        try:
            authenticated = await self._biometric.challenge(self._biometric_reason)
        finally:
            self.is_authenticating = False

        if not authenticated:
            return self._blocked(BlockReason.BIOMETRIC_FAILED)

        record = AttendanceRecord(student_id=student_id, timestamp=self._clock())
        self._ledger.append(record)
        logger.info("Attendance recorded for %s at %s", student_id, record.timestamp.isoformat())

        if self._on_commit:
            self._on_commit(record)
        return PipelineOutcome.success(record)

    def _blocked(self, reason: BlockReason) -> PipelineOutcome:
        logger.info("Attendance blocked: %s", reason.value)
        return PipelineOutcome.blocked(reason)
