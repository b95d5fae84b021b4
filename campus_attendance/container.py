from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .attendance.export import AttendanceExportService
from .attendance.ledger import AttendanceLedger
from .attendance.pipeline import AttendancePipeline
from .biometric.gate import BiometricAuthenticator, BiometricGate, StaticAuthenticator
from .common.datetime_utils import parse_clock
from .core.constants import (
    DEFAULT_CAMPUS_POLYGON,
    DEFAULT_EMAIL_SUFFIX,
    DEFAULT_REMINDER_END,
    DEFAULT_REMINDER_START,
)
from .core.enums import AuthorizationState
from .geofence.engine import GeofenceEngine, GeofencePolygon
from .location.gate import LocationGate
from .location.service import InMemoryLocationService
from .network.gate import NetworkTrustGate, active_interface_names
from .reminders.service import ReminderDispatcher, ReminderSchedule
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import RegistrationService


@dataclass(frozen=True)
class Container:
    """Composition root. Owns every shared instance; nothing is a global singleton."""

    students_repo: InMemoryStudentRepository
    ledger: AttendanceLedger
    location_service: InMemoryLocationService

    network_gate: NetworkTrustGate
    location_gate: LocationGate
    geofence: GeofenceEngine
    biometric_gate: BiometricGate

    registration_service: RegistrationService
    export_service: AttendanceExportService
    pipeline: AttendancePipeline
    reminders: ReminderDispatcher


def build_container(
    settings,
    *,
    interface_source: Optional[Callable[[], Iterable[str]]] = None,
    authenticator: Optional[BiometricAuthenticator] = None,
) -> Container:
    students_repo = InMemoryStudentRepository()
    ledger = AttendanceLedger()

    location_service = InMemoryLocationService(
        AuthorizationState(getattr(settings, "INITIAL_LOCATION_STATE", AuthorizationState.NOT_DETERMINED.value))
    )
    if authenticator is None:
        authenticator = StaticAuthenticator(
            available=bool(getattr(settings, "BIOMETRIC_AVAILABLE", False)),
            approve=bool(getattr(settings, "BIOMETRIC_AUTO_APPROVE", False)),
        )

    network_gate = NetworkTrustGate(interface_source or active_interface_names)
    location_gate = LocationGate(location_service)
    # Ask for location access up front, as the attendance screen does on launch.
    location_gate.request_permission()
    geofence = GeofenceEngine(GeofencePolygon.from_points(getattr(settings, "CAMPUS_POLYGON", DEFAULT_CAMPUS_POLYGON)))
    biometric_gate = BiometricGate(authenticator)

    registration_service = RegistrationService(
        students_repo,
        email_suffix=getattr(settings, "INSTITUTION_EMAIL_SUFFIX", DEFAULT_EMAIL_SUFFIX),
    )
    export_service = AttendanceExportService(getattr(settings, "EXPORT_DIR", "exports"), students_repo, ledger)
    pipeline = AttendancePipeline(
        network_gate,
        location_gate,
        geofence,
        biometric_gate,
        ledger,
        on_commit=export_service.append_record,
    )
    reminders = ReminderDispatcher(
        ReminderSchedule(
            start=parse_clock(getattr(settings, "REMINDER_START", DEFAULT_REMINDER_START)),
            end=parse_clock(getattr(settings, "REMINDER_END", DEFAULT_REMINDER_END)),
        )
    )

    return Container(
        students_repo=students_repo,
        ledger=ledger,
        location_service=location_service,
        network_gate=network_gate,
        location_gate=location_gate,
        geofence=geofence,
        biometric_gate=biometric_gate,
        registration_service=registration_service,
        export_service=export_service,
        pipeline=pipeline,
        reminders=reminders,
    )
