from __future__ import annotations

from enum import Enum


class AuthorizationState(str, Enum):
    """Location permission states reported by the OS subsystem."""

    NOT_DETERMINED = "notDetermined"
    DENIED = "denied"
    RESTRICTED = "restricted"
    AUTHORIZED_WHILE_IN_USE = "authorizedWhileInUse"
    AUTHORIZED_ALWAYS = "authorizedAlways"

    @property
    def is_authorized(self) -> bool:
        return self in (AuthorizationState.AUTHORIZED_WHILE_IN_USE, AuthorizationState.AUTHORIZED_ALWAYS)

    @property
    def is_refused(self) -> bool:
        return self in (AuthorizationState.DENIED, AuthorizationState.RESTRICTED)


class BlockReason(str, Enum):
    """Why an attendance attempt was blocked. Every reason is user-actionable."""

    VPN_ACTIVE = "VPN active"
    LOCATION_DENIED = "location denied"
    AWAITING_PERMISSION = "awaiting permission"
    AWAITING_FIX = "awaiting fix"
    OUTSIDE_CAMPUS = "outside campus"
    BIOMETRIC_UNAVAILABLE = "biometric unavailable"
    BIOMETRIC_FAILED = "biometric failed"


class OutcomeStatus(str, Enum):
    SUCCESS = "SUCCESS"
    BLOCKED = "BLOCKED"
