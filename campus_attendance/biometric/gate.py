from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class BiometricAuthenticator(Protocol):
    """Interface of the device biometric subsystem."""

    def can_evaluate(self) -> bool:
        raise NotImplementedError

    async def evaluate(self, reason: str) -> bool:
        raise NotImplementedError


class StaticAuthenticator:
    """Configuration-driven device stand-in (development and tests)."""

    def __init__(self, *, available: bool, approve: bool):
        self._available = available
        self._approve = approve

    def can_evaluate(self) -> bool:
        return self._available

    async def evaluate(self, reason: str) -> bool:
        return self._available and self._approve


class BiometricGate:
    """Single proof-of-presence challenge.

    Every underlying failure (hardware error, user cancel, lockout) collapses to
    ``False``. Callers must check ``can_challenge()`` before challenging.
    """

    def __init__(self, authenticator: BiometricAuthenticator):
        self._authenticator = authenticator

    def can_challenge(self) -> bool:
        try:
            return bool(self._authenticator.can_evaluate())
        except Exception as e:
            logger.info("Biometric availability check failed: %s", e)
            return False

    async def challenge(self, reason: str) -> bool:
        try:
            return bool(await self._authenticator.evaluate(reason))
        except Exception as e:
            logger.info("Biometric challenge failed: %s", e)
            return False
