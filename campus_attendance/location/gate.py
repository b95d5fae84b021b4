from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.enums import AuthorizationState
from ..geofence.engine import Position
from .service import LocationService

logger = logging.getLogger(__name__)


class LocationGate:
    """State machine over the location permission plus the latest known fix.

    Transitions are driven only by subsystem callbacks:
    - authorized: begin continuous updates
    - denied/restricted: clear the cached fix and stop updates
    - notDetermined: ask again
    Every fix overwrites the cached one; there is no staleness window.
    """

    def __init__(self, service: LocationService):
        self._service = service
        self._state = service.authorization_state()
        self._fix: Optional[Position] = None
        self._updating = False

        if self._state.is_authorized:
            self._start()

    @property
    def authorization_state(self) -> AuthorizationState:
        return self._state

    @property
    def is_updating(self) -> bool:
        return self._updating

    def is_authorized(self) -> bool:
        return self._state.is_authorized

    def current_fix(self) -> Optional[Position]:
        if self._state.is_refused:
            return None
        return self._fix

    def request_permission(self) -> None:
        if self._state == AuthorizationState.NOT_DETERMINED:
            self._service.request_when_in_use_authorization()
        elif self._state.is_authorized:
            self._start()

    def start_updating(self) -> None:
        if self._state.is_authorized:
            self._start()

    def stop_updating(self) -> None:
        if self._updating:
            self._service.stop_updating_location()
            self._updating = False

    # Subsystem callbacks

    def on_authorization_changed(self, state: AuthorizationState) -> None:
        self._state = state
        logger.info("Location authorization changed: %s", state.value)

        if state.is_authorized:
            self._start()
        elif state.is_refused:
            self._fix = None
            self.stop_updating()
        else:
            self.request_permission()

    def on_locations(self, positions: Sequence[Position]) -> None:
        if not positions or self._state.is_refused:
            return
        self._fix = positions[-1]

    def on_error(self, error: Exception) -> None:
        logger.warning("Location error: %s", error)

    def _start(self) -> None:
        if not self._updating:
            self._service.start_updating_location()
            self._updating = True
