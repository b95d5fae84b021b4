from __future__ import annotations

from typing import Protocol

from ..core.enums import AuthorizationState


class LocationService(Protocol):
    """Interface of the OS permission/location subsystem.

    Note: The subsystem only receives commands here. State changes and fixes flow
    back through ``LocationGate.on_authorization_changed`` / ``on_locations``.
    """

    def authorization_state(self) -> AuthorizationState:
        raise NotImplementedError

    def request_when_in_use_authorization(self) -> None:
        raise NotImplementedError

    def start_updating_location(self) -> None:
        raise NotImplementedError

    def stop_updating_location(self) -> None:
        raise NotImplementedError


class InMemoryLocationService:
    """Subsystem stand-in whose state is driven by reported events.

    The HTTP client (or a test) plays the role of the OS: it answers permission
    prompts and pushes fixes through the location controller.
    """

    def __init__(self, initial_state: AuthorizationState = AuthorizationState.NOT_DETERMINED):
        self.state = initial_state
        self.prompt_requests = 0
        self.updating = False

    def authorization_state(self) -> AuthorizationState:
        return self.state

    def request_when_in_use_authorization(self) -> None:
        self.prompt_requests += 1

    def start_updating_location(self) -> None:
        self.updating = True

    def stop_updating_location(self) -> None:
        self.updating = False

    @property
    def prompt_pending(self) -> bool:
        return self.prompt_requests > 0 and self.state == AuthorizationState.NOT_DETERMINED
