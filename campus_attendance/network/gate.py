from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping, Sequence

import psutil

from ..core.constants import TUNNEL_INTERFACE_MARKERS

logger = logging.getLogger(__name__)


def active_interface_names(stats: Callable[[], Mapping[str, object]] = psutil.net_if_stats) -> list[str]:
    """Names of interfaces that are up. Tunnel devices that exist but are down are skipped."""
    return [name for name, st in stats().items() if getattr(st, "isup", False)]


class NetworkTrustGate:
    """Reports whether a tunneling/VPN interface is active.

    Read failures are treated as "not connected" (fail-open). This is a known
    weak point and is only logged.
    """

    def __init__(
        self,
        interface_source: Callable[[], Iterable[str]] = active_interface_names,
        *,
        markers: Sequence[str] = TUNNEL_INTERFACE_MARKERS,
    ):
        self._interface_source = interface_source
        self._markers = tuple(markers)

    def is_untrusted_network_active(self) -> bool:
        try:
            names = list(self._interface_source())
        except Exception as e:
            logger.warning("Could not read network configuration, assuming no VPN: %s", e)
            return False

        for name in names:
            if any(marker in name for marker in self._markers):
                logger.info("Tunnel interface detected: %s", name)
                return True
        return False
