# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Network reachability tracking with synchronous listener notification."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .http import HttpClient, HttpRequest

logger = logging.getLogger(__name__)

Listener = Callable[[bool], None]
Probe = Callable[[], bool]

DEFAULT_PROBE_URL = "https://generativelanguage.googleapis.com/"


def http_probe(http_client: HttpClient, url: str = DEFAULT_PROBE_URL, timeout: float = 5.0) -> Probe:
    """Build a probe that treats any HTTP status as reachable."""

    def probe() -> bool:
        response = http_client.request(HttpRequest(url=url, method="HEAD", timeout=timeout, allow_redirects=False))
        return response.ok and response.status_code is not None

    return probe


class NetworkMonitor:
    """
    Owned reachability flag.

    The flag is seeded from `online`, else from `probe`, else assumed reachable.
    It changes only through `set_online` (connectivity gained/lost events) or
    `record_probe_result` (inference from probe outcomes). Listeners run
    synchronously, in registration order, once per change.
    """

    def __init__(self, online: bool | None = None, probe: Probe | None = None):
        self._probe = probe
        self._listeners: list[Listener] = []
        if online is not None:
            self._online = online
        elif probe is not None:
            self._online = self._run_probe(probe)
        else:
            self._online = True

    def is_online(self) -> bool:
        return self._online

    def is_network_available(self) -> bool:
        return self._online

    def set_online(self, status: bool) -> None:
        status = bool(status)
        if status == self._online:
            return
        logger.info("Network %s", "available" if status else "unavailable")
        self._online = status
        self._notify()

    def record_probe_result(self, ok: bool) -> None:
        self.set_online(ok)

    def refresh(self) -> bool:
        """Run the configured probe and record the outcome."""
        if self._probe is not None:
            self.record_probe_result(self._run_probe(self._probe))
        return self._online

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        for index, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[index]
                return

    def _notify(self) -> None:
        status = self._online
        for listener in list(self._listeners):
            try:
                listener(status)
            except Exception:  # noqa: BLE001
                logger.exception("Network listener %r failed", listener)

    @staticmethod
    def _run_probe(probe: Probe) -> bool:
        try:
            return bool(probe())
        except Exception as exc:  # noqa: BLE001
            logger.debug("Connectivity probe failed: %s", exc)
            return False


__all__ = ["NetworkMonitor", "http_probe"]
