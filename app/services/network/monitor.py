"""Connectivity signal - online flag with change notification."""

from collections.abc import Callable

import httpx
from loguru import logger

from settings import API_BASE_URL

Listener = Callable[[bool], None]


class NetworkMonitor:
    """Holds the current online state and notifies listeners when it flips."""

    def __init__(self, online: bool = True):
        self._online = online
        self._listeners: list[Listener] = []

    def is_online(self) -> bool:
        return self._online

    def set_online(self, online: bool) -> None:
        if online == self._online:
            return
        self._online = online
        logger.info("Network status changed: {}", "online" if online else "offline")
        for listener in list(self._listeners):
            listener(online)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def probe(
        self,
        url: str = API_BASE_URL,
        timeout: float = 3.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> bool:
        """HEAD ``url`` and update the state from the outcome."""
        try:
            async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
                resp = await client.head(url)
            online = resp.status_code < 500
        except httpx.HTTPError as e:
            logger.debug("Probe {} failed: {}", url, e)
            online = False
        self.set_online(online)
        return online
