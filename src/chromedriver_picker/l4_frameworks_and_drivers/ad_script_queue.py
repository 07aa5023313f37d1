"""Process-wide ad script queue — the single collaborator every ad banner talks to."""

from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger('cdpicker.ads')


@dataclass(frozen=True)
class AdSlotRequest:
    client: str
    slot: str
    position: str


class AdScriptQueue:
    """Collects slot requests. ``initialize`` runs at most once per process."""

    def __init__(self) -> None:
        self._client: str | None = None
        self._requests: list[AdSlotRequest] = []

    @property
    def initialized(self) -> bool:
        return self._client is not None

    @property
    def requests(self) -> tuple[AdSlotRequest, ...]:
        return tuple(self._requests)

    def initialize(self, client: str) -> bool:
        """Initialise the queue for *client*. Returns False if already initialised."""
        if self._client is not None:
            return False
        self._client = client
        log.info('Ad script queue initialised for %s', client)
        return True

    def push(self, request: AdSlotRequest) -> None:
        if self._client is None:
            raise RuntimeError('Ad script queue used before initialize()')
        self._requests.append(request)
        log.debug('Ad slot requested: %s', request)

    def reset(self) -> None:
        self._client = None
        self._requests.clear()


_QUEUE = AdScriptQueue()


def get_ad_queue() -> AdScriptQueue:
    return _QUEUE
