"""Ad banner — decorative advertising placeholder with a deferred, run-once slot request."""

from __future__ import annotations

import logging

from textual.timer import Timer
from textual.widgets import Static

from chromedriver_picker.l4_frameworks_and_drivers.ad_script_queue import (
    AdScriptQueue,
    AdSlotRequest,
    get_ad_queue,
)
from chromedriver_picker.l4_frameworks_and_drivers.messages import AdSlotInitialized

log = logging.getLogger('cdpicker.ads')


class AdBanner(Static):
    """Placeholder box for an ad slot. Has no data dependency on the resolver."""

    DEFAULT_CSS = """
    AdBanner {
        border: round $secondary;
        color: $text-muted;
        content-align: center middle;
        text-align: center;
        padding: 0 1;
    }
    AdBanner.side {
        width: 24;
        height: 1fr;
    }
    AdBanner.bottom {
        height: 5;
        margin-top: 1;
    }
    """

    def __init__(
        self,
        position: str,
        client: str,
        slot: str,
        init_delay: float = 0.01,
        queue: AdScriptQueue | None = None,
        **kwargs,
    ) -> None:
        super().__init__(f'Advertisement\n{client} · {slot}', **kwargs)
        self.position = position
        self._client = client
        self._slot = slot
        self._init_delay = init_delay
        self._queue = queue or get_ad_queue()
        self._timer: Timer | None = None
        self.initialized = False
        self.add_class('bottom' if position == 'bottom' else 'side')

    def on_mount(self) -> None:
        if self.initialized:
            return
        self._timer = self.set_timer(self._init_delay, self._init_slot)

    def on_unmount(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _init_slot(self) -> None:
        self._timer = None
        if self.initialized:
            return
        try:
            self._queue.initialize(self._client)
            self._queue.push(AdSlotRequest(client=self._client, slot=self._slot, position=self.position))
        except Exception as e:
            log.error('Error initializing ad slot %s: %s', self.position, e)
            return
        self.initialized = True
        self.post_message(AdSlotInitialized(self.position))
