"""Use case: best-effort detection of the local browser version and bitness."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chromedriver_picker.l1_entities.detection import DetectionResult, HighEntropyValues
from chromedriver_picker.l2_use_cases.ports.browser_signals import BrowserSignals
from chromedriver_picker.l2_use_cases.utils.signal_parsing import (
    bitness_from_user_agent,
    version_from_brands,
    version_from_user_agent,
)

log = logging.getLogger('cdpicker.detect')

HIGH_ENTROPY_HINTS = ('fullVersionList', 'bitness')

Provider = Callable[[], str | None]


def first_available(providers: list[Provider]) -> str | None:
    """Return the first non-empty provider value. Provider errors count as no value."""
    for provider in providers:
        try:
            value = provider()
        except Exception as e:
            log.debug('Detection provider %s failed: %s', getattr(provider, '__name__', provider), e)
            continue
        if value:
            return value
    return None


class DetectEnvironmentUseCase:
    """Tiered detection: structured client hints first, then the identification string.

    Never raises. Each field of the result is independently None when nothing
    could be obtained.
    """

    def __init__(self, signals: BrowserSignals) -> None:
        self._signals = signals

    async def execute(self) -> DetectionResult:
        high = await self._high_entropy_values()

        def hinted_version() -> str | None:
            return version_from_brands(high.full_version_list) if high is not None else None

        def hinted_bitness() -> str | None:
            return high.bitness if high is not None else None

        def ua_version() -> str | None:
            return version_from_user_agent(self._signals.user_agent())

        def ua_bitness() -> str | None:
            return bitness_from_user_agent(self._signals.user_agent())

        result = DetectionResult(
            version=first_available([hinted_version, ua_version]),
            bitness=first_available([hinted_bitness, ua_bitness]),
        )
        log.info('Detection finished: version=%s bitness=%s', result.version, result.bitness)
        return result

    async def _high_entropy_values(self) -> HighEntropyValues | None:
        try:
            if not self._signals.supports_high_entropy():
                return None
            return await self._signals.get_high_entropy_values(HIGH_ENTROPY_HINTS)
        except Exception as e:
            log.debug('High-entropy values unavailable: %s', e)
            return None
