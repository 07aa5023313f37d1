"""Port: browser identification signals."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from chromedriver_picker.l1_entities.detection import HighEntropyValues


class BrowserSignals(Protocol):
    """Read-only environment signals describing the local browser."""

    def supports_high_entropy(self) -> bool:
        """True when the structured high-entropy source can be queried at all."""
        ...

    async def get_high_entropy_values(self, hints: Sequence[str]) -> HighEntropyValues:
        """Return the requested high-entropy values. May raise on failure."""
        ...

    def user_agent(self) -> str:
        """Free-text identification string; empty when none is known."""
        ...
