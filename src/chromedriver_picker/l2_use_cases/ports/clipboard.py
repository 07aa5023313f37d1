"""Port: system clipboard."""

from __future__ import annotations

from typing import Protocol


class Clipboard(Protocol):
    """Abstract clipboard — write-only."""

    def copy(self, text: str) -> None:
        """Place *text* on the clipboard. Raises CopyFailedError on failure."""
        ...
