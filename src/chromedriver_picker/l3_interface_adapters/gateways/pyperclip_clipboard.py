"""Gateway: pyperclip-backed clipboard — implements Clipboard port."""

from __future__ import annotations

import pyperclip

from chromedriver_picker.l1_entities.errors import CopyFailedError


class PyperclipClipboard:
    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise CopyFailedError(str(e)) from e
